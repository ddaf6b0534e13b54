"""
secp256k1 primitives using coincurve (libsecp256k1) for performance.
Falls back to ecdsa if coincurve is unavailable.

Both engines sign with RFC 6979 deterministic nonces and normalise to low-S,
so a given key and digest produce the same 64-byte r || s signature
whichever engine is active.
"""

import hashlib
import logging
from typing import Optional

from ecdsa import SECP256k1, BadSignatureError, MalformedPointError, SigningKey, VerifyingKey
from ecdsa.ellipticcurve import INFINITY
from ecdsa.util import sigdecode_string, sigencode_string_canonize

from . import config
from .constants import PRIVKEY_SIZE, SECP256K1_ORDER, SIGNATURE_SIZE
from .errors import InvalidKey, InvalidParameter

try:
    import coincurve
    from coincurve.ecdsa import cdata_to_der, der_to_cdata, deserialize_compact, serialize_compact
except ImportError:
    coincurve = None

logger = logging.getLogger(__name__)


def check_secret(privkey: bytes) -> bytes:
    """Return ``privkey`` as bytes if it is a scalar in [1, n-1]."""
    if not isinstance(privkey, (bytes, bytearray)) or len(privkey) != PRIVKEY_SIZE:
        raise InvalidKey(f"private key must be {PRIVKEY_SIZE} bytes")
    if not 0 < int.from_bytes(privkey, "big") < SECP256K1_ORDER:
        raise InvalidKey("private key is not a valid secp256k1 scalar")
    return bytes(privkey)


def _well_formed(signature: bytes) -> bool:
    # r and s must both parse as scalars below n; s must be low
    if len(signature) != SIGNATURE_SIZE:
        return False
    r, s = sigdecode_string(signature, SECP256K1_ORDER)
    return 0 < r < SECP256K1_ORDER and 0 < s <= SECP256K1_ORDER // 2


class CoincurveEngine:
    name = "coincurve"

    def get_pubkey(self, privkey: bytes, compressed: bool = True) -> bytes:
        return coincurve.PublicKey.from_valid_secret(privkey).format(compressed=compressed)

    def normalize_pubkey(self, pubkey: bytes) -> bytes:
        try:
            return coincurve.PublicKey(pubkey).format(compressed=True)
        except ValueError as exc:
            raise InvalidKey("public key is not a valid secp256k1 point") from exc

    def pubkey_tweak_add(self, pubkey: bytes, tweak: bytes) -> bytes:
        try:
            return coincurve.PublicKey(pubkey).add(tweak).format(compressed=True)
        except ValueError as exc:
            raise InvalidKey("public key tweak produced an invalid point") from exc

    def sign_digest(self, digest: bytes, privkey: bytes) -> bytes:
        der = coincurve.PrivateKey(privkey).sign(digest, hasher=None)
        return serialize_compact(der_to_cdata(der))

    def verify_digest(self, signature: bytes, digest: bytes, pubkey: bytes) -> bool:
        if not _well_formed(signature):
            return False
        try:
            der = cdata_to_der(deserialize_compact(signature))
            return coincurve.PublicKey(pubkey).verify(der, digest, hasher=None)
        except ValueError:
            return False


class EcdsaEngine:
    name = "ecdsa"

    def get_pubkey(self, privkey: bytes, compressed: bool = True) -> bytes:
        sk = SigningKey.from_string(privkey, curve=SECP256k1)
        return sk.get_verifying_key().to_string("compressed" if compressed else "uncompressed")

    def normalize_pubkey(self, pubkey: bytes) -> bytes:
        try:
            return VerifyingKey.from_string(pubkey, curve=SECP256k1).to_string("compressed")
        except MalformedPointError as exc:
            raise InvalidKey("public key is not a valid secp256k1 point") from exc

    def pubkey_tweak_add(self, pubkey: bytes, tweak: bytes) -> bytes:
        t = int.from_bytes(tweak, "big")
        if t >= SECP256K1_ORDER:
            raise InvalidKey("public key tweak produced an invalid point")
        try:
            vk = VerifyingKey.from_string(pubkey, curve=SECP256k1)
        except MalformedPointError as exc:
            raise InvalidKey("public key is not a valid secp256k1 point") from exc
        point = vk.pubkey.point + SECP256k1.generator * t
        if point == INFINITY:
            raise InvalidKey("public key tweak produced an invalid point")
        return VerifyingKey.from_public_point(point, curve=SECP256k1).to_string("compressed")

    def sign_digest(self, digest: bytes, privkey: bytes) -> bytes:
        sk = SigningKey.from_string(privkey, curve=SECP256k1, hashfunc=hashlib.sha256)
        return sk.sign_digest_deterministic(
            digest, hashfunc=hashlib.sha256, sigencode=sigencode_string_canonize
        )

    def verify_digest(self, signature: bytes, digest: bytes, pubkey: bytes) -> bool:
        # libsecp256k1 only accepts low-S; match it so engines agree
        if not _well_formed(signature):
            return False
        try:
            vk = VerifyingKey.from_string(pubkey, curve=SECP256k1)
            return vk.verify_digest(signature, digest, sigdecode=sigdecode_string)
        except (MalformedPointError, BadSignatureError):
            return False


ENGINES = {
    "coincurve": CoincurveEngine,
    "ecdsa": EcdsaEngine,
}


def load_engine(name: Optional[str] = None):
    """Resolve an engine by name; "auto" prefers coincurve."""
    name = (name or config.ENGINE).lower()
    if name == "auto":
        name = "coincurve" if coincurve is not None else "ecdsa"
    if name not in ENGINES:
        raise InvalidParameter(f"unknown secp256k1 engine {name!r}, expected one of {sorted(ENGINES)}")
    if name == "coincurve" and coincurve is None:
        raise InvalidParameter("secp256k1 engine 'coincurve' requested but coincurve is not installed")
    return ENGINES[name]()


_ENGINE = None


def _active_engine():
    """Resolve the configured engine on first use."""
    global _ENGINE
    if _ENGINE is None:
        _ENGINE = load_engine()
        logger.debug("Using %s secp256k1 engine", _ENGINE.name)
    return _ENGINE


def get_engine() -> str:
    return _active_engine().name


def get_pubkey(privkey: bytes, compressed: bool = True) -> bytes:
    return _active_engine().get_pubkey(check_secret(privkey), compressed=compressed)


def normalize_pubkey(pubkey: bytes) -> bytes:
    return _active_engine().normalize_pubkey(bytes(pubkey))


def pubkey_tweak_add(pubkey: bytes, tweak: bytes) -> bytes:
    return _active_engine().pubkey_tweak_add(pubkey, tweak)


def sign_digest(digest: bytes, privkey: bytes) -> bytes:
    return _active_engine().sign_digest(digest, check_secret(privkey))


def verify_digest(signature: bytes, digest: bytes, pubkey: bytes) -> bool:
    return _active_engine().verify_digest(signature, digest, pubkey)
