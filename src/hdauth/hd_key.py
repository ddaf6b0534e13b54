"""
BIP32 HD key derivation over secp256k1.

Nodes are immutable: derive_child always returns a new HDKey. A node built
from public data only can follow non-hardened indices, but a hardened index
needs the parent's private key and raises KeyUnavailable.
"""

import hashlib
import hmac
import struct
from typing import Optional

from . import curve
from .constants import BIP32_SEED_KEY, HARDENED_OFFSET, SECP256K1_ORDER
from .errors import InvalidKey, InvalidParameter, KeyUnavailable
from .path import parse_path


def _hmac_sha512(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha512).digest()


def _ripemd160(data: bytes) -> bytes:
    """RIPEMD160 with multiple fallbacks for different environments."""
    try:
        return hashlib.new("ripemd160", data).digest()
    except (ValueError, TypeError):
        pass
    try:
        return hashlib.new("ripemd160", data, usedforsecurity=False).digest()
    except (ValueError, TypeError):
        pass
    from Crypto.Hash import RIPEMD160
    return RIPEMD160.new(data).digest()


def hash160(data: bytes) -> bytes:
    return _ripemd160(hashlib.sha256(data).digest())


class HDKey:
    """BIP32 Hierarchical Deterministic Key."""

    __slots__ = ("_privkey", "_pubkey", "_chaincode", "_depth", "_parent_fingerprint", "_child_number")

    def __init__(
        self,
        privkey: Optional[bytes],
        chaincode: bytes,
        pubkey: Optional[bytes] = None,
        depth: int = 0,
        parent_fingerprint: bytes = b"\x00" * 4,
        child_number: int = 0,
    ):
        if len(chaincode) != 32:
            raise InvalidParameter("chain code must be 32 bytes")
        if privkey is not None:
            privkey = curve.check_secret(privkey)
            pubkey = curve.get_pubkey(privkey)
        elif pubkey is None:
            raise InvalidKey("HD node needs a private or a public key")
        else:
            pubkey = curve.normalize_pubkey(pubkey)
        self._privkey = privkey
        self._pubkey = pubkey
        self._chaincode = bytes(chaincode)
        self._depth = depth
        self._parent_fingerprint = bytes(parent_fingerprint)
        self._child_number = child_number

    # Read-only views; a node never changes after construction.
    @property
    def privkey(self) -> Optional[bytes]:
        return self._privkey

    @property
    def pubkey(self) -> bytes:
        return self._pubkey

    @property
    def chaincode(self) -> bytes:
        return self._chaincode

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def parent_fingerprint(self) -> bytes:
        return self._parent_fingerprint

    @property
    def child_number(self) -> int:
        return self._child_number

    @classmethod
    def from_seed(cls, seed: bytes) -> "HDKey":
        if not 16 <= len(seed) <= 64:
            raise InvalidParameter(f"seed must be 16 to 64 bytes, got {len(seed)}")
        I = _hmac_sha512(BIP32_SEED_KEY, seed)
        return cls(I[:32], I[32:])

    @classmethod
    def from_public_key(cls, pubkey: bytes, chaincode: bytes, **kwargs) -> "HDKey":
        """Public-only node; can derive non-hardened children only."""
        return cls(None, chaincode, pubkey=pubkey, **kwargs)

    @property
    def has_private(self) -> bool:
        return self.privkey is not None

    @property
    def fingerprint(self) -> bytes:
        return hash160(self.pubkey)[:4]

    def neuter(self) -> "HDKey":
        """Same node with the private key stripped."""
        return HDKey(
            None,
            self.chaincode,
            pubkey=self.pubkey,
            depth=self.depth,
            parent_fingerprint=self.parent_fingerprint,
            child_number=self.child_number,
        )

    def derive_child(self, index: int) -> "HDKey":
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= 0xFFFFFFFF:
            raise InvalidParameter(f"child index must be a 32-bit unsigned integer, got {index!r}")
        if index >= HARDENED_OFFSET:
            if self.privkey is None:
                raise KeyUnavailable(
                    f"hardened index {index - HARDENED_OFFSET}' needs a private parent key"
                )
            data = b"\x00" + self.privkey + struct.pack(">I", index)
        else:
            data = self.pubkey + struct.pack(">I", index)
        I = _hmac_sha512(self.chaincode, data)
        il = int.from_bytes(I[:32], "big")
        if il >= SECP256K1_ORDER:
            # Probability below 2^-127; BIP32 says move on to the next index.
            raise InvalidKey(f"index {index} yields an invalid child key")

        child = dict(depth=self.depth + 1, parent_fingerprint=self.fingerprint, child_number=index)
        if self.privkey is None:
            return HDKey(None, I[32:], pubkey=curve.pubkey_tweak_add(self.pubkey, I[:32]), **child)
        child_int = (il + int.from_bytes(self.privkey, "big")) % SECP256K1_ORDER
        if child_int == 0:
            raise InvalidKey(f"index {index} yields an invalid child key")
        return HDKey(child_int.to_bytes(32, "big"), I[32:], **child)

    def derive_path(self, path: str) -> "HDKey":
        """Derive from path like m/84'/1776'/0'/0"""
        key = self
        for idx in parse_path(path):
            key = key.derive_child(idx)
        return key

    def __repr__(self) -> str:
        return (
            f"HDKey(depth={self.depth}, child_number={self.child_number}, "
            f"fingerprint={self.fingerprint.hex()}, private={self.has_private})"
        )
