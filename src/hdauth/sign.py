"""Challenge signing and verification with derived keys.

Messages are hashed with SHA-256 before signing; signatures are compact
64-byte r || s.
"""

from . import curve
from .constants import PRIVKEY_SIZE, PUBKEY_SIZE, SIGNATURE_SIZE
from .errors import InvalidKey, InvalidParameter
from .hashing import encode_utf8, sha256_bytes


def _message_bytes(message) -> bytes:
    if isinstance(message, str):
        return encode_utf8(message)
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise InvalidParameter(f"message must be bytes or str, got {type(message).__name__}")


def sign_challenge(priv_key: bytes, message: bytes) -> bytes:
    """Sign ``message`` deterministically (RFC 6979) with ``priv_key``.

    Raises:
        InvalidKey: ``priv_key`` is not a 32-byte scalar in [1, n-1].
    """
    if not isinstance(priv_key, (bytes, bytearray)) or len(priv_key) != PRIVKEY_SIZE:
        raise InvalidKey(f"private key must be {PRIVKEY_SIZE} bytes")
    digest = sha256_bytes(_message_bytes(message))
    return curve.sign_digest(digest, priv_key)


def verify_challenge_signature(pub_key: bytes, message: bytes, signature: bytes) -> bool:
    """Check a signature from sign_challenge.

    Returns False for any bad input instead of raising.
    """
    if not isinstance(pub_key, (bytes, bytearray)) or len(pub_key) != PUBKEY_SIZE:
        return False
    if not isinstance(signature, (bytes, bytearray)) or len(signature) != SIGNATURE_SIZE:
        return False
    try:
        digest = sha256_bytes(_message_bytes(message))
    except InvalidParameter:
        return False
    return curve.verify_digest(bytes(signature), digest, bytes(pub_key))
