"""Digest helpers and the rp_id -> subtree index mapping."""

import hashlib
import struct
from typing import Union

from .errors import InvalidParameter


def encode_utf8(text: str) -> bytes:
    """UTF-8 encode ``text``, replacing lone surrogates with U+FFFD.

    Paired surrogates are joined into their code point first, so any str
    encodes the same way a UTF-16 text encoder would see it.
    """
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        text = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
        return text.encode("utf-8")


def sha256_bytes(data: Union[str, bytes]) -> bytes:
    """SHA-256 of ``data``; strings are UTF-8 encoded first."""
    if isinstance(data, str):
        data = encode_utf8(data)
    return hashlib.sha256(data).digest()


def hash_to_index(identifier: str) -> int:
    """
    Map an identifier to a 31-bit index.

    First 4 bytes of SHA-256(identifier), big-endian, top bit cleared, so the
    result is always below the hardening offset and can be hardened safely.
    """
    if not isinstance(identifier, str):
        raise InvalidParameter(f"identifier must be a string, got {type(identifier).__name__}")
    (raw,) = struct.unpack(">I", sha256_bytes(identifier)[:4])
    return raw & 0x7FFFFFFF
