"""Auth derivation paths: m/<purpose>'/<version>'/<device>'/<rp>'/<key>."""

from typing import List, NamedTuple

from .constants import HARDENED_OFFSET, PURPOSE_AUTH
from .errors import InvalidParameter


class AuthPath(NamedTuple):
    path: str
    indices: List[int]


def _check_index(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value < HARDENED_OFFSET:
        raise InvalidParameter(f"{name} must be in [0, 2^31), got {value}")
    return value


def make_auth_path(
    rp_index: int,
    device_id: int = 0,
    key_index: int = 0,
    version: int = 0,
) -> AuthPath:
    """
    Build the derivation path for an auth key.

    The first four components are hardened; key_index is left non-hardened.
    The path string shows unhardened values with a ' marker, while
    ``indices`` carries the offset values actually fed to derivation.
    """
    _check_index("rp_index", rp_index)
    _check_index("device_id", device_id)
    _check_index("key_index", key_index)
    _check_index("version", version)

    indices = [
        PURPOSE_AUTH + HARDENED_OFFSET,
        version + HARDENED_OFFSET,
        device_id + HARDENED_OFFSET,
        rp_index + HARDENED_OFFSET,
        key_index,
    ]
    path = f"m/{PURPOSE_AUTH}'/{version}'/{device_id}'/{rp_index}'/{key_index}"
    return AuthPath(path, indices)


def parse_path(path: str) -> List[int]:
    """Parse a path like m/84'/0'/0'/0 into child indices."""
    if not isinstance(path, str):
        raise InvalidParameter(f"path must be a string, got {type(path).__name__}")
    parts = path.strip().split("/")
    if parts[0] == "m":
        parts = parts[1:]
    indices = []
    for part in parts:
        hardened = part.endswith(("'", "h", "H"))
        digits = part[:-1] if hardened else part
        if not digits.isdigit() or not digits.isascii():
            raise InvalidParameter(f"invalid path component {part!r} in {path!r}")
        idx = _check_index("path component", int(digits))
        if hardened:
            idx += HARDENED_OFFSET
        indices.append(idx)
    return indices
