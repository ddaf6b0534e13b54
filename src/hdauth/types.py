"""Value types for auth-key derivation."""

from dataclasses import dataclass, field

from .constants import DEFAULT_AUTH_VERSION


@dataclass(frozen=True)
class AuthKeyParams:
    """Which key to derive.

    ``rp_id`` is hashed into a subtree index; it never appears in the path.
    """

    rp_id: str
    device_id: int = 0
    key_index: int = 0
    version: int = DEFAULT_AUTH_VERSION


@dataclass(frozen=True)
class DerivedKey:
    """A derived key pair and the path it was derived at.

    ``priv_key`` is the caller's secret: it is kept out of ``repr`` and must
    never be logged or sent anywhere.
    """

    priv_key: bytes = field(repr=False)
    pub_key: bytes  # 33-byte compressed point
    path: str  # audit only, derivation uses the numeric params
