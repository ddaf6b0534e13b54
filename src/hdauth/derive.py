"""Derive per-relying-party auth keys from a master node."""

import logging

from . import curve
from .errors import InvalidParameter, KeyUnavailable
from .hashing import hash_to_index
from .hd_key import HDKey
from .path import make_auth_path
from .types import AuthKeyParams, DerivedKey

logger = logging.getLogger(__name__)


def derive_auth_key_from_root(root: HDKey, params: AuthKeyParams) -> DerivedKey:
    """
    Walk ``root`` down the auth path for ``params`` and return the key pair.

    Raises:
        InvalidParameter: empty rp_id or an out-of-range integer parameter.
        KeyUnavailable: ``root`` carries no private key.
    """
    if not isinstance(params.rp_id, str) or not params.rp_id:
        raise InvalidParameter("rp_id must be a non-empty string")

    rp_index = hash_to_index(params.rp_id)
    path, indices = make_auth_path(rp_index, params.device_id, params.key_index, params.version)

    node = root
    for index in indices:
        node = node.derive_child(index)

    if node.privkey is None:
        raise KeyUnavailable(f"no private key at {path}")

    logger.debug("Derived auth key at %s", path)
    return DerivedKey(
        priv_key=node.privkey,
        pub_key=curve.get_pubkey(node.privkey, compressed=True),
        path=path,
    )
