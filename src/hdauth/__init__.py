"""hdauth - per-relying-party auth keys from one BIP39 seed.

Derives a deterministic secp256k1 key pair for every relying party under
m/128273'/<version>'/<device>'/<rp>'/<key> and signs login challenges with
it.
"""

import logging

from .constants import DEFAULT_AUTH_VERSION, HARDENED_OFFSET, PURPOSE_AUTH
from .context import RootContext, from_mnemonic
from .curve import get_engine
from .derive import derive_auth_key_from_root
from .errors import HDAuthError, InvalidKey, InvalidMnemonic, InvalidParameter, KeyUnavailable
from .hashing import hash_to_index, sha256_bytes
from .hd_key import HDKey
from .path import AuthPath, make_auth_path, parse_path
from .seed import generate_mnemonic, mnemonic_to_seed, validate_mnemonic
from .sign import sign_challenge, verify_challenge_signature
from .types import AuthKeyParams, DerivedKey

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Entry points
    "RootContext",
    "from_mnemonic",
    "derive_auth_key_from_root",
    # Types
    "AuthKeyParams",
    "DerivedKey",
    "AuthPath",
    "HDKey",
    # Errors
    "HDAuthError",
    "InvalidParameter",
    "InvalidMnemonic",
    "KeyUnavailable",
    "InvalidKey",
    # Challenge signing
    "sign_challenge",
    "verify_challenge_signature",
    # Building blocks
    "hash_to_index",
    "sha256_bytes",
    "make_auth_path",
    "parse_path",
    "mnemonic_to_seed",
    "validate_mnemonic",
    "generate_mnemonic",
    "get_engine",
    # Constants
    "PURPOSE_AUTH",
    "HARDENED_OFFSET",
    "DEFAULT_AUTH_VERSION",
]
