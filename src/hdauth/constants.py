"""Fixed values of the auth-key derivation scheme."""

HARDENED_OFFSET = 0x80000000

# Top-level BIP32 index reserving the auth subtree of a seed.
PURPOSE_AUTH = 128273
DEFAULT_AUTH_VERSION = 0

SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

PRIVKEY_SIZE = 32
PUBKEY_SIZE = 33
SIGNATURE_SIZE = 64

BIP32_SEED_KEY = b"Bitcoin seed"
