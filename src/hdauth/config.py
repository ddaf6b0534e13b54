"""
Runtime configuration (all overridable via environment variables).

Values are read once at import time.
"""

import os

# secp256k1 backend: "auto", "coincurve" or "ecdsa"
ENGINE = os.getenv("HDAUTH_ENGINE", "auto").strip().lower() or "auto"
MNEMONIC_LANGUAGE = os.getenv("HDAUTH_MNEMONIC_LANGUAGE", "english")
PASSPHRASE = os.getenv("BIP39_PASSPHRASE", "")  # optional BIP39 passphrase
