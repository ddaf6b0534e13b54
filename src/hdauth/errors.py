"""Exceptions raised by hdauth.

Signature verification never raises; a bad signature is a ``False`` result.
"""


class HDAuthError(Exception):
    """Base class for every hdauth error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidParameter(HDAuthError, ValueError):
    """Malformed or out-of-range input to path building or derivation."""


class InvalidMnemonic(HDAuthError, ValueError):
    """Mnemonic is not in the wordlist or fails its checksum."""


class KeyUnavailable(HDAuthError):
    """Hardened derivation attempted on a node without private material."""


class InvalidKey(HDAuthError, ValueError):
    """Key bytes do not encode a valid secp256k1 scalar or point."""
