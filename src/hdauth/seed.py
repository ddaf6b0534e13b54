"""BIP39 mnemonic -> seed, via the mnemonic package."""

from typing import Optional

from mnemonic import Mnemonic

from . import config
from .errors import InvalidMnemonic, InvalidParameter

_STRENGTHS = (128, 160, 192, 224, 256)


def _wordlist(language: Optional[str] = None) -> Mnemonic:
    language = language or config.MNEMONIC_LANGUAGE
    if language not in Mnemonic.list_languages():
        raise InvalidParameter(f"unsupported mnemonic language {language!r}")
    return Mnemonic(language)


def validate_mnemonic(mnemonic: str, language: Optional[str] = None) -> bool:
    """True if every word is in the wordlist and the checksum matches."""
    wordlist = _wordlist(language)
    if not isinstance(mnemonic, str):
        return False
    try:
        return wordlist.check(" ".join(mnemonic.split()))
    except (ValueError, LookupError):
        return False


def mnemonic_to_seed(mnemonic: str, passphrase: str = "", language: Optional[str] = None) -> bytes:
    """
    Convert a BIP39 mnemonic into its 64-byte seed.

    The mnemonic is checked against the wordlist first; PBKDF2 is only run
    for valid input.
    """
    if not validate_mnemonic(mnemonic, language):
        raise InvalidMnemonic("mnemonic failed wordlist or checksum validation")
    return Mnemonic.to_seed(" ".join(mnemonic.split()), passphrase)


def generate_mnemonic(strength: int = 128, language: Optional[str] = None) -> str:
    if strength not in _STRENGTHS:
        raise InvalidParameter(f"strength must be one of {_STRENGTHS}, got {strength}")
    return _wordlist(language).generate(strength=strength)
