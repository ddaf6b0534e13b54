"""Tests for the BIP39 seed source."""

import pytest

from hdauth import InvalidMnemonic, InvalidParameter, generate_mnemonic, mnemonic_to_seed, validate_mnemonic

from conftest import ABANDON_MNEMONIC


def test_reference_vector():
    seed = mnemonic_to_seed(ABANDON_MNEMONIC, "TREZOR")
    assert seed.hex() == (
        "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e53495531f"
        "09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04"
    )


def test_whitespace_is_normalized():
    messy = "  " + ABANDON_MNEMONIC.replace(" ", "   ") + "\n"
    assert mnemonic_to_seed(messy) == mnemonic_to_seed(ABANDON_MNEMONIC)


def test_passphrase_changes_seed():
    assert mnemonic_to_seed(ABANDON_MNEMONIC, "a") != mnemonic_to_seed(ABANDON_MNEMONIC, "b")


@pytest.mark.parametrize(
    "bad",
    [
        "",
        "abandon " * 11 + "abandon",  # checksum mismatch
        "abandon " * 11 + "notaword",
        "abandon abandon about",
    ],
)
def test_invalid_mnemonic(bad):
    assert not validate_mnemonic(bad)
    with pytest.raises(InvalidMnemonic):
        mnemonic_to_seed(bad)


def test_generate_mnemonic():
    words = generate_mnemonic(256)
    assert len(words.split()) == 24
    assert validate_mnemonic(words)


def test_generate_rejects_bad_strength():
    with pytest.raises(InvalidParameter):
        generate_mnemonic(100)


def test_unknown_language():
    with pytest.raises(InvalidParameter, match="unsupported mnemonic language"):
        mnemonic_to_seed(ABANDON_MNEMONIC, language="klingon")
