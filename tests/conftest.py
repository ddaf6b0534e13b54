import pytest

from hdauth import RootContext

ABANDON_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)


@pytest.fixture(scope="session")
def ctx():
    return RootContext.from_mnemonic(ABANDON_MNEMONIC, passphrase="")
