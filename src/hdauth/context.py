"""RootContext: one master node, many auth keys."""

import asyncio
import functools
from dataclasses import dataclass, field
from typing import Optional

from . import config
from .derive import derive_auth_key_from_root
from .errors import InvalidParameter
from .hd_key import HDKey
from .seed import mnemonic_to_seed
from .types import AuthKeyParams, DerivedKey


@dataclass(frozen=True)
class RootContext:
    """Binds a master HD node to repeated derive_auth_key calls.

    Holds no other state and persists nothing; drop it to forget the root.
    """

    root: HDKey = field(repr=False)

    @classmethod
    def from_seed(cls, seed: bytes) -> "RootContext":
        return cls(HDKey.from_seed(seed))

    @classmethod
    def from_mnemonic(
        cls, mnemonic: str, passphrase: Optional[str] = None, language: Optional[str] = None
    ) -> "RootContext":
        if passphrase is None:
            passphrase = config.PASSPHRASE
        return cls.from_seed(mnemonic_to_seed(mnemonic, passphrase, language))

    @classmethod
    async def from_mnemonic_async(
        cls, mnemonic: str, passphrase: Optional[str] = None, language: Optional[str] = None
    ) -> "RootContext":
        """from_mnemonic, with the PBKDF2 stretch run in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, functools.partial(cls.from_mnemonic, mnemonic, passphrase, language)
        )

    def derive_auth_key(self, params: Optional[AuthKeyParams] = None, **kwargs) -> DerivedKey:
        """Derive the key for ``params``, or for AuthKeyParams(**kwargs)."""
        if params is None:
            params = AuthKeyParams(**kwargs)
        elif kwargs:
            raise InvalidParameter("pass either an AuthKeyParams or keyword arguments, not both")
        return derive_auth_key_from_root(self.root, params)


def from_mnemonic(
    mnemonic: str, passphrase: Optional[str] = None, language: Optional[str] = None
) -> RootContext:
    """Shortcut for RootContext.from_mnemonic."""
    return RootContext.from_mnemonic(mnemonic, passphrase, language)
