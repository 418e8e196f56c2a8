"""
Key handles.

A handle wraps provider key state together with its algorithm name and the
set of operations it may be used for. Handles are immutable once created.
"""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterator, Union

from cryptography.hazmat.primitives.asymmetric import rsa

from ..config import RSA_PARAMS, AES_PARAMS


class KeyUsage(str, Enum):
    """Operations a key may be used for."""
    ENCRYPT = 'encrypt'
    DECRYPT = 'decrypt'


ENCRYPT_ONLY = frozenset({KeyUsage.ENCRYPT})
DECRYPT_ONLY = frozenset({KeyUsage.DECRYPT})
ENCRYPT_DECRYPT = frozenset({KeyUsage.ENCRYPT, KeyUsage.DECRYPT})


class _UsageMixin:
    usages: FrozenSet[KeyUsage]

    def can(self, usage: KeyUsage) -> bool:
        """Returns True if the key may be used for ``usage``."""
        return usage in self.usages


@dataclass(frozen=True, repr=False)
class PublicKey(_UsageMixin):
    """RSA-OAEP public key, restricted to encryption."""
    key: rsa.RSAPublicKey
    usages: FrozenSet[KeyUsage] = ENCRYPT_ONLY

    algorithm = RSA_PARAMS.name

    @property
    def key_size(self) -> int:
        return self.key.key_size

    def __repr__(self) -> str:
        return f"PublicKey(algorithm={self.algorithm!r}, key_size={self.key_size})"


@dataclass(frozen=True, repr=False)
class PrivateKey(_UsageMixin):
    """RSA-OAEP private key, restricted to decryption."""
    key: rsa.RSAPrivateKey
    usages: FrozenSet[KeyUsage] = DECRYPT_ONLY

    algorithm = RSA_PARAMS.name

    @property
    def key_size(self) -> int:
        return self.key.key_size

    def __repr__(self) -> str:
        return f"PrivateKey(algorithm={self.algorithm!r}, key_size={self.key_size})"


@dataclass(frozen=True, repr=False)
class SymmetricKey(_UsageMixin):
    """AES-CBC key usable for both encryption and decryption."""
    key: bytes
    usages: FrozenSet[KeyUsage] = ENCRYPT_DECRYPT

    algorithm = AES_PARAMS.name

    @property
    def key_size(self) -> int:
        return len(self.key) * 8

    def __repr__(self) -> str:
        # never include raw key bytes
        return f"SymmetricKey(algorithm={self.algorithm!r}, key_size={self.key_size})"


@dataclass(frozen=True)
class KeyPair:
    """A freshly generated RSA key pair."""
    public_key: PublicKey
    private_key: PrivateKey

    def __iter__(self) -> Iterator[Union[PublicKey, PrivateKey]]:
        return iter((self.public_key, self.private_key))
