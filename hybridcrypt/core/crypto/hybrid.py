"""
Session-key wrapping: RSA-OAEP protects an AES key, AES-CBC protects the payload.
"""
from dataclasses import dataclass
from typing import Union

from .aes import AESService
from .keys import PrivateKey, PublicKey, SymmetricKey
from .rsa import RSAService
from ..exceptions import DecryptError, KeyImportError


@dataclass(frozen=True)
class SealedMessage:
    """A payload encrypted under a one-time AES key plus that key wrapped with RSA."""
    wrapped_key: str
    ciphertext: str


class HybridService:
    """Combines RSAService and AESService into the session-key pattern."""

    def __init__(self, rsa_service: RSAService = None, aes_service: AESService = None):
        """Initializes hybrid service."""
        self.rsa_service = rsa_service or RSAService()
        self.aes_service = aes_service or AESService()

    def wrap_key(self, key: SymmetricKey, public_key: Union[str, PublicKey]) -> str:
        """RSA-encrypts the raw bytes of an AES key."""
        return self.rsa_service.encrypt(self.aes_service.export_key(key), public_key)

    def unwrap_key(self, wrapped_key: str, private_key: Union[str, PrivateKey]) -> SymmetricKey:
        """Recovers an AES key wrapped by ``wrap_key``."""
        raw = self.rsa_service.decrypt(wrapped_key, private_key)
        try:
            return self.aes_service.import_key(raw)
        except KeyImportError as e:
            raise DecryptError(f"Unwrapped data is not an AES key: {e}") from e

    def seal(self, data: str, public_key: Union[str, PublicKey]) -> SealedMessage:
        """Encrypts text under a fresh AES key and wraps that key for ``public_key``."""
        session_key = self.aes_service.generate_key()
        return SealedMessage(
            wrapped_key=self.wrap_key(session_key, public_key),
            ciphertext=self.aes_service.encrypt(session_key, data),
        )

    def open(self, message: SealedMessage, private_key: Union[str, PrivateKey]) -> str:
        """Decrypts a ``SealedMessage``."""
        session_key = self.unwrap_key(message.wrapped_key, private_key)
        return self.aes_service.decrypt(session_key, message.ciphertext)
