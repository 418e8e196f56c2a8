"""High-level encryption/decryption services producing IV || ciphertext blobs."""
from Crypto.Random import get_random_bytes

from .strategies import AESStrategy, AESCBCStrategy
from ...config import AES_PARAMS
from ...exceptions import DecryptError, EncryptError


class EncryptionService:
    """High-level encryption service."""

    def __init__(self, strategy: AESStrategy = None):
        """Initializes encryption service."""
        self.strategy = strategy or AESCBCStrategy()

    def encrypt(self, data: bytes, key: bytes) -> bytes:
        """Encrypts data under a fresh random IV and returns ``IV || ciphertext``."""
        iv = get_random_bytes(AES_PARAMS.iv_size)
        try:
            encrypted = self.strategy.encrypt(data, key, iv)
        except (ValueError, TypeError) as e:
            raise EncryptError(f"AES encryption failed: {e}") from e
        return iv + encrypted


class DecryptionService:
    """High-level decryption service."""

    def __init__(self, strategy: AESStrategy = None):
        """Initializes decryption service."""
        self.strategy = strategy or AESCBCStrategy()

    def decrypt(self, data: bytes, key: bytes) -> bytes:
        """Splits ``IV || ciphertext`` and decrypts the ciphertext."""
        if len(data) < AES_PARAMS.iv_size:
            raise DecryptError(
                f"Ciphertext too short: {len(data)} bytes, need at least {AES_PARAMS.iv_size} for the IV"
            )
        iv, encrypted = data[:AES_PARAMS.iv_size], data[AES_PARAMS.iv_size:]
        try:
            return self.strategy.decrypt(encrypted, key, iv)
        except (ValueError, TypeError) as e:
            raise DecryptError(f"AES decryption failed: {e}") from e
