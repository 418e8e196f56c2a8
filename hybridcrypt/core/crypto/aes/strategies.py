"""AES encryption strategies using Strategy Pattern."""
from abc import ABC, abstractmethod

from Crypto.Cipher import AES
from Crypto.Util.Padding import pad, unpad


class AESStrategy(ABC):
    """Abstract base class for AES encryption strategies."""

    @abstractmethod
    def encrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        """Encrypts data using the strategy."""
        pass

    @abstractmethod
    def decrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        """Decrypts data using the strategy."""
        pass


class AESCBCStrategy(AESStrategy):
    """AES-CBC with PKCS#7 padding."""

    block_size = AES.block_size

    def encrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        """Pads and encrypts data using AES-CBC mode."""
        cipher = AES.new(key, AES.MODE_CBC, iv)
        return cipher.encrypt(pad(data, self.block_size, style='pkcs7'))

    def decrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        """
        Decrypts data using AES-CBC mode and strips the padding.

        Raises:
            ValueError: If the data is not a whole number of blocks or the padding is invalid
        """
        cipher = AES.new(key, AES.MODE_CBC, iv)
        return unpad(cipher.decrypt(data), self.block_size, style='pkcs7')
