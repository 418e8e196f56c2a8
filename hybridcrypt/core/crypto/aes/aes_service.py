"""AES key lifecycle and text payload encryption service."""
from typing import Union

from Crypto.Random import get_random_bytes

from .encryption_service import EncryptionService, DecryptionService
from ..keys import KeyUsage, SymmetricKey
from ..utils.encoding import Base64Encoder
from ..utils.key_utils import KeyManager
from ...config import AES_PARAMS
from ...exceptions import DecodeError, DecryptError, EncryptError, KeyImportError
from ...logging import get_logger

logger = get_logger(__name__)


class AESService:
    """
    AES-CBC key generation, raw (de)serialization and payload encryption.

    Ciphertexts are base64 of ``IV(16) || CBC ciphertext`` so each one
    carries everything needed to decrypt it except the key.
    """

    def __init__(
        self,
        encryption_service: EncryptionService = None,
        decryption_service: DecryptionService = None
    ):
        """Initializes AES service."""
        self.encryption_service = encryption_service or EncryptionService()
        self.decryption_service = decryption_service or DecryptionService()
        self.encoder = Base64Encoder()

    def generate_key(self) -> SymmetricKey:
        """Generates a fresh 256-bit AES key."""
        logger.debug(f"Generating {AES_PARAMS.key_size * 8}-bit AES key")
        return SymmetricKey(key=get_random_bytes(AES_PARAMS.key_size))

    def export_key(self, key: SymmetricKey) -> str:
        """Exports the raw key bytes as base64."""
        if not isinstance(key, SymmetricKey):
            raise TypeError(f"Expected SymmetricKey, got {type(key).__name__}")
        return self.encoder.encode(key.key)

    def import_key(self, encoded: str) -> SymmetricKey:
        """Imports a base64 raw AES key of 128, 192 or 256 bits."""
        try:
            data = self.encoder.decode(encoded)
        except DecodeError as e:
            raise KeyImportError(f"AES key is not valid base64: {e}", key_format='raw') from e
        if len(data) not in AES_PARAMS.valid_key_sizes:
            raise KeyImportError(
                f"Invalid AES key length: {len(data) * 8} bits", key_format='raw'
            )
        return SymmetricKey(key=data)

    def encrypt(self, key: Union[str, SymmetricKey], data: str) -> str:
        """
        Encrypts a text payload.

        Args:
            key: AES key handle or its base64 raw export
            data: Text to encrypt, encoded as UTF-8

        Returns:
            Base64 of IV || ciphertext
        """
        try:
            key = KeyManager.prepare(key, self.import_key)
        except KeyImportError as e:
            raise EncryptError(f"AES key import failed: {e}") from e
        KeyManager.require(key, KeyUsage.ENCRYPT, EncryptError, AES_PARAMS.name)

        try:
            plaintext = data.encode('utf-8')
        except (AttributeError, UnicodeEncodeError) as e:
            raise EncryptError(f"Plaintext is not encodable text: {e}") from e
        return self.encoder.encode(self.encryption_service.encrypt(plaintext, key.key))

    def decrypt(self, key: Union[str, SymmetricKey], data: str) -> str:
        """
        Decrypts a base64 IV || ciphertext blob back to text.

        Args:
            key: AES key handle or its base64 raw export
            data: Base64 of IV || ciphertext

        Returns:
            The decrypted UTF-8 text
        """
        try:
            key = KeyManager.prepare(key, self.import_key)
        except KeyImportError as e:
            raise DecryptError(f"AES key import failed: {e}") from e
        KeyManager.require(key, KeyUsage.DECRYPT, DecryptError, AES_PARAMS.name)

        try:
            blob = self.encoder.decode(data)
        except DecodeError as e:
            raise DecryptError(f"Ciphertext is not valid base64: {e}") from e

        decrypted = self.decryption_service.decrypt(blob, key.key)
        try:
            return decrypted.decode('utf-8')
        except UnicodeDecodeError as e:
            logger.debug(f"Decrypted {len(decrypted)} bytes are not valid UTF-8")
            raise DecryptError("Decrypted data is not valid UTF-8") from e
