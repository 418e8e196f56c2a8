"""RSA-OAEP key lifecycle and encryption/decryption service."""
from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import rsa, padding as rsa_padding

from .rsa_key_codec import RSAKeyCodec
from ..keys import KeyPair, KeyUsage, PrivateKey, PublicKey
from ..utils.encoding import Base64Encoder
from ..utils.key_utils import KeyManager
from ...config import RSA_PARAMS
from ...exceptions import (
    DecodeError,
    DecryptError,
    EncryptError,
    KeyGenError,
    KeyImportError,
)
from ...logging import get_logger

logger = get_logger(__name__)

# OAEP overhead: two hash digests plus two bytes
_OAEP_OVERHEAD = 2 * hashes.SHA256.digest_size + 2


class RSAService:
    """RSA key generation, (de)serialization and OAEP encryption service."""

    def __init__(self, key_codec: RSAKeyCodec = None):
        """Initializes RSA service."""
        self.key_codec = key_codec or RSAKeyCodec()
        self.encoder = Base64Encoder()

    @staticmethod
    def _padding() -> rsa_padding.OAEP:
        return rsa_padding.OAEP(
            mgf=rsa_padding.MGF1(algorithm=hashes.SHA256()),
            algorithm=hashes.SHA256(),
            label=None,
        )

    @staticmethod
    def max_plaintext_size(key: Union[PublicKey, PrivateKey]) -> int:
        """Largest plaintext, in bytes, that OAEP can encrypt under ``key``."""
        return (key.key_size + 7) // 8 - _OAEP_OVERHEAD

    def generate_key_pair(self) -> KeyPair:
        """Generates a fresh RSA-OAEP key pair."""
        try:
            private_key = rsa.generate_private_key(
                public_exponent=RSA_PARAMS.public_exponent,
                key_size=RSA_PARAMS.key_size,
            )
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise KeyGenError(f"RSA key generation failed: {e}") from e
        logger.debug(f"Generated {RSA_PARAMS.key_size}-bit RSA key pair")
        return KeyPair(
            public_key=PublicKey(key=private_key.public_key()),
            private_key=PrivateKey(key=private_key),
        )

    def export_public_key(self, key: PublicKey) -> str:
        """Exports a public key as base64 SPKI DER."""
        if not isinstance(key, PublicKey):
            raise TypeError(f"Expected PublicKey, got {type(key).__name__}")
        return self.encoder.encode(self.key_codec.dump_public(key.key))

    def export_private_key(self, key: Optional[PrivateKey]) -> Optional[str]:
        """Exports a private key as base64 PKCS8 DER; returns None when no key is given."""
        if key is None:
            return None
        if not isinstance(key, PrivateKey):
            raise TypeError(f"Expected PrivateKey, got {type(key).__name__}")
        return self.encoder.encode(self.key_codec.dump_private(key.key))

    def import_public_key(self, encoded: str) -> PublicKey:
        """Imports a base64 SPKI public key, usable for encryption only."""
        try:
            data = self.encoder.decode(encoded)
        except DecodeError as e:
            raise KeyImportError(f"Public key is not valid base64: {e}", key_format='spki') from e
        return PublicKey(key=self.key_codec.load_public(data))

    def import_private_key(self, encoded: str) -> PrivateKey:
        """Imports a base64 PKCS8 private key, usable for decryption only."""
        try:
            data = self.encoder.decode(encoded)
        except DecodeError as e:
            raise KeyImportError(f"Private key is not valid base64: {e}", key_format='pkcs8') from e
        return PrivateKey(key=self.key_codec.load_private(data))

    def encrypt(self, data: str, public_key: Union[str, PublicKey]) -> str:
        """
        Encrypts base64 data with RSA-OAEP.

        Args:
            data: Plaintext bytes, base64 encoded
            public_key: Public key handle or its base64 SPKI export

        Returns:
            Base64 encoded ciphertext
        """
        try:
            key = KeyManager.prepare(public_key, self.import_public_key)
        except KeyImportError as e:
            raise EncryptError(f"Public key import failed: {e}") from e
        KeyManager.require(key, KeyUsage.ENCRYPT, EncryptError, RSA_PARAMS.name)

        try:
            plaintext = self.encoder.decode(data)
        except DecodeError as e:
            raise EncryptError(f"Plaintext is not valid base64: {e}") from e

        limit = self.max_plaintext_size(key)
        if len(plaintext) > limit:
            raise EncryptError(
                f"Plaintext too long for RSA-OAEP: {len(plaintext)} bytes, maximum is {limit}"
            )
        try:
            encrypted = key.key.encrypt(plaintext, self._padding())
        except ValueError as e:
            raise EncryptError(f"RSA encryption failed: {e}") from e
        return self.encoder.encode(encrypted)

    def decrypt(self, data: str, private_key: Union[str, PrivateKey]) -> str:
        """
        Decrypts base64 RSA-OAEP ciphertext.

        Args:
            data: Ciphertext, base64 encoded
            private_key: Private key handle or its base64 PKCS8 export

        Returns:
            Base64 encoded plaintext bytes
        """
        try:
            key = KeyManager.prepare(private_key, self.import_private_key)
        except KeyImportError as e:
            raise DecryptError(f"Private key import failed: {e}") from e
        KeyManager.require(key, KeyUsage.DECRYPT, DecryptError, RSA_PARAMS.name)

        try:
            ciphertext = self.encoder.decode(data)
        except DecodeError as e:
            raise DecryptError(f"Ciphertext is not valid base64: {e}") from e
        try:
            decrypted = key.key.decrypt(ciphertext, self._padding())
        except ValueError as e:
            logger.debug(f"RSA decryption failed for {len(ciphertext)}-byte ciphertext")
            raise DecryptError("RSA decryption failed") from e
        return self.encoder.encode(decrypted)
