"""Crypto module: RSA-OAEP key exchange and AES-CBC payload encryption."""
from typing import Optional, Union

from .utils import Base64Encoder, KeyManager
from .keys import KeyUsage, KeyPair, PublicKey, PrivateKey, SymmetricKey
from .aes import AESStrategy, AESCBCStrategy, EncryptionService, DecryptionService, AESService
from .rsa import RSAService, RSAKeyCodec
from .hybrid import HybridService, SealedMessage

# Function-based API over shared stateless services
_base64 = Base64Encoder()
_rsa_service = RSAService()
_aes_service = AESService()
_hybrid_service = HybridService(_rsa_service, _aes_service)


class Base64:
    """Base64 codec (function-style access)."""
    @staticmethod
    def encode(data: bytes) -> str:
        return _base64.encode(data)

    @staticmethod
    def decode(data: str) -> bytes:
        return _base64.decode(data)


def generate_rsa_key_pair() -> KeyPair:
    """Generates a 2048-bit RSA-OAEP/SHA-256 key pair."""
    return _rsa_service.generate_key_pair()


def export_pub_key(key: PublicKey) -> str:
    """Exports a public key as base64 SPKI."""
    return _rsa_service.export_public_key(key)


def export_prv_key(key: Optional[PrivateKey]) -> Optional[str]:
    """Exports a private key as base64 PKCS8, or None for no key."""
    return _rsa_service.export_private_key(key)


def import_pub_key(encoded: str) -> PublicKey:
    """Imports an encrypt-only public key."""
    return _rsa_service.import_public_key(encoded)


def import_prv_key(encoded: str) -> PrivateKey:
    """Imports a decrypt-only private key."""
    return _rsa_service.import_private_key(encoded)


def rsa_encrypt(data: str, public_key: Union[str, PublicKey]) -> str:
    """RSA-OAEP encrypts base64 data."""
    return _rsa_service.encrypt(data, public_key)


def rsa_decrypt(data: str, private_key: Union[str, PrivateKey]) -> str:
    """RSA-OAEP decrypts to base64 data."""
    return _rsa_service.decrypt(data, private_key)


def create_random_symmetric_key() -> SymmetricKey:
    """Generates a 256-bit AES key."""
    return _aes_service.generate_key()


def export_sym_key(key: SymmetricKey) -> str:
    """Exports an AES key as base64 raw bytes."""
    return _aes_service.export_key(key)


def import_sym_key(encoded: str) -> SymmetricKey:
    """Imports a raw AES key."""
    return _aes_service.import_key(encoded)


def sym_encrypt(key: Union[str, SymmetricKey], data: str) -> str:
    """AES-CBC encrypts text to base64 IV || ciphertext."""
    return _aes_service.encrypt(key, data)


def sym_decrypt(key: Union[str, SymmetricKey], data: str) -> str:
    """AES-CBC decrypts base64 IV || ciphertext to text."""
    return _aes_service.decrypt(key, data)


def wrap_symmetric_key(key: SymmetricKey, public_key: Union[str, PublicKey]) -> str:
    """RSA-encrypts an AES key for transport."""
    return _hybrid_service.wrap_key(key, public_key)


def unwrap_symmetric_key(wrapped_key: str, private_key: Union[str, PrivateKey]) -> SymmetricKey:
    """Recovers an AES key produced by ``wrap_symmetric_key``."""
    return _hybrid_service.unwrap_key(wrapped_key, private_key)


__all__ = [
    # Classes
    'Base64Encoder',
    'KeyManager',
    'KeyUsage',
    'KeyPair',
    'PublicKey',
    'PrivateKey',
    'SymmetricKey',
    'AESStrategy',
    'AESCBCStrategy',
    'EncryptionService',
    'DecryptionService',
    'AESService',
    'RSAService',
    'RSAKeyCodec',
    'HybridService',
    'SealedMessage',
    # Functions
    'Base64',
    'generate_rsa_key_pair',
    'export_pub_key',
    'export_prv_key',
    'import_pub_key',
    'import_prv_key',
    'rsa_encrypt',
    'rsa_decrypt',
    'create_random_symmetric_key',
    'export_sym_key',
    'import_sym_key',
    'sym_encrypt',
    'sym_decrypt',
    'wrap_symmetric_key',
    'unwrap_symmetric_key',
]
