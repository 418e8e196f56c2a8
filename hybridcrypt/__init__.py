"""
hybridcrypt - RSA-OAEP key exchange and AES-CBC payload encryption with
text-safe (base64) keys and ciphertexts.

Usage:
    >>> import hybridcrypt
    >>>
    >>> key = await hybridcrypt.create_random_symmetric_key()
    >>> blob = await hybridcrypt.sym_encrypt(key, "hello world")
    >>> await hybridcrypt.sym_decrypt(await hybridcrypt.export_sym_key(key), blob)
    'hello world'
"""
from .client import (
    CryptoClient,
    generate_rsa_key_pair,
    export_pub_key,
    export_prv_key,
    import_pub_key,
    import_prv_key,
    rsa_encrypt,
    rsa_decrypt,
    create_random_symmetric_key,
    export_sym_key,
    import_sym_key,
    sym_encrypt,
    sym_decrypt,
    wrap_symmetric_key,
    unwrap_symmetric_key,
)
from .core.config import ClientConfig
from .core.crypto import (
    Base64Encoder,
    KeyUsage,
    KeyPair,
    PublicKey,
    PrivateKey,
    SymmetricKey,
    SealedMessage,
)
from .core.exceptions import (
    CryptoError,
    DecodeError,
    KeyGenError,
    KeyImportError,
    EncryptError,
    DecryptError,
)
from .core.logging import setup_logging

__version__ = '1.0.0'

__all__ = [
    'CryptoClient',
    'ClientConfig',
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
    'Base64Encoder',
    'KeyUsage',
    'KeyPair',
    'PublicKey',
    'PrivateKey',
    'SymmetricKey',
    'SealedMessage',
    'CryptoError',
    'DecodeError',
    'KeyGenError',
    'KeyImportError',
    'EncryptError',
    'DecryptError',
    'setup_logging',
]
