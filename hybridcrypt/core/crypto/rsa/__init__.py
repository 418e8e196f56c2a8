"""RSA encryption/decryption module."""
from .rsa_service import RSAService
from .rsa_key_codec import RSAKeyCodec

__all__ = [
    'RSAService',
    'RSAKeyCodec',
]
