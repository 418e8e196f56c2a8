"""
AES encryption module using Strategy Pattern.
"""
from .strategies import AESStrategy, AESCBCStrategy
from .encryption_service import EncryptionService, DecryptionService
from .aes_service import AESService

__all__ = [
    'AESStrategy',
    'AESCBCStrategy',
    'EncryptionService',
    'DecryptionService',
    'AESService',
]
