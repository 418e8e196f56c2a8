"""
Custom exceptions for hybridcrypt operations.

Every failure surfaced by the public API is one of the classes below.
Provider exceptions are chained as ``__cause__``.
"""
from typing import Optional


class ErrorCodes:
    """Stable numeric codes attached to each error category."""

    DECODE = 1
    KEYGEN = 2
    KEY_IMPORT = 3
    ENCRYPT = 4
    DECRYPT = 5


class CryptoError(Exception):
    """Base exception for all hybridcrypt errors."""

    default_code: Optional[int] = None

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (defaults to the class code)
        """
        self.error_code = error_code if error_code is not None else self.default_code
        super().__init__(message)


class DecodeError(CryptoError):
    """Text is not valid standard base64."""
    default_code = ErrorCodes.DECODE


class KeyGenError(CryptoError):
    """The provider rejected key generation parameters or is unavailable."""
    default_code = ErrorCodes.KEYGEN


class KeyImportError(CryptoError):
    """Encoded key material does not match the expected format, algorithm or length."""

    default_code = ErrorCodes.KEY_IMPORT

    def __init__(
        self,
        message: str,
        key_format: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            key_format: Interchange format that was expected ('spki', 'pkcs8', 'raw')
            error_code: Numeric error code (if available)
        """
        self.key_format = key_format
        super().__init__(message, error_code)


class EncryptError(CryptoError):
    """Plaintext violates a size constraint or the key cannot encrypt."""
    default_code = ErrorCodes.ENCRYPT


class DecryptError(CryptoError):
    """Ciphertext is malformed, fails its padding check, or the key cannot decrypt."""
    default_code = ErrorCodes.DECRYPT
