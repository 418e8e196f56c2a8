"""Encoding utilities."""
import base64
import binascii

from ...exceptions import DecodeError


class Base64Encoder:
    """Standard base64 encoder/decoder (no line wrapping, no URL-safe alphabet)."""

    @staticmethod
    def encode(data: bytes) -> str:
        """Encodes bytes to standard padded Base64."""
        return base64.b64encode(data).decode('ascii')

    @staticmethod
    def decode(data: str) -> bytes:
        """Decodes standard Base64, rejecting non-alphabet characters and bad padding."""
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError, TypeError) as e:
            raise DecodeError(f"Invalid base64 input: {e}") from e
