"""RSA key codec for the SPKI and PKCS8 DER interchange formats."""
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ...exceptions import KeyImportError
from ...logging import get_logger

logger = get_logger(__name__)

_SEQUENCE = 0x30
_INTEGER = 0x02


def _content_start(data: bytes, offset: int):
    """Returns (content offset, content length) of the DER element at ``offset``."""
    length = data[offset + 1]
    if length < 0x80:
        return offset + 2, length
    n = length & 0x7F
    return offset + 2 + n, int.from_bytes(data[offset + 2:offset + 2 + n], 'big')


class RSAKeyCodec:
    """Serializes RSA keys to, and loads them from, DER bytes.

    ``load_der_public_key`` also accepts a bare PKCS#1 RSAPublicKey, so the
    outer DER structure is checked first to hold imports to SPKI and PKCS8.
    """

    @staticmethod
    def is_spki(data: bytes) -> bool:
        """SubjectPublicKeyInfo starts SEQUENCE { SEQUENCE algorithm, ... }."""
        try:
            if data[0] != _SEQUENCE:
                return False
            start, _ = _content_start(data, 0)
            return data[start] == _SEQUENCE
        except IndexError:
            return False

    @staticmethod
    def is_pkcs8(data: bytes) -> bool:
        """PrivateKeyInfo starts SEQUENCE { INTEGER version, SEQUENCE algorithm, ... }."""
        try:
            if data[0] != _SEQUENCE:
                return False
            start, _ = _content_start(data, 0)
            if data[start] != _INTEGER:
                return False
            version_start, version_len = _content_start(data, start)
            return data[version_start + version_len] == _SEQUENCE
        except IndexError:
            return False

    @staticmethod
    def dump_public(key: rsa.RSAPublicKey) -> bytes:
        """Serializes a public key as SPKI DER."""
        return key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    @staticmethod
    def dump_private(key: rsa.RSAPrivateKey) -> bytes:
        """Serializes a private key as unencrypted PKCS8 DER."""
        return key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def load_public(self, data: bytes) -> rsa.RSAPublicKey:
        """Loads an RSA public key from SPKI DER."""
        logger.debug(f"load_public() called, length={len(data)}")
        if not self.is_spki(data):
            raise KeyImportError("Data is not a SubjectPublicKeyInfo structure", key_format='spki')
        try:
            key = serialization.load_der_public_key(data)
        except (ValueError, UnsupportedAlgorithm) as e:
            raise KeyImportError("Data does not contain a valid public key.", key_format='spki') from e
        if not isinstance(key, rsa.RSAPublicKey):
            raise KeyImportError(
                f"Expected an RSA public key, got {type(key).__name__}", key_format='spki'
            )
        return key

    def load_private(self, data: bytes) -> rsa.RSAPrivateKey:
        """Loads an RSA private key from unencrypted PKCS8 DER."""
        logger.debug(f"load_private() called, length={len(data)}")
        if not self.is_pkcs8(data):
            raise KeyImportError("Data is not a PKCS8 PrivateKeyInfo structure", key_format='pkcs8')
        try:
            key = serialization.load_der_private_key(data, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise KeyImportError("Data does not contain a valid private key.", key_format='pkcs8') from e
        if not isinstance(key, rsa.RSAPrivateKey):
            raise KeyImportError(
                f"Expected an RSA private key, got {type(key).__name__}", key_format='pkcs8'
            )
        return key
