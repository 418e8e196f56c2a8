"""Pytest fixtures for hybridcrypt tests."""
import pytest
from Crypto.Random import get_random_bytes

from hybridcrypt.core.crypto import AESService, RSAService


@pytest.fixture(scope="session")
def rsa_service():
    """Shared RSA service."""
    return RSAService()


@pytest.fixture(scope="session")
def key_pair(rsa_service):
    """One RSA key pair per session (generation is slow)."""
    return rsa_service.generate_key_pair()


@pytest.fixture(scope="session")
def public_key_b64(rsa_service, key_pair):
    """Base64 SPKI export of the session public key."""
    return rsa_service.export_public_key(key_pair.public_key)


@pytest.fixture(scope="session")
def private_key_b64(rsa_service, key_pair):
    """Base64 PKCS8 export of the session private key."""
    return rsa_service.export_private_key(key_pair.private_key)


@pytest.fixture
def aes_service():
    """AES service."""
    return AESService()


@pytest.fixture
def aes_key():
    """Generates a 32-byte AES key for testing."""
    return get_random_bytes(32)
