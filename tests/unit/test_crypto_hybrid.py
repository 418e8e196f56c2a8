"""Tests for session-key wrapping."""
import base64

import pytest

from hybridcrypt.core.crypto import (
    HybridService,
    SealedMessage,
    create_random_symmetric_key,
    export_sym_key,
    sym_decrypt,
    sym_encrypt,
    unwrap_symmetric_key,
    wrap_symmetric_key,
)
from hybridcrypt.core.exceptions import DecryptError, EncryptError


class TestHybridService:
    """Test suite for HybridService."""

    def test_wrap_unwrap_roundtrip(self, key_pair, public_key_b64):
        service = HybridService()
        session_key = service.aes_service.generate_key()

        wrapped = service.wrap_key(session_key, public_key_b64)
        unwrapped = service.unwrap_key(wrapped, key_pair.private_key)

        assert unwrapped == session_key
        assert len(base64.b64decode(wrapped)) == 256

    def test_seal_open(self, key_pair):
        service = HybridService()

        message = service.seal("hello world", key_pair.public_key)

        assert isinstance(message, SealedMessage)
        assert service.open(message, key_pair.private_key) == "hello world"

    def test_seal_uses_fresh_session_key(self, key_pair):
        service = HybridService()

        first = service.seal("same", key_pair.public_key)
        second = service.seal("same", key_pair.public_key)

        assert first.ciphertext != second.ciphertext
        assert service.unwrap_key(first.wrapped_key, key_pair.private_key) != \
            service.unwrap_key(second.wrapped_key, key_pair.private_key)

    def test_unwrap_non_key_payload(self, key_pair):
        service = HybridService()
        wrapped = service.rsa_service.encrypt(base64.b64encode(b"short").decode(), key_pair.public_key)

        with pytest.raises(DecryptError, match="not an AES key"):
            service.unwrap_key(wrapped, key_pair.private_key)

    def test_wrap_with_private_key_fails(self, key_pair):
        service = HybridService()

        with pytest.raises(EncryptError):
            service.wrap_key(service.aes_service.generate_key(), key_pair.private_key)


class TestFunctionAPI:
    """The synchronous function API mirrors the services."""

    def test_symmetric_functions(self):
        key = create_random_symmetric_key()
        ciphertext = sym_encrypt(key, "hello world")

        assert sym_decrypt(export_sym_key(key), ciphertext) == "hello world"

    def test_wrap_functions(self, key_pair, public_key_b64):
        key = create_random_symmetric_key()

        unwrapped = unwrap_symmetric_key(wrap_symmetric_key(key, public_key_b64), key_pair.private_key)

        assert unwrapped == key
