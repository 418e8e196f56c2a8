"""Tests for key handles and key argument normalization."""
import dataclasses

import pytest

from hybridcrypt.core.crypto.keys import (
    DECRYPT_ONLY,
    ENCRYPT_DECRYPT,
    ENCRYPT_ONLY,
    KeyUsage,
    SymmetricKey,
)
from hybridcrypt.core.crypto.utils.key_utils import KeyManager
from hybridcrypt.core.exceptions import DecryptError, EncryptError


class TestKeyHandles:
    """Test suite for key handles."""

    def test_symmetric_defaults(self):
        key = SymmetricKey(key=b"k" * 32)

        assert key.usages == ENCRYPT_DECRYPT
        assert key.algorithm == "AES-CBC"
        assert key.key_size == 256

    def test_handles_are_immutable(self, key_pair):
        with pytest.raises(dataclasses.FrozenInstanceError):
            key_pair.public_key.usages = ENCRYPT_DECRYPT
        with pytest.raises(dataclasses.FrozenInstanceError):
            SymmetricKey(key=b"k" * 16).key = b"x" * 16

    def test_rsa_usage_defaults(self, key_pair):
        assert key_pair.public_key.usages == ENCRYPT_ONLY
        assert key_pair.private_key.usages == DECRYPT_ONLY

    def test_rsa_repr(self, key_pair):
        assert repr(key_pair.public_key) == "PublicKey(algorithm='RSA-OAEP', key_size=2048)"
        assert repr(key_pair.private_key) == "PrivateKey(algorithm='RSA-OAEP', key_size=2048)"

    def test_key_usage_values(self):
        assert KeyUsage("encrypt") is KeyUsage.ENCRYPT
        assert KeyUsage.DECRYPT == "decrypt"


class TestKeyManager:
    """Test suite for KeyManager."""

    def test_prepare_handle_passthrough(self):
        key = SymmetricKey(key=b"k" * 16)

        assert KeyManager.prepare(key, lambda s: pytest.fail("importer called")) is key

    def test_prepare_string_uses_importer(self):
        calls = []

        def importer(encoded):
            calls.append(encoded)
            return SymmetricKey(key=b"k" * 16)

        result = KeyManager.prepare("encoded", importer)

        assert calls == ["encoded"]
        assert isinstance(result, SymmetricKey)

    def test_require_accepts_permitted(self):
        KeyManager.require(SymmetricKey(key=b"k" * 16), KeyUsage.ENCRYPT, EncryptError, "AES-CBC")

    def test_require_rejects_restricted_usage(self):
        key = SymmetricKey(key=b"k" * 16, usages=ENCRYPT_ONLY)

        with pytest.raises(DecryptError, match="does not permit decrypt"):
            KeyManager.require(key, KeyUsage.DECRYPT, DecryptError, "AES-CBC")

    def test_require_rejects_wrong_algorithm(self, key_pair):
        with pytest.raises(EncryptError, match="Expected an AES-CBC key"):
            KeyManager.require(key_pair.public_key, KeyUsage.ENCRYPT, EncryptError, "AES-CBC")

    def test_require_rejects_foreign_object(self):
        with pytest.raises(EncryptError):
            KeyManager.require(b"raw bytes", KeyUsage.ENCRYPT, EncryptError, "AES-CBC")

    def test_require_rejects_none(self):
        with pytest.raises(DecryptError, match="No key supplied"):
            KeyManager.require(None, KeyUsage.DECRYPT, DecryptError, "RSA-OAEP")
