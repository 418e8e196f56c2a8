"""Tests for the error taxonomy."""
import pytest

from hybridcrypt.core.exceptions import (
    CryptoError,
    DecodeError,
    DecryptError,
    EncryptError,
    ErrorCodes,
    KeyGenError,
    KeyImportError,
)


class TestExceptions:
    """Test suite for hybridcrypt exceptions."""

    @pytest.mark.parametrize("cls, code", [
        (DecodeError, ErrorCodes.DECODE),
        (KeyGenError, ErrorCodes.KEYGEN),
        (KeyImportError, ErrorCodes.KEY_IMPORT),
        (EncryptError, ErrorCodes.ENCRYPT),
        (DecryptError, ErrorCodes.DECRYPT),
    ])
    def test_default_codes(self, cls, code):
        error = cls("failure")

        assert isinstance(error, CryptoError)
        assert error.error_code == code
        assert str(error) == "failure"

    def test_explicit_code_overrides(self):
        assert DecryptError("failure", error_code=99).error_code == 99

    def test_key_import_error_format(self):
        error = KeyImportError("bad key", key_format="spki")

        assert error.key_format == "spki"
        assert error.error_code == ErrorCodes.KEY_IMPORT

    def test_does_not_shadow_builtin(self):
        assert not issubclass(KeyImportError, ImportError)

    def test_categories_are_distinct(self):
        classes = [DecodeError, KeyGenError, KeyImportError, EncryptError, DecryptError]

        for cls in classes:
            for other in classes:
                if cls is not other:
                    assert not issubclass(cls, other)
