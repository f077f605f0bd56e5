"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from mp_hashing.config.validation import ConfigError
from mp_hashing.kernel.errors import (
    CredentialFormatError,
    CryptoError,
    DigestComputationError,
    EntropySourceUnavailable,
    HashingError,
    KeyDerivationError,
    UnsupportedAlgorithm,
)


class TestHashingError:
    def test_message_is_stored(self) -> None:
        err = HashingError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert HashingError("m").code == "hashing_error"

    def test_custom_code(self) -> None:
        assert HashingError("m", code="custom").code == "custom"

    def test_str_carries_code_and_message(self) -> None:
        assert str(KeyDerivationError("bad count")) == "[key_derivation_error] bad count"

    def test_to_dict_basic(self) -> None:
        err = HashingError("m", code="my_code", detail={"iterations": 10})
        assert err.to_dict() == {
            "error": "HashingError",
            "code": "my_code",
            "message": "m",
            "detail": {"iterations": 10},
        }

    def test_to_dict_masks_sensitive_detail(self) -> None:
        err = HashingError("m", detail={"password": "hunter2", "Pepper": "p", "algorithm": "SHA-256"})
        detail = err.to_dict()["detail"]
        assert detail == {"password": "***", "Pepper": "***", "algorithm": "SHA-256"}

    def test_to_dict_cause_is_type_name_only(self) -> None:
        cause = UnicodeEncodeError("utf-8", "hunter2\ud800", 7, 8, "surrogates not allowed")
        payload = HashingError("wrapper", cause=cause).to_dict()
        assert payload["cause"] == "UnicodeEncodeError"
        assert "hunter2" not in repr(payload)

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert HashingError("wrap", cause=cause).__cause__ is cause

    def test_repr(self) -> None:
        assert repr(KeyDerivationError("bad")) == "KeyDerivationError(code='key_derivation_error', message='bad')"


class TestCryptoErrors:
    @pytest.mark.parametrize(
        "err,code",
        [
            (EntropySourceUnavailable(), "entropy_source_unavailable"),
            (UnsupportedAlgorithm("MD5"), "unsupported_algorithm"),
            (DigestComputationError("x"), "digest_computation_error"),
            (KeyDerivationError("x"), "key_derivation_error"),
            (CredentialFormatError("x"), "credential_format_error"),
        ],
    )
    def test_codes_and_hierarchy(self, err, code) -> None:
        assert err.code == code
        assert isinstance(err, CryptoError)
        assert isinstance(err, HashingError)

    def test_entropy_default_message(self) -> None:
        assert "random" in EntropySourceUnavailable().message

    def test_unsupported_algorithm_detail(self) -> None:
        err = UnsupportedAlgorithm("MD5")
        assert err.algorithm == "MD5"
        assert err.detail == {"algorithm": "MD5"}
        assert "MD5" in err.message

    def test_config_error_is_hashing_error(self) -> None:
        assert issubclass(ConfigError, HashingError)
        assert not issubclass(ConfigError, CryptoError)
