"""Unit tests for testing fakes."""
from __future__ import annotations

import hashlib

import pytest

from mp_hashing.kernel.errors import EntropySourceUnavailable, KeyDerivationError
from mp_hashing.kernel.security import CryptoProvider, HashAlgorithm
from mp_hashing.testing.fakes import FakeCryptoProvider


class TestFakeCryptoProvider:
    def test_satisfies_port(self):
        assert isinstance(FakeCryptoProvider(), CryptoProvider)

    def test_random_bytes_deterministic_per_seed(self):
        assert FakeCryptoProvider(seed=3).random_bytes(16) == FakeCryptoProvider(seed=3).random_bytes(16)

    def test_random_bytes_differ_between_calls(self):
        fake = FakeCryptoProvider()
        assert fake.random_bytes(16) != fake.random_bytes(16)

    def test_random_bytes_zero(self):
        assert FakeCryptoProvider().random_bytes(0) == b""

    def test_digest_matches_real_algorithm(self):
        fake = FakeCryptoProvider()
        assert fake.digest(HashAlgorithm.SHA_384, b"abc") == hashlib.sha384(b"abc").digest()

    def test_pbkdf2_matches_real_algorithm(self):
        expected = hashlib.pbkdf2_hmac("sha256", b"pw", b"salt", 3, 32)
        assert FakeCryptoProvider().pbkdf2_hmac_sha256(b"pw", b"salt", 3, 32) == expected

    def test_pbkdf2_rejects_zero_iterations(self):
        with pytest.raises(KeyDerivationError):
            FakeCryptoProvider().pbkdf2_hmac_sha256(b"pw", b"salt", 0, 32)

    def test_records_calls(self):
        fake = FakeCryptoProvider()
        fake.random_bytes(4)
        fake.digest(HashAlgorithm.SHA_256, b"x")
        assert [name for name, _ in fake.calls] == ["random_bytes", "digest"]
        assert fake.calls_to("random_bytes") == [(4,)]

    def test_fail_with_and_reset(self):
        fake = FakeCryptoProvider().fail_with(EntropySourceUnavailable())
        with pytest.raises(EntropySourceUnavailable):
            fake.random_bytes(4)
        fake.reset()
        assert fake.calls == []
        assert len(fake.random_bytes(4)) == 4
