"""Unit tests for RandomSaltGenerator."""
from __future__ import annotations

import base64

import pytest

from mp_hashing.kernel.errors import EntropySourceUnavailable
from mp_hashing.security.hashing import RandomSaltGenerator, generate_salt
from mp_hashing.testing.fakes import FakeCryptoProvider


class TestRandomSaltGenerator:
    def test_default_is_16_bytes_base64(self):
        salt = RandomSaltGenerator().generate()
        assert len(base64.b64decode(salt)) == 16
        assert len(salt) == 24

    def test_custom_length(self):
        salt = RandomSaltGenerator().generate(24)
        assert len(base64.b64decode(salt)) == 24

    def test_successive_salts_differ(self):
        gen = RandomSaltGenerator()
        assert gen.generate(16) != gen.generate(16)

    def test_zero_length_is_empty(self):
        assert RandomSaltGenerator().generate(0) == ""

    def test_negative_length_raises(self):
        with pytest.raises(ValueError):
            RandomSaltGenerator().generate(-1)

    def test_uses_provider_bytes(self):
        provider = FakeCryptoProvider()
        salt = RandomSaltGenerator(provider).generate(8)
        assert provider.calls_to("random_bytes") == [(8,)]
        assert len(base64.b64decode(salt)) == 8

    def test_entropy_failure_propagates(self):
        provider = FakeCryptoProvider().fail_with(EntropySourceUnavailable())
        with pytest.raises(EntropySourceUnavailable):
            RandomSaltGenerator(provider).generate()


class TestGenerateSalt:
    def test_two_calls_differ(self):
        assert generate_salt(16) != generate_salt(16)

    def test_zero(self):
        assert generate_salt(0) == ""

    def test_provider_injection(self):
        provider = FakeCryptoProvider(seed=7)
        again = FakeCryptoProvider(seed=7)
        assert generate_salt(provider=provider) == generate_salt(provider=again)
