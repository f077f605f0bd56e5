"""Testing fakes – in-memory doubles for kernel ports."""
from mp_hashing.testing.fakes.crypto import FakeCryptoProvider

__all__ = ["FakeCryptoProvider"]
