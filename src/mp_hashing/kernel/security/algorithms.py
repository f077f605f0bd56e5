"""Kernel security – supported SHA-2 digest variants."""
from __future__ import annotations

from enum import Enum

from mp_hashing.kernel.errors import UnsupportedAlgorithm


class HashAlgorithm(str, Enum):
    """SHA-2 variants; the value is the canonical WebCrypto-style name."""

    SHA_256 = "SHA-256"
    SHA_384 = "SHA-384"
    SHA_512 = "SHA-512"

    @property
    def digest_size(self) -> int:
        """Digest width in bytes."""
        return _DIGEST_SIZES[self]

    @classmethod
    def parse(cls, value: "HashAlgorithm | str") -> "HashAlgorithm":
        """Resolve *value* (case-insensitive name) or raise :class:`UnsupportedAlgorithm`."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        raise UnsupportedAlgorithm(value)


_DIGEST_SIZES: dict[HashAlgorithm, int] = {
    HashAlgorithm.SHA_256: 32,
    HashAlgorithm.SHA_384: 48,
    HashAlgorithm.SHA_512: 64,
}


__all__ = ["HashAlgorithm"]
