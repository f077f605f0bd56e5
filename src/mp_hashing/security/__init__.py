"""Security — hashing engines and crypto providers."""
from mp_hashing.security.hashing import (
    ConstantTimeComparator,
    DigestEngine,
    DigestRequest,
    KeyDerivationEngine,
    Pbkdf2PasswordHasher,
    PepperedDigester,
    RandomSaltGenerator,
)
from mp_hashing.security.providers import OpenSSLCryptoProvider

__all__ = [
    "ConstantTimeComparator",
    "DigestEngine",
    "DigestRequest",
    "KeyDerivationEngine",
    "OpenSSLCryptoProvider",
    "Pbkdf2PasswordHasher",
    "PepperedDigester",
    "RandomSaltGenerator",
]
