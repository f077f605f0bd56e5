"""Security – salts, SHA-2 digests, PBKDF2 password hashing."""
from mp_hashing.security.hashing.api import (
    derive_password_hash,
    generate_salt,
    hash,
    verify_password,
)
from mp_hashing.security.hashing.compare import ConstantTimeComparator
from mp_hashing.security.hashing.digest import DigestEngine, DigestRequest, PepperedDigester
from mp_hashing.security.hashing.hasher import Pbkdf2PasswordHasher
from mp_hashing.security.hashing.pbkdf2 import DERIVED_KEY_LENGTH, KeyDerivationEngine
from mp_hashing.security.hashing.salt import RandomSaltGenerator

__all__ = [
    "ConstantTimeComparator",
    "DERIVED_KEY_LENGTH",
    "DigestEngine",
    "DigestRequest",
    "KeyDerivationEngine",
    "Pbkdf2PasswordHasher",
    "PepperedDigester",
    "RandomSaltGenerator",
    "derive_password_hash",
    "generate_salt",
    "hash",
    "verify_password",
]
