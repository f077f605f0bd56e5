"""Kernel security – HashAlgorithm, CryptoProvider/PasswordHasher ports, StoredCredential."""
from mp_hashing.kernel.security.algorithms import HashAlgorithm
from mp_hashing.kernel.security.credential import MAX_ITERATIONS, StoredCredential
from mp_hashing.kernel.security.crypto import CryptoProvider, PasswordHasher
from mp_hashing.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS, is_sensitive

__all__ = [
    "CryptoProvider",
    "DEFAULT_SENSITIVE_FIELDS",
    "HashAlgorithm",
    "MAX_ITERATIONS",
    "PasswordHasher",
    "StoredCredential",
    "is_sensitive",
]
