"""
mp_hashing – salts, SHA-2 digests and PBKDF2 password hashing.

Import path convention::

    from mp_hashing import generate_salt, hash, derive_password_hash, verify_password
    from mp_hashing.security.hashing import Pbkdf2PasswordHasher
    from mp_hashing.kernel.errors import KeyDerivationError
    from mp_hashing.config import HashingSettings, EnvSettingsLoader
"""

from mp_hashing.kernel.security import HashAlgorithm, StoredCredential
from mp_hashing.security.hashing import (
    derive_password_hash,
    generate_salt,
    hash,
    verify_password,
)

__version__ = "0.1.0"
__all__ = [
    "HashAlgorithm",
    "StoredCredential",
    "__version__",
    "derive_password_hash",
    "generate_salt",
    "hash",
    "verify_password",
]
