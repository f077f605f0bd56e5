"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    HashingError                     (base.py)
    ├── ConfigError                  (mp_hashing.config.validation)
    │   ├── MissingRequiredSettingError
    │   └── InvalidSettingValueError
    └── CryptoError                  (crypto.py)
        ├── EntropySourceUnavailable
        ├── UnsupportedAlgorithm
        ├── DigestComputationError
        ├── KeyDerivationError
        └── CredentialFormatError
"""

from mp_hashing.kernel.errors.base import HashingError
from mp_hashing.kernel.errors.crypto import (
    CredentialFormatError,
    CryptoError,
    DigestComputationError,
    EntropySourceUnavailable,
    KeyDerivationError,
    UnsupportedAlgorithm,
)

__all__ = [
    "CredentialFormatError",
    "CryptoError",
    "DigestComputationError",
    "EntropySourceUnavailable",
    "HashingError",
    "KeyDerivationError",
    "UnsupportedAlgorithm",
]
