"""Crypto errors — failures of the platform crypto provider or its inputs."""

from __future__ import annotations

from typing import Any

from mp_hashing.kernel.errors.base import HashingError


class CryptoError(HashingError):
    """A hashing or key-derivation operation could not be completed."""

    default_code = "crypto_error"


class EntropySourceUnavailable(CryptoError):
    """The secure random number generator could not be read. Fatal, no retry."""

    default_code = "entropy_source_unavailable"

    def __init__(
        self,
        message: str = "Secure random source is unavailable",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


class UnsupportedAlgorithm(CryptoError):
    """The requested digest variant is not one of SHA-256, SHA-384, SHA-512."""

    default_code = "unsupported_algorithm"

    def __init__(self, algorithm: object, **kwargs: Any) -> None:
        super().__init__(
            f"Unsupported hash algorithm {algorithm!r}",
            detail={"algorithm": str(algorithm)},
            **kwargs,
        )
        self.algorithm = algorithm


class DigestComputationError(CryptoError):
    """The provider rejected a digest request."""

    default_code = "digest_computation_error"


class KeyDerivationError(CryptoError):
    """The provider rejected a PBKDF2 derivation (bad salt, iterations, …)."""

    default_code = "key_derivation_error"


class CredentialFormatError(CryptoError):
    """An encoded stored credential could not be parsed."""

    default_code = "credential_format_error"


__all__ = [
    "CredentialFormatError",
    "CryptoError",
    "DigestComputationError",
    "EntropySourceUnavailable",
    "KeyDerivationError",
    "UnsupportedAlgorithm",
]
