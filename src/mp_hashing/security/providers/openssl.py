from __future__ import annotations

import os

from cryptography.exceptions import InternalError
from cryptography.exceptions import UnsupportedAlgorithm as BackendUnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from mp_hashing.kernel.errors import (
    DigestComputationError,
    EntropySourceUnavailable,
    KeyDerivationError,
    UnsupportedAlgorithm,
)
from mp_hashing.kernel.security import HashAlgorithm
from mp_hashing.observability.logging import get_logger

__all__ = ["OpenSSLCryptoProvider", "default_provider"]

logger = get_logger(__name__)

_HASHES: dict[HashAlgorithm, type[hashes.HashAlgorithm]] = {
    HashAlgorithm.SHA_256: hashes.SHA256,
    HashAlgorithm.SHA_384: hashes.SHA384,
    HashAlgorithm.SHA_512: hashes.SHA512,
}

_BACKEND_ERRORS = (TypeError, ValueError, OverflowError, BackendUnsupportedAlgorithm, InternalError)


class OpenSSLCryptoProvider:
    """Production :class:`CryptoProvider` on ``os.urandom`` and ``cryptography``."""

    def random_bytes(self, length: int) -> bytes:
        try:
            return os.urandom(length)
        except (OSError, NotImplementedError) as exc:
            logger.error("crypto.entropy_unavailable", length=length, error=repr(exc))
            raise EntropySourceUnavailable(cause=exc) from exc

    def digest(self, algorithm: HashAlgorithm, data: bytes) -> bytes:
        try:
            hash_cls = _HASHES[algorithm]
        except KeyError:
            raise UnsupportedAlgorithm(algorithm) from None
        try:
            ctx = hashes.Hash(hash_cls())
            ctx.update(data)
            return ctx.finalize()
        except _BACKEND_ERRORS as exc:
            logger.error("crypto.digest_failed", algorithm=algorithm.value, error=repr(exc))
            raise DigestComputationError(
                f"{algorithm.value} digest rejected by provider", cause=exc
            ) from exc

    def pbkdf2_hmac_sha256(
        self, password: bytes, salt: bytes, iterations: int, length: int
    ) -> bytes:
        # Zero or negative counts are rejected like the WebCrypto provider does.
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
            raise KeyDerivationError(
                "Iteration count must be a positive integer",
                detail={"iterations": repr(iterations)},
            )
        try:
            kdf = PBKDF2HMAC(
                algorithm=hashes.SHA256(),
                length=length,
                salt=salt,
                iterations=iterations,
            )
            return kdf.derive(password)
        except _BACKEND_ERRORS as exc:
            logger.error("crypto.pbkdf2_failed", iterations=iterations, error=repr(exc))
            raise KeyDerivationError("PBKDF2 derivation rejected by provider", cause=exc) from exc


_DEFAULT = OpenSSLCryptoProvider()


def default_provider() -> OpenSSLCryptoProvider:
    """Return the shared stateless production provider."""
    return _DEFAULT
