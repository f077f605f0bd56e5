"""Security – PBKDF2-HMAC-SHA256 password hashing and verification."""
from __future__ import annotations

import asyncio
import binascii

from mp_hashing.config.settings import DEFAULT_ITERATIONS
from mp_hashing.kernel.errors import KeyDerivationError
from mp_hashing.kernel.security import CryptoProvider
from mp_hashing.observability.logging import get_logger
from mp_hashing.security.hashing.compare import ConstantTimeComparator
from mp_hashing.security.providers import default_provider

__all__ = ["DERIVED_KEY_LENGTH", "KeyDerivationEngine"]

logger = get_logger(__name__)

DERIVED_KEY_LENGTH = 32


def _encode(value: str, what: str) -> bytes:
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise KeyDerivationError(f"{what} is not encodable as UTF-8", cause=exc) from exc
    except AttributeError as exc:
        raise KeyDerivationError(f"{what} must be text, got {type(value).__name__}", cause=exc) from exc


def _decode_hex(value: str) -> bytes | None:
    try:
        return binascii.unhexlify(value)
    except (ValueError, TypeError):
        return None


class KeyDerivationEngine:
    """Derives 256-bit keys with PBKDF2 and verifies passwords against hex hashes.

    Derivation runs in a worker thread. Cancelling the awaiting task does
    not stop the computation; the late result is simply discarded.

    Args:
        provider: Crypto provider; defaults to the OpenSSL-backed one.
        min_iterations: Policy floor. Counts below it raise
            :class:`KeyDerivationError` before any work is done.
    """

    def __init__(
        self,
        provider: CryptoProvider | None = None,
        *,
        min_iterations: int = 1,
    ) -> None:
        self._provider = provider or default_provider()
        self._min_iterations = min_iterations

    async def derive_key(self, password: str, salt: bytes, iterations: int) -> bytes:
        if isinstance(iterations, bool) or not isinstance(iterations, int):
            raise KeyDerivationError(
                "Iteration count must be an integer",
                detail={"iterations": repr(iterations)},
            )
        if iterations < self._min_iterations:
            raise KeyDerivationError(
                f"Iteration count {iterations} is below the minimum of {self._min_iterations}",
                detail={"iterations": iterations, "min_iterations": self._min_iterations},
            )
        secret = _encode(password, "password")
        key = await asyncio.to_thread(
            self._provider.pbkdf2_hmac_sha256, secret, salt, iterations, DERIVED_KEY_LENGTH
        )
        logger.debug("pbkdf2.derived", iterations=iterations, salt_bytes=len(salt))
        return key

    async def hash(
        self, password: str, salt_text: str, iterations: int = DEFAULT_ITERATIONS
    ) -> str:
        key = await self.derive_key(password, _encode(salt_text, "salt"), iterations)
        return key.hex()

    async def verify(
        self, password: str, salt_text: str, stored_hash_hex: str, iterations: int
    ) -> bool:
        """Return ``True`` iff *password* re-derives to *stored_hash_hex*.

        Malformed stored hashes yield ``False``; only derivation failures raise.
        """
        derived = await self.derive_key(password, _encode(salt_text, "salt"), iterations)

        stored = _decode_hex(stored_hash_hex)
        if stored is None:
            logger.warning("pbkdf2.verify.malformed_hash")
            return False
        if len(stored) != len(derived):
            logger.info("pbkdf2.verify.length_mismatch", stored_bytes=len(stored))
            return False

        matched = ConstantTimeComparator.equals(derived, stored)
        if not matched:
            logger.info("pbkdf2.verify.mismatch", iterations=iterations)
        return matched
