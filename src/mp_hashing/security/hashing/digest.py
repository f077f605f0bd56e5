"""Security – SHA-2 digesting with optional pepper and salt.

Intended for data-integrity and lookup keys (API tokens, e-mail
fingerprints). Passwords belong in :mod:`mp_hashing.security.hashing.pbkdf2`.
"""
from __future__ import annotations

import asyncio
import dataclasses

from mp_hashing.config.settings import HashingSettings
from mp_hashing.kernel.errors import DigestComputationError
from mp_hashing.kernel.security import CryptoProvider, HashAlgorithm
from mp_hashing.observability.logging import get_logger
from mp_hashing.security.providers import default_provider

__all__ = ["DigestEngine", "DigestRequest", "PepperedDigester"]

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class DigestRequest:
    """Input to :meth:`DigestEngine.digest`.

    Empty ``pepper`` / ``salt`` are treated exactly like ``None``.
    """

    input: str
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA_256
    pepper: str | None = None
    salt: str | None = None

    def text_to_hash(self) -> str:
        """``pepper ∥ input ∥ salt``, skipping empty parts."""
        text = self.input
        if self.pepper:
            text = f"{self.pepper}{text}"
        if self.salt:
            text = f"{text}{self.salt}"
        return text


class DigestEngine:
    """Computes lowercase-hex SHA-2 digests off the event loop."""

    def __init__(self, provider: CryptoProvider | None = None) -> None:
        self._provider = provider or default_provider()

    async def digest(self, request: DigestRequest) -> str:
        algorithm = HashAlgorithm.parse(request.algorithm)
        try:
            data = request.text_to_hash().encode("utf-8")
        except UnicodeEncodeError as exc:
            raise DigestComputationError("Input is not encodable as UTF-8", cause=exc) from exc

        raw = await asyncio.to_thread(self._provider.digest, algorithm, data)
        if len(raw) != algorithm.digest_size:
            raise DigestComputationError(
                f"Provider returned {len(raw)} bytes for {algorithm.value}",
                detail={"expected": algorithm.digest_size, "actual": len(raw)},
            )
        logger.debug("digest.computed", algorithm=algorithm.value, input_bytes=len(data))
        return raw.hex()


class PepperedDigester:
    """Digests with the deployment pepper and algorithm from :class:`HashingSettings`."""

    def __init__(
        self,
        settings: HashingSettings | None = None,
        provider: CryptoProvider | None = None,
    ) -> None:
        self._settings = settings or HashingSettings()
        self._engine = DigestEngine(provider)

    async def digest(self, input: str, *, salt: str | None = None) -> str:  # noqa: A002
        return await self._engine.digest(
            DigestRequest(
                input=input,
                algorithm=self._settings.algorithm,
                pepper=self._settings.pepper,
                salt=salt,
            )
        )
