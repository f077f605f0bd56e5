from __future__ import annotations

import base64

from mp_hashing.config.settings import DEFAULT_SALT_LENGTH
from mp_hashing.kernel.security import CryptoProvider
from mp_hashing.security.providers import default_provider

__all__ = ["RandomSaltGenerator"]


class RandomSaltGenerator:
    """Base64-encoded salts from the provider's CSPRNG."""

    def __init__(self, provider: CryptoProvider | None = None) -> None:
        self._provider = provider or default_provider()

    def generate(self, length_in_bytes: int = DEFAULT_SALT_LENGTH) -> str:
        """Return *length_in_bytes* secure random bytes as Base64 text.

        Raises :class:`~mp_hashing.kernel.errors.EntropySourceUnavailable`
        when the random source cannot be read.
        """
        if length_in_bytes < 0:
            raise ValueError("Salt length must be >= 0")
        raw = self._provider.random_bytes(length_in_bytes)
        return base64.b64encode(raw).decode("ascii")
