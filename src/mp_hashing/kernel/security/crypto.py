"""Kernel security – CryptoProvider and PasswordHasher ports."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from mp_hashing.kernel.security.algorithms import HashAlgorithm

if TYPE_CHECKING:
    from mp_hashing.kernel.security.credential import StoredCredential


@runtime_checkable
class CryptoProvider(Protocol):
    """Port: the platform's secure-random, digest and PBKDF2 primitives.

    Implementations are synchronous and thread-safe; the engines call them
    from a worker thread. Failures surface as
    :class:`~mp_hashing.kernel.errors.CryptoError` subclasses.
    """

    def random_bytes(self, length: int) -> bytes: ...

    def digest(self, algorithm: HashAlgorithm, data: bytes) -> bytes: ...

    def pbkdf2_hmac_sha256(
        self, password: bytes, salt: bytes, iterations: int, length: int
    ) -> bytes: ...


class PasswordHasher(abc.ABC):
    """Port: one-way password hashing for credential storage."""

    @abc.abstractmethod
    async def hash(self, password: str) -> StoredCredential: ...

    @abc.abstractmethod
    async def verify(self, password: str, credential: StoredCredential | str) -> bool: ...

    @abc.abstractmethod
    def needs_rehash(self, credential: StoredCredential) -> bool: ...


__all__ = ["CryptoProvider", "PasswordHasher"]
