"""Public hashing operations with defaults applied at the call boundary.

Usage::

    from mp_hashing import derive_password_hash, generate_salt, verify_password

    salt = generate_salt()
    stored = await derive_password_hash("hunter2", salt)
    assert await verify_password("hunter2", salt, stored, 600_000)
"""
from __future__ import annotations

from mp_hashing.config.settings import DEFAULT_ITERATIONS, DEFAULT_SALT_LENGTH
from mp_hashing.kernel.security import CryptoProvider, HashAlgorithm
from mp_hashing.security.hashing.digest import DigestEngine, DigestRequest
from mp_hashing.security.hashing.pbkdf2 import KeyDerivationEngine
from mp_hashing.security.hashing.salt import RandomSaltGenerator

__all__ = ["derive_password_hash", "generate_salt", "hash", "verify_password"]


def generate_salt(
    length_in_bytes: int = DEFAULT_SALT_LENGTH,
    *,
    provider: CryptoProvider | None = None,
) -> str:
    return RandomSaltGenerator(provider).generate(length_in_bytes)


async def hash(  # noqa: A001
    input: str,  # noqa: A002
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA_256,
    pepper: str | None = None,
    salt: str | None = None,
    *,
    provider: CryptoProvider | None = None,
) -> str:
    """SHA-2 hex digest of ``pepper ∥ input ∥ salt``."""
    request = DigestRequest(input=input, algorithm=algorithm, pepper=pepper, salt=salt)
    return await DigestEngine(provider).digest(request)


async def derive_password_hash(
    password: str,
    salt: str,
    iterations: int = DEFAULT_ITERATIONS,
    *,
    provider: CryptoProvider | None = None,
) -> str:
    """64-character hex PBKDF2-HMAC-SHA256 hash of *password*."""
    return await KeyDerivationEngine(provider).hash(password, salt, iterations)


async def verify_password(
    password: str,
    salt: str,
    stored_hash: str,
    iterations: int,
    *,
    provider: CryptoProvider | None = None,
) -> bool:
    return await KeyDerivationEngine(provider).verify(password, salt, stored_hash, iterations)
