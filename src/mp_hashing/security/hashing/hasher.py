from __future__ import annotations

from mp_hashing.config.settings import HashingSettings
from mp_hashing.kernel.errors import CredentialFormatError
from mp_hashing.kernel.security import (
    MAX_ITERATIONS,
    CryptoProvider,
    PasswordHasher,
    StoredCredential,
)
from mp_hashing.observability.logging import get_logger
from mp_hashing.security.hashing.pbkdf2 import KeyDerivationEngine
from mp_hashing.security.hashing.salt import RandomSaltGenerator

__all__ = ["Pbkdf2PasswordHasher"]

logger = get_logger(__name__)


class Pbkdf2PasswordHasher(PasswordHasher):
    """Settings-driven :class:`PasswordHasher` for registration and login.

    Usage::

        hasher = Pbkdf2PasswordHasher(EnvSettingsLoader().load(HashingSettings))
        credential = await hasher.hash("hunter2")
        db.save(user_id, credential.encode())
        ...
        ok = await hasher.verify(attempt, db.load(user_id))
        if ok and hasher.needs_rehash(StoredCredential.parse(db.load(user_id))):
            db.save(user_id, (await hasher.hash(attempt)).encode())
    """

    def __init__(
        self,
        settings: HashingSettings | None = None,
        provider: CryptoProvider | None = None,
    ) -> None:
        self._settings = settings or HashingSettings()
        self._salts = RandomSaltGenerator(provider)
        self._engine = KeyDerivationEngine(provider, min_iterations=self._settings.min_iterations)

    async def hash(self, password: str) -> StoredCredential:
        salt = self._salts.generate(self._settings.salt_length)
        iterations = self._settings.iterations
        hash_hex = await self._engine.hash(password, salt, iterations)
        return StoredCredential(salt=salt, iterations=iterations, hash_hex=hash_hex)

    async def verify(self, password: str, credential: StoredCredential | str) -> bool:
        if isinstance(credential, str):
            try:
                credential = StoredCredential.parse(credential)
            except CredentialFormatError as exc:
                logger.warning("password.verify.malformed_credential", code=exc.code)
                return False
        # Counts outside the policy range are refused, never raised.
        if not self._settings.min_iterations <= credential.iterations <= MAX_ITERATIONS:
            logger.warning(
                "password.verify.iterations_out_of_range",
                iterations=credential.iterations,
                min_iterations=self._settings.min_iterations,
            )
            return False
        return await self._engine.verify(
            password, credential.salt, credential.hash_hex, credential.iterations
        )

    def needs_rehash(self, credential: StoredCredential) -> bool:
        """``True`` when *credential* was produced with a weaker work factor."""
        return credential.iterations < self._settings.iterations
