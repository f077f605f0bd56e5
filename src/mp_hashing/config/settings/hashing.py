"""Config settings – HashingSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_hashing.config.validation import InvalidSettingValueError
from mp_hashing.kernel.errors import UnsupportedAlgorithm
from mp_hashing.kernel.security import MAX_ITERATIONS, HashAlgorithm

DEFAULT_ITERATIONS = 600_000
DEFAULT_SALT_LENGTH = 16


@dataclasses.dataclass
class HashingSettings:
    """Deployment-wide hashing parameters, read from ``HASHING_*`` variables.

    ``min_iterations`` is a policy floor. The default of ``1`` keeps the
    core permissive; raise it (e.g. ``HASHING_MIN_ITERATIONS=100000``) to
    reject weak work factors outright.
    """

    _prefix: ClassVar[str] = "HASHING"

    pepper: str = ""
    digest_algorithm: str = HashAlgorithm.SHA_256.value
    iterations: int = DEFAULT_ITERATIONS
    min_iterations: int = 1
    salt_length: int = DEFAULT_SALT_LENGTH

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        try:
            HashAlgorithm.parse(self.digest_algorithm)
        except UnsupportedAlgorithm as exc:
            raise InvalidSettingValueError(
                "digest_algorithm", self.digest_algorithm, "expected SHA-256, SHA-384 or SHA-512"
            ) from exc
        if self.min_iterations < 1:
            raise InvalidSettingValueError("min_iterations", self.min_iterations, "must be >= 1")
        if not self.min_iterations <= self.iterations <= MAX_ITERATIONS:
            raise InvalidSettingValueError(
                "iterations",
                self.iterations,
                f"must be between min_iterations ({self.min_iterations}) and {MAX_ITERATIONS}",
            )
        if self.salt_length < 0:
            raise InvalidSettingValueError("salt_length", self.salt_length, "must be >= 0")

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.parse(self.digest_algorithm)


__all__ = ["DEFAULT_ITERATIONS", "DEFAULT_SALT_LENGTH", "HashingSettings"]
