"""Kernel security – StoredCredential record."""
from __future__ import annotations

import dataclasses

from mp_hashing.kernel.errors import CredentialFormatError

_SCHEME = "pbkdf2_sha256"
_SEPARATOR = "$"

# PBKDF2 backends take a signed 32-bit count.
MAX_ITERATIONS = 2**31 - 1


@dataclasses.dataclass(frozen=True)
class StoredCredential:
    """The ``{salt, iterations, hash}`` tuple callers persist per user.

    Encoded as ``pbkdf2_sha256$<iterations>$<salt>$<hash_hex>`` so the work
    factor travels with the hash. Base64 salts never contain ``$``.
    """

    salt: str
    iterations: int
    hash_hex: str

    def encode(self) -> str:
        if _SEPARATOR in self.salt:
            raise CredentialFormatError(f"Salt must not contain {_SEPARATOR!r}")
        return _SEPARATOR.join((_SCHEME, str(self.iterations), self.salt, self.hash_hex))

    @classmethod
    def parse(cls, encoded: str) -> StoredCredential:
        parts = encoded.split(_SEPARATOR)
        if len(parts) != 4:
            raise CredentialFormatError("Expected 4 '$'-separated fields")
        scheme, iterations, salt, hash_hex = parts
        if scheme != _SCHEME:
            raise CredentialFormatError(
                f"Unknown credential scheme {scheme!r}", detail={"scheme": scheme}
            )
        if (
            len(iterations) > 10
            or not iterations.isdecimal()
            or not 1 <= int(iterations) <= MAX_ITERATIONS
        ):
            raise CredentialFormatError(
                f"Iteration count must be an integer in [1, {MAX_ITERATIONS}]"
            )
        return cls(salt=salt, iterations=int(iterations), hash_hex=hash_hex)

    def __str__(self) -> str:
        return self.encode()


__all__ = ["MAX_ITERATIONS", "StoredCredential"]
