"""Kernel security – keys whose values must never reach logs or error payloads."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "pepper", "salt", "secret", "token", "api_key",
    "apikey", "authorization", "hash_hex", "stored_hash", "derived_key",
})


def is_sensitive(name: str, fields: frozenset[str] | None = None) -> bool:
    """``True`` when *name* (case-insensitive) is one of *fields*."""
    return name.lower() in (fields or DEFAULT_SENSITIVE_FIELDS)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "is_sensitive"]
