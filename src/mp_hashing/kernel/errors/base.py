"""Root error class for mp-hashing."""

from __future__ import annotations

from typing import Any

_MASK = "***"


class HashingError(Exception):
    """Root of every error raised by this library.

    ``detail`` carries operation metadata (algorithm, iteration count,
    setting name). ``to_dict`` masks values stored under sensitive keys and
    reports only the *type* of ``cause``: library exceptions such as
    :class:`UnicodeEncodeError` embed the offending text, which may be a
    password.

    Args:
        message: Human-readable description, free of secret material.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context for logs and callers.
        cause: Underlying library exception; also set as ``__cause__``.
    """

    default_code: str = "hashing_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Log-safe payload: ``error``, ``code``, ``message``, masked ``detail``."""
        from mp_hashing.kernel.security.pii import is_sensitive

        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": {k: (_MASK if is_sensitive(k) else v) for k, v in self.detail.items()},
        }
        if self.cause is not None:
            payload["cause"] = type(self.cause).__name__
        return payload


__all__ = ["HashingError"]
