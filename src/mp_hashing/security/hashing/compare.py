from __future__ import annotations

__all__ = ["ConstantTimeComparator"]


class ConstantTimeComparator:
    """Byte equality whose running time does not depend on where inputs differ.

    Every byte pair is visited; the XOR of each pair is OR-ed into an
    accumulator, so an early mismatch costs the same as a late one.
    """

    @staticmethod
    def equals(a: bytes, b: bytes) -> bool:
        if len(a) != len(b):
            raise ValueError("Constant-time comparison requires equal-length inputs")
        result = 0
        for x, y in zip(a, b):
            result |= x ^ y
        return result == 0
