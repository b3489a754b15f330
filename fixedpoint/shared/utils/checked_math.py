"""
Overflow-checked arithmetic on signed 32-bit integers.

Python integers never overflow, so every helper here checks its result
against the i32 range and returns ``None`` when it would not fit, leaving
the caller to decide which error to raise.
"""

from typing import Final, Optional

INT32_MAX: Final[int] = 2**31 - 1
INT32_MIN: Final[int] = -(2**31)


def is_int32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def _fit(value: int) -> Optional[int]:
    return value if is_int32(value) else None


def checked_add(a: int, b: int) -> Optional[int]:
    return _fit(a + b)


def checked_sub(a: int, b: int) -> Optional[int]:
    return _fit(a - b)


def checked_mul(a: int, b: int) -> Optional[int]:
    return _fit(a * b)


def checked_neg(a: int) -> Optional[int]:
    """
    Negate ``a``.

    Only INT32_MIN overflows, since its magnitude is one larger than INT32_MAX.
    """
    return _fit(-a)
