"""
Fixed-point decimal numbers.

A decimal number is represented by a signed 32-bit coefficient and a small
non-negative scaling factor, so that its value is::

    coefficient * 10 ** -scaling

For example ``1234.56`` is held as ``DecimalValue(123456, 2)``. Values are
immutable; every operation returns a new instance.
"""

from dataclasses import dataclass
from typing import Any, Final, Optional

from fixedpoint.domain.exceptions import (
    CoefficientOverflowError,
    DecimalError,
    FatalDecimalError,
    ScalingOverflowError,
)
from fixedpoint.shared.utils.checked_math import INT32_MAX, INT32_MIN, is_int32

from .rounding_mode import RoundingMode

MAX_COEFFICIENT: Final[int] = INT32_MAX
MIN_COEFFICIENT: Final[int] = INT32_MIN

MAX_SCALING: Final[int] = 8
MIN_SCALING: Final[int] = 0

# MAX_COEFFICIENT is 2147483647, so 10 digits at most
MAX_PRECISION: Final[int] = 10


@dataclass(frozen=True)
class DecimalValue:
    coefficient: int
    scaling: int = 0

    def __post_init__(self) -> None:
        for name in ("coefficient", "scaling"):
            field_value = getattr(self, name)
            if isinstance(field_value, bool) or not isinstance(field_value, int):
                raise TypeError(
                    f"{name} must be an int, got {type(field_value).__name__}"
                )

        if not MIN_SCALING <= self.scaling <= MAX_SCALING:
            raise ScalingOverflowError()

        if not is_int32(self.coefficient):
            raise CoefficientOverflowError()

    @classmethod
    def try_new(cls, coefficient: int, scaling: int = 0) -> "DecimalValue":
        """
        Create a decimal number, raising a recoverable error on bad input.

        :param coefficient: Signed 32-bit coefficient
        :param scaling: Digits after the decimal point, 0 to MAX_SCALING

        :return: The new decimal number, not normalized in any way

        :raises ScalingOverflowError: If scaling exceeds MAX_SCALING
        :raises CoefficientOverflowError: If coefficient is not a 32-bit integer
        """
        return cls(coefficient, scaling)

    @classmethod
    def new(cls, coefficient: int, scaling: int = 0) -> "DecimalValue":
        """Same as ``try_new``, but treats any error as a broken precondition."""
        try:
            return cls.try_new(coefficient, scaling)
        except DecimalError as e:
            raise FatalDecimalError(str(e)) from e

    @classmethod
    def from_int(cls, value: int) -> "DecimalValue":
        return cls.try_new(value, 0)

    @classmethod
    def parse(cls, text: str) -> "DecimalValue":
        from fixedpoint.domain.services.parser import parse_decimal

        return parse_decimal(text)

    @classmethod
    def of(cls, text: str) -> "DecimalValue":
        """Parse ``text`` at a call site that knows it is well formed."""
        try:
            return cls.parse(text)
        except DecimalError as e:
            raise FatalDecimalError(f"Cannot parse {text!r}: {e}") from e

    def __str__(self) -> str:
        from fixedpoint.domain.services.formatter import format_decimal

        return format_decimal(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented

        from fixedpoint.domain.services.arithmetic import equals

        return equals(self, other)

    def __hash__(self) -> int:
        from fixedpoint.domain.services.arithmetic import normalized

        return hash(normalized(self))

    def __neg__(self) -> "DecimalValue":
        from fixedpoint.domain.services.arithmetic import neg

        return neg(self)

    def __pos__(self) -> "DecimalValue":
        return self

    def checked_neg(self) -> Optional["DecimalValue"]:
        from fixedpoint.domain.services.arithmetic import checked_neg

        return checked_neg(self)

    def rounding_neg(
        self, rounding_mode: RoundingMode = RoundingMode.HALF_UP
    ) -> "DecimalValue":
        from fixedpoint.domain.services.arithmetic import rounding_neg

        return rounding_neg(self, rounding_mode)

    def is_aligned_to(self, other: "DecimalValue") -> bool:
        return self.scaling == other.scaling

    def try_upscale_by(self, amount: int) -> "DecimalValue":
        from fixedpoint.domain.services.scaling import try_upscale_by

        return try_upscale_by(self, amount)

    def upscale_by(self, amount: int) -> "DecimalValue":
        from fixedpoint.domain.services.scaling import upscale_by

        return upscale_by(self, amount)

    def downscale_by(
        self, amount: int, rounding_mode: RoundingMode = RoundingMode.HALF_UP
    ) -> "DecimalValue":
        from fixedpoint.domain.services.scaling import downscale_by

        return downscale_by(self, amount, rounding_mode)

    def rescale_to(
        self, scaling: int, rounding_mode: RoundingMode = RoundingMode.HALF_UP
    ) -> "DecimalValue":
        from fixedpoint.domain.services.scaling import rescale_to

        return rescale_to(self, scaling, rounding_mode)

    def signum(self) -> int:
        return (self.coefficient > 0) - (self.coefficient < 0)

    def is_positive(self) -> bool:
        return self.coefficient > 0

    def is_negative(self) -> bool:
        return self.coefficient < 0

    def is_zero(self) -> bool:
        return self.coefficient == 0
