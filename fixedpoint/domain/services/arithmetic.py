from typing import Optional

from fixedpoint.domain.exceptions import FatalDecimalError
from fixedpoint.domain.values import DecimalValue, RoundingMode
from fixedpoint.shared.logging import get_logger
from fixedpoint.shared.utils import checked_math

from .scaling import downscale_by

logger = get_logger(__name__)


def normalized(value: DecimalValue) -> tuple[int, int]:
    """
    Strip trailing fractional zeros: ``(1234560, 3)`` -> ``(123456, 2)``.

    Integer digits are never stripped, so ``120`` stays apart from ``12``.
    """
    coefficient, scaling = value.coefficient, value.scaling
    while scaling > 0 and coefficient % 10 == 0:
        coefficient //= 10
        scaling -= 1

    return coefficient, scaling


def equals(a: DecimalValue, b: DecimalValue) -> bool:
    """
    Value equality regardless of scaling: ``1234.56 == 1234.560``
    but ``12345.60 != 1234.560``.
    """
    return normalized(a) == normalized(b)


def checked_neg(value: DecimalValue) -> Optional[DecimalValue]:
    """
    Negate ``value``, or return None if the coefficient is MIN_COEFFICIENT,
    whose negation does not fit in 32 bits.
    """
    coefficient = checked_math.checked_neg(value.coefficient)
    if coefficient is None:
        return None

    return DecimalValue(coefficient, value.scaling)


def neg(value: DecimalValue) -> DecimalValue:
    negated = checked_neg(value)
    if negated is None:
        raise FatalDecimalError(f"Coefficient overflow while negating {value}")

    return negated


def rounding_neg(
    value: DecimalValue, rounding_mode: RoundingMode = RoundingMode.HALF_UP
) -> DecimalValue:
    """
    Negate ``value``, giving up one digit of precision if that is the only way.

    When the negation overflows, the number is downscaled by 1 first, which
    shrinks the coefficient well below the overflow threshold, and the
    downscaled number is negated instead: ``-21474836.48`` becomes ``21474836.5``.

    :raises ScalingOverflowError: If the overflowing number has no fractional digit to drop
    """
    negated = checked_neg(value)
    if negated is not None:
        return negated

    downscaled = downscale_by(value, 1, rounding_mode)
    logger.warning(
        "negation_precision_lost",
        value=str(value),
        downscaled=str(downscaled),
        rounding_mode=str(rounding_mode),
    )

    return neg(downscaled)
