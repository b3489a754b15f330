from fixedpoint.domain.exceptions import (
    CoefficientOverflowError,
    DecimalError,
    FatalDecimalError,
    ScalingOverflowError,
)
from fixedpoint.domain.values import MAX_PRECISION, DecimalValue, RoundingMode
from fixedpoint.shared.utils.checked_math import checked_mul


def is_aligned_to(value: DecimalValue, other: DecimalValue) -> bool:
    """
    Two decimal numbers are aligned when they share the same scaling factor,
    e.g. ``123.45`` and ``10987.65``. Operations that combine digit by digit
    require aligned operands.
    """
    return value.is_aligned_to(other)


def try_upscale_by(value: DecimalValue, amount: int) -> DecimalValue:
    """
    Increase the scaling factor by appending ``amount`` trailing zeros.

    ``DecimalValue(123591, 3)`` ("123.591") upscaled by 2 becomes
    ``DecimalValue(12359100, 5)`` ("123.59100").

    :raises CoefficientOverflowError: If the new coefficient does not fit in 32 bits
    :raises ScalingOverflowError: If the new scaling exceeds MAX_SCALING
    """
    if amount < 0:
        raise ScalingOverflowError("Upscale amount cannot be negative")

    coefficient = value.coefficient
    # any non-zero coefficient overflows within MAX_PRECISION steps
    for _ in range(min(amount, MAX_PRECISION + 1)):
        multiplied = checked_mul(coefficient, 10)
        if multiplied is None:
            raise CoefficientOverflowError()
        coefficient = multiplied

    return DecimalValue.try_new(coefficient, value.scaling + amount)


def upscale_by(value: DecimalValue, amount: int) -> DecimalValue:
    """Same as ``try_upscale_by``, but treats any error as a broken precondition."""
    try:
        return try_upscale_by(value, amount)
    except DecimalError as e:
        raise FatalDecimalError(str(e)) from e


def _round_half_up(retained: int, discarded: int, unit: int) -> int:
    # unit is the place value of the most significant discarded digit
    if discarded // unit >= 5:
        return retained + 1

    return retained


def downscale_by(
    value: DecimalValue,
    amount: int,
    rounding_mode: RoundingMode = RoundingMode.HALF_UP,
) -> DecimalValue:
    """
    Decrease the scaling factor by ``amount``, rounding away the dropped digits.

    This may lose precision: ``DecimalValue(12345678, 6)`` ("12.345678")
    downscaled by 4 becomes ``DecimalValue(1235, 2)`` ("12.35") with HALF_UP.

    :raises ScalingOverflowError: If ``amount`` is negative or exceeds the scaling
    """
    if amount < 0 or amount > value.scaling:
        raise ScalingOverflowError(
            f"Cannot downscale a number of scaling {value.scaling} by {amount}"
        )

    if amount == 0:
        return value

    # Split |coefficient| into the retained high part and the discarded
    # low part made of the last `amount` digits.
    retained = abs(value.coefficient)
    discarded = 0
    unit = 1
    for t in range(amount):
        unit = 10**t
        discarded += (retained % 10) * unit
        retained //= 10

    if RoundingMode(rounding_mode) == RoundingMode.HALF_UP:
        rounded = _round_half_up(retained, discarded, unit)
    else:
        raise ValueError(f"Unsupported rounding mode: {rounding_mode}")

    # The retained part has lost at least one digit, so adding one cannot
    # push it past MAX_COEFFICIENT.
    return DecimalValue(value.signum() * rounded, value.scaling - amount)


def rescale_to(
    value: DecimalValue,
    scaling: int,
    rounding_mode: RoundingMode = RoundingMode.HALF_UP,
) -> DecimalValue:
    """
    Move ``value`` to exactly ``scaling`` fractional digits, upscaling or
    downscaling as needed.

    :raises CoefficientOverflowError: If upscaling overflows the coefficient
    :raises ScalingOverflowError: If ``scaling`` is out of range
    """
    if scaling > value.scaling:
        return try_upscale_by(value, scaling - value.scaling)

    if scaling < 0:
        raise ScalingOverflowError()

    return downscale_by(value, value.scaling - scaling, rounding_mode)
