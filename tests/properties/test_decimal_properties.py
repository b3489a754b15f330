"""
Property-based tests for the decimal engine, using Python's ``decimal``
module as the reference for values and rounding.
"""

from decimal import ROUND_HALF_UP, Decimal

from hypothesis import assume, given
from hypothesis import strategies as st

from fixedpoint.domain.services import format_decimal, parse_decimal
from fixedpoint.domain.values import (
    MAX_COEFFICIENT,
    MAX_SCALING,
    MIN_COEFFICIENT,
    MIN_SCALING,
    DecimalValue,
    RoundingMode,
)

coefficients = st.integers(min_value=MIN_COEFFICIENT, max_value=MAX_COEFFICIENT)
scalings = st.integers(min_value=MIN_SCALING, max_value=MAX_SCALING)
decimal_values = st.builds(DecimalValue, coefficients, scalings)


def _as_decimal(value: DecimalValue) -> Decimal:
    return Decimal(value.coefficient).scaleb(-value.scaling)


@given(decimal_values)
def test_parse_of_rendering_round_trips(value):
    parsed = parse_decimal(format_decimal(value))

    assert parsed == value
    assert (parsed.coefficient, parsed.scaling) == (value.coefficient, value.scaling)


@given(decimal_values)
def test_rendering_matches_reference_value(value):
    rendered = format_decimal(value)

    assert Decimal(rendered) == _as_decimal(value)
    # exactly `scaling` digits after the point, never a bare leading point
    if value.scaling:
        integer_part, fraction = rendered.lstrip("-").split(".")
        assert len(fraction) == value.scaling
        assert integer_part == "0" or not integer_part.startswith("0")
    else:
        assert "." not in rendered


@given(decimal_values, decimal_values)
def test_equality_matches_numeric_value(a, b):
    assert (a == b) == (_as_decimal(a) == _as_decimal(b))


@given(decimal_values, st.data())
def test_downscale_matches_round_half_up(value, data):
    amount = data.draw(st.integers(min_value=0, max_value=value.scaling))

    downscaled = value.downscale_by(amount, RoundingMode.HALF_UP)
    expected = _as_decimal(value).quantize(
        Decimal(1).scaleb(-(value.scaling - amount)), rounding=ROUND_HALF_UP
    )

    assert downscaled.scaling == value.scaling - amount
    assert _as_decimal(downscaled) == expected


@given(decimal_values)
def test_rounding_neg_flips_sign_and_loses_at_most_one_digit(value):
    # MIN_COEFFICIENT without a fractional digit cannot be downscaled
    assume(value.coefficient != MIN_COEFFICIENT or value.scaling > 0)

    negated = value.rounding_neg(RoundingMode.HALF_UP)

    if value.coefficient != MIN_COEFFICIENT:
        assert negated.coefficient == -value.coefficient
        assert negated.scaling == value.scaling
    else:
        assert negated.scaling == value.scaling - 1
        assert negated.is_positive()
