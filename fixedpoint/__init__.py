"""
Fixed-point decimal numbers on a 32-bit coefficient.

    >>> from fixedpoint import DecimalValue
    >>> str(DecimalValue(123456, 2))
    '1234.56'
    >>> str(-DecimalValue.parse("-21474836.47"))
    '21474836.47'
"""

from fixedpoint.domain.exceptions import (
    BadFormatError,
    CoefficientOverflowError,
    DecimalError,
    FatalDecimalError,
    ScalingOverflowError,
)
from fixedpoint.domain.services import format_decimal, parse_decimal
from fixedpoint.domain.values import (
    MAX_COEFFICIENT,
    MAX_PRECISION,
    MAX_SCALING,
    MIN_COEFFICIENT,
    MIN_SCALING,
    DecimalValue,
    RoundingMode,
)

__all__ = [
    "DecimalValue",
    "RoundingMode",
    "MAX_COEFFICIENT",
    "MIN_COEFFICIENT",
    "MAX_SCALING",
    "MIN_SCALING",
    "MAX_PRECISION",
    "DecimalError",
    "BadFormatError",
    "ScalingOverflowError",
    "CoefficientOverflowError",
    "FatalDecimalError",
    "parse_decimal",
    "format_decimal",
]
