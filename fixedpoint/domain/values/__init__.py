from .decimal_value import (
    MAX_COEFFICIENT,
    MAX_PRECISION,
    MAX_SCALING,
    MIN_COEFFICIENT,
    MIN_SCALING,
    DecimalValue,
)
from .rounding_mode import RoundingMode

__all__ = [
    "DecimalValue",
    "RoundingMode",
    "MAX_COEFFICIENT",
    "MIN_COEFFICIENT",
    "MAX_SCALING",
    "MIN_SCALING",
    "MAX_PRECISION",
]
