from .base import DomainException
from .decimal import (
    BadFormatError,
    CoefficientOverflowError,
    DecimalError,
    FatalDecimalError,
    ScalingOverflowError,
)

__all__ = [
    "DomainException",
    "DecimalError",
    "BadFormatError",
    "ScalingOverflowError",
    "CoefficientOverflowError",
    "FatalDecimalError",
]
