from .arithmetic import checked_neg, equals, neg, rounding_neg
from .formatter import format_decimal
from .parser import parse_decimal
from .precision_service import PrecisionPolicy, PrecisionService
from .scaling import (
    downscale_by,
    is_aligned_to,
    rescale_to,
    try_upscale_by,
    upscale_by,
)

__all__ = [
    "parse_decimal",
    "format_decimal",
    "is_aligned_to",
    "try_upscale_by",
    "upscale_by",
    "downscale_by",
    "rescale_to",
    "equals",
    "checked_neg",
    "neg",
    "rounding_neg",
    "PrecisionPolicy",
    "PrecisionService",
]
