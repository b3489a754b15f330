from .decimal_factory import DecimalFactory

__all__ = [
    "DecimalFactory",
]
