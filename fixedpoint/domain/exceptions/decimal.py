from .base import DomainException


class DecimalError(DomainException):
    """Base exception for recoverable decimal number errors."""

    pass


class BadFormatError(DecimalError):
    """Raised when a text cannot be parsed into a decimal number."""

    def __init__(self, reason: str):
        self.reason = reason

        super().__init__(reason)


class ScalingOverflowError(DecimalError):
    """Raised when a scaling factor falls outside [MIN_SCALING, MAX_SCALING]."""

    def __init__(self, message: str = "Scaling overflow"):
        super().__init__(message)


class CoefficientOverflowError(DecimalError):
    """Raised when a coefficient leaves the signed 32-bit range."""

    def __init__(self, message: str = "Coefficient overflow"):
        super().__init__(message)


class FatalDecimalError(RuntimeError):
    """
    Raised by the asserting variants (``new``, ``of``, ``upscale_by``, unary minus)
    when a precondition the caller vouched for does not hold.

    It is intentionally not a ``DecimalError``: handlers of recoverable errors
    must not swallow a broken invariant.
    """

    pass
