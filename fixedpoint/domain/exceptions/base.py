class DomainException(Exception):
    """Base class for all errors raised by the domain layer."""

    pass
