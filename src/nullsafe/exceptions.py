"""
NullSafe Exception Hierarchy

Contains all exception classes raised by the container, the Result type
and the transformation steps.
"""

from typing import Any


class NullSafeError(Exception):
    """
    Base exception for all nullsafe operations.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class EmptyValueError(NullSafeError, LookupError):
    """
    Raised when a value is requested from an absent container.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.

    Raised by NullSafe.get() and by NullSafe.or_else_raise() when no
    exception supplier is given. Callers that need totality should use
    or_else / or_else_get / recover instead.
    """

    def __init__(self, message: str = "No value present"):
        super().__init__(message)


class ValidationError(NullSafeError, ValueError):
    """
    Raised when a present value fails a validation predicate.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class FilterError(NullSafeError):
    """
    Raised by a filter transformation step when its predicate rejects the value.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class FailedResultError(NullSafeError):
    """
    Raised when the value of a failed Result is requested and the error
    itself is not an exception.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """

    def __init__(self, error: Any):
        super().__init__(f"Result is a failure: {error!r}")
        self.error = error


__all__ = [
    "NullSafeError",
    "EmptyValueError",
    "ValidationError",
    "FilterError",
    "FailedResultError",
]
