"""
nullsafe - null-safety wrappers for Python values.

- NullSafe: immutable optional-value container
- Result / Ok / Err: explicit success-or-failure container
- NullSafeValidator: rule engine producing ValidationResult trees
- NullSafeTransformer: total, short-circuiting transformation pipeline
"""

from .adapters import NullSafeAdapter, adapter
from .config import NullSafeSettings, get_settings, reset_settings, set_settings
from .container import NullSafe
from .exceptions import (
    EmptyValueError,
    FailedResultError,
    FilterError,
    NullSafeError,
    ValidationError,
)
from .result import Err, Ok, Result, attempt, describe_error
from .transform import NullSafeTransformer, StepError, TransformationStep
from .typeclasses import Applicative, Functor, Monad, compose, identity
from .validation import (
    CollectionRules,
    NullSafeValidator,
    NumberRules,
    StringRules,
    ValidationResult,
    ValidationRule,
)

__version__ = "1.0.0"

__all__ = [
    # Container
    "NullSafe",
    "NullSafeAdapter", "adapter",
    # Result
    "Result", "Ok", "Err", "attempt", "describe_error",
    # Validation
    "NullSafeValidator", "StringRules", "NumberRules", "CollectionRules",
    "ValidationRule", "ValidationResult",
    # Transformation
    "NullSafeTransformer", "TransformationStep", "StepError",
    # Typeclasses
    "Functor", "Applicative", "Monad",
    "compose", "identity",
    # Errors
    "NullSafeError", "EmptyValueError", "ValidationError", "FilterError", "FailedResultError",
    # Config
    "NullSafeSettings", "get_settings", "set_settings", "reset_settings",
]
