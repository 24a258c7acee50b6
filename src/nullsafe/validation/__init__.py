"""
Validation rule engine.

- NullSafeValidator: builder of named rules, evaluated all at once
- StringRules / NumberRules / CollectionRules: typed fluent rule sets
- ValidationRule: one named predicate
- ValidationResult: composite pass/fail report
"""

from .engine import CollectionRules, NullSafeValidator, NumberRules, StringRules
from .result import ValidationResult
from .rules import ValidationRule

__all__ = [
    "NullSafeValidator",
    "StringRules",
    "NumberRules",
    "CollectionRules",
    "ValidationRule",
    "ValidationResult",
]
