"""
ValidationRule - a named predicate with the message reported when it fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from ..logging_config import log_failure, validation_logger
from ..result import attempt, describe_error
from .result import ValidationResult

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationRule(Generic[T]):
    """
    A single validation rule.

    ``accepts_absent`` marks rules that are meaningful for an absent value
    (not_null, is_null); only those are evaluated, against ``None``, when
    the validated container is empty.

    ::: This is-in-layer Validation-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """
    name: str
    predicate: Callable[[T], bool]
    error_message: str
    accepts_absent: bool = False

    def evaluate(self, value: Any) -> ValidationResult:
        """Run the predicate; a raised exception becomes a failing leaf."""
        # truthiness is part of the predicate call: __bool__ may raise too
        outcome = attempt(lambda v: bool(self.predicate(v)), value)
        if outcome.is_failure():
            reason = describe_error(outcome.get_error().get())
            log_failure(validation_logger, "Rule %r raised %s", self.name, reason)
            return ValidationResult.leaf(self.name, False, f"Validation error: {reason}")
        return ValidationResult.leaf(self.name, outcome.get(), self.error_message)


__all__ = ["ValidationRule"]
