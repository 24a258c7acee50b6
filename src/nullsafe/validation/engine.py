"""
NullSafeValidator - rule engine evaluating named predicates against a container.

Unlike ``NullSafe.validate``, the engine never raises and never stops at the
first failure: every rule runs and the caller receives a ValidationResult
tree with one leaf per evaluated rule.

Example:
    result = (
        NullSafeValidator.of(NullSafe.of("password123"))
        .if_string()
            .min_length(8)
            .matches(r".*[0-9].*")
        .and_()
        .validate()
    )
    result.is_valid()   # True

Typed rule sets (StringRules, NumberRules, CollectionRules) are reached via
if_string()/if_number()/if_collection(), which are only offered by a
validator whose value type already fits; the rules themselves never inspect
the runtime type to decide which checks apply.

A validator is a single-threaded builder: rules are appended while building
and snapshotted at validate() time. Give each thread its own validator.
"""

from __future__ import annotations

import re
from numbers import Real
from typing import (
    Callable, Generic, List, Optional, Pattern, Sized, Tuple, TypeVar, Union,
)
from urllib.parse import urlparse

from ..config import get_settings
from ..container import NullSafe
from .result import ValidationResult
from .rules import ValidationRule

T = TypeVar("T")
N = TypeVar("N", bound=Real)

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
URL_SCHEMES = ("http", "https", "ftp", "ftps", "file")

ABSENT_MESSAGE = "Value is null"
FAIL_ON_ABSENT_RULE = "fail_on_absent"
FAIL_ON_ABSENT_MESSAGE = "Absent values are not allowed"


class NullSafeValidator(Generic[T]):
    """
    Builder accumulating validation rules for one container.

    ::: This is-in-layer Validation-Layer.
    ::: This is a builder.
    ::: This is stateful.

    Absence policy: when the container is empty only the absence-aware
    rules (not_null, is_null) are evaluated. The overall result is then
    valid unless one of those fails or ``fail_on_absent`` is set; the
    latter adds a failing ``fail_on_absent`` leaf so that the overall node
    stays the AND of its sub-results.
    ``fail_on_absent=None`` defers to NullSafeSettings.fail_on_absent.
    """

    def __init__(self, value: NullSafe[T], fail_on_absent: Optional[bool] = None):
        self._value = value
        self._fail_on_absent = fail_on_absent
        self._rules: List[ValidationRule[T]] = []
        self._results: Tuple[ValidationResult, ...] = ()

    @classmethod
    def of(cls, value: NullSafe[T], fail_on_absent: Optional[bool] = None) -> "NullSafeValidator[T]":
        return cls(value, fail_on_absent)

    @property
    def value(self) -> NullSafe[T]:
        return self._value

    @property
    def fail_on_absent(self) -> bool:
        if self._fail_on_absent is None:
            return get_settings().fail_on_absent
        return self._fail_on_absent

    @property
    def rules(self) -> Tuple[ValidationRule[T], ...]:
        return tuple(self._rules)

    # -------------------------------------------------------------------------
    # Rule builders
    # -------------------------------------------------------------------------

    def rule(self, name: str, predicate: Callable[[T], bool], error_message: str,
             accepts_absent: bool = False) -> "NullSafeValidator[T]":
        """Append a rule and return self for chaining."""
        self._rules.append(ValidationRule(name, predicate, error_message, accepts_absent))
        return self

    def not_null(self) -> "NullSafeValidator[T]":
        return self.rule("not_null", lambda v: v is not None, "Value cannot be null", accepts_absent=True)

    def is_null(self) -> "NullSafeValidator[T]":
        return self.rule("is_null", lambda v: v is None, "Value must be null", accepts_absent=True)

    def is_one_of(self, *allowed: T) -> "NullSafeValidator[T]":
        choices = list(allowed)
        return self.rule("is_one_of", lambda v: v in choices, "Value is not in the allowed set")

    def custom(self, fn: Callable[[T], bool], error_message: str = "Custom validation failed",
               name: str = "custom") -> "NullSafeValidator[T]":
        return self.rule(name, fn, error_message)

    def if_string(self: "NullSafeValidator[str]") -> "StringRules":
        return StringRules(self)

    def if_number(self: "NullSafeValidator[N]") -> "NumberRules[N]":
        return NumberRules(self)

    def if_collection(self: "NullSafeValidator[Sized]") -> "CollectionRules":
        return CollectionRules(self)

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def validate(self) -> ValidationResult:
        """Evaluate every applicable rule; never raises."""
        rules = tuple(self._rules)

        if self._value.is_absent():
            results = tuple(rule.evaluate(None) for rule in rules if rule.accepts_absent)
            if self.fail_on_absent:
                results += (ValidationResult.leaf(FAIL_ON_ABSENT_RULE, False, FAIL_ON_ABSENT_MESSAGE),)
            failures = [f"{r.rule_name}: {r.message}" for r in results if not r.valid]
            message = ABSENT_MESSAGE if not failures else f"{ABSENT_MESSAGE} - " + "; ".join(failures)
            self._results = results
            return ValidationResult.composite("overall", results, message)

        actual = self._value.get()
        results = tuple(rule.evaluate(actual) for rule in rules)
        self._results = results
        return ValidationResult.composite("overall", results)

    def results(self) -> List[ValidationResult]:
        """Leaf results of the most recent validate() call."""
        return list(self._results)

    def get_valid_value(self) -> NullSafe[T]:
        """The container if it validates, otherwise an absent container."""
        if self.validate().is_valid():
            return self._value
        return NullSafe.empty()


# =============================================================================
# Typed rule sets
# =============================================================================

class _RuleSet(Generic[T]):
    """Fluent sub-builder that appends rules to a parent validator."""

    def __init__(self, validator: NullSafeValidator[T]):
        self._validator = validator

    def _add(self, name: str, predicate: Callable[[T], bool], error_message: str):
        self._validator.rule(name, predicate, error_message)
        return self

    def rule(self, name: str, predicate: Callable[[T], bool], error_message: str):
        return self._add(name, predicate, error_message)

    def and_(self) -> NullSafeValidator[T]:
        """Return to the parent validator."""
        return self._validator

    def validate(self) -> ValidationResult:
        """Shortcut for ``and_().validate()``."""
        return self._validator.validate()


class StringRules(_RuleSet[str]):
    """Length, pattern and substring checks for string values.

    ::: This is-in-layer Validation-Layer.
    ::: This is a builder.
    """

    def min_length(self, n: int) -> "StringRules":
        return self._add("min_length", lambda s: len(s) >= n, f"String must be at least {n} characters")

    def max_length(self, n: int) -> "StringRules":
        return self._add("max_length", lambda s: len(s) <= n, f"String must be at most {n} characters")

    def length(self, n: int) -> "StringRules":
        return self._add("exact_length", lambda s: len(s) == n, f"String must be exactly {n} characters")

    def not_empty(self) -> "StringRules":
        return self._add("not_empty", lambda s: bool(s.strip()), "String cannot be empty")

    def matches(self, pattern: Union[str, Pattern[str]], error_message: Optional[str] = None) -> "StringRules":
        """The whole string must match ``pattern``."""
        compiled = re.compile(pattern)
        message = error_message or f"String does not match pattern: {compiled.pattern}"
        return self._add("matches", lambda s: compiled.fullmatch(s) is not None, message)

    def contains(self, substring: str) -> "StringRules":
        return self._add("contains", lambda s: substring in s, f"String must contain: {substring}")

    def starts_with(self, prefix: str) -> "StringRules":
        return self._add("starts_with", lambda s: s.startswith(prefix), f"String must start with: {prefix}")

    def ends_with(self, suffix: str) -> "StringRules":
        return self._add("ends_with", lambda s: s.endswith(suffix), f"String must end with: {suffix}")

    def is_email(self) -> "StringRules":
        return self._add("is_email", lambda s: EMAIL_PATTERN.match(s) is not None, "Invalid email format")

    def is_url(self) -> "StringRules":
        return self._add("is_url", _is_url, "Invalid URL format")


def _is_url(s: str) -> bool:
    parsed = urlparse(s)
    if parsed.scheme not in URL_SCHEMES:
        return False
    return bool(parsed.netloc) or (parsed.scheme == "file" and bool(parsed.path))


class NumberRules(_RuleSet[N]):
    """Range, sign and type checks for numeric values.

    ::: This is-in-layer Validation-Layer.
    ::: This is a builder.
    """

    def min(self, minimum: Real) -> "NumberRules[N]":
        return self._add("min_value", lambda n: n >= minimum, f"Number must be at least {minimum}")

    def max(self, maximum: Real) -> "NumberRules[N]":
        return self._add("max_value", lambda n: n <= maximum, f"Number must be at most {maximum}")

    def range(self, minimum: Real, maximum: Real) -> "NumberRules[N]":
        return self._add("range", lambda n: minimum <= n <= maximum,
                         f"Number must be between {minimum} and {maximum}")

    def positive(self) -> "NumberRules[N]":
        return self._add("positive", lambda n: n > 0, "Number must be positive")

    def non_negative(self) -> "NumberRules[N]":
        return self._add("non_negative", lambda n: n >= 0, "Number must be non-negative")

    def negative(self) -> "NumberRules[N]":
        return self._add("negative", lambda n: n < 0, "Number must be negative")

    def is_integer(self) -> "NumberRules[N]":
        return self._add("is_integer", lambda n: isinstance(n, int) and not isinstance(n, bool),
                         "Number must be an integer")

    def is_float(self) -> "NumberRules[N]":
        return self._add("is_float", lambda n: isinstance(n, float), "Number must be a float")


class CollectionRules(_RuleSet[Sized]):
    """Size checks for sized collections.

    ::: This is-in-layer Validation-Layer.
    ::: This is a builder.
    """

    def min_size(self, n: int) -> "CollectionRules":
        return self._add("min_size", lambda c: len(c) >= n, f"Collection must have at least {n} elements")

    def max_size(self, n: int) -> "CollectionRules":
        return self._add("max_size", lambda c: len(c) <= n, f"Collection must have at most {n} elements")

    def size(self, n: int) -> "CollectionRules":
        return self._add("exact_size", lambda c: len(c) == n, f"Collection must have exactly {n} elements")

    def not_empty(self) -> "CollectionRules":
        return self._add("not_empty", lambda c: len(c) > 0, "Collection cannot be empty")


__all__ = [
    "NullSafeValidator",
    "StringRules",
    "NumberRules",
    "CollectionRules",
    "EMAIL_PATTERN",
]
