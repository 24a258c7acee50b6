"""
ValidationResult - the pass/fail report tree produced by NullSafeValidator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple


def _build_message(valid: bool, sub_results: Sequence["ValidationResult"]) -> str:
    if not sub_results:
        return "Validation passed" if valid else "Validation failed"

    message = "All validations passed" if valid else "Validation failed"
    failures = [f"{r.rule_name}: {r.message}" for r in sub_results if not r.valid]
    if failures:
        message += " - " + "; ".join(failures)
    return message


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of one rule (leaf) or of a group of rules (composite).

    A composite built with ``composite()`` is valid exactly when all of its
    sub-results are valid, and its message lists the failing ones.

    ::: This is-in-layer Validation-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """
    rule_name: str
    valid: bool
    message: str
    sub_results: Tuple["ValidationResult", ...] = field(default_factory=tuple)

    @classmethod
    def leaf(cls, rule_name: str, valid: bool, message: str) -> "ValidationResult":
        return cls(rule_name, valid, message)

    @classmethod
    def composite(cls, rule_name: str, sub_results: Sequence["ValidationResult"],
                  message: Optional[str] = None) -> "ValidationResult":
        subs = tuple(sub_results)
        valid = all(r.valid for r in subs)
        return cls(rule_name, valid, message if message is not None else _build_message(valid, subs), subs)

    def is_valid(self) -> bool:
        return self.valid

    def failures(self) -> List["ValidationResult"]:
        return [r for r in self.sub_results if not r.valid]

    def passes(self) -> List["ValidationResult"]:
        return [r for r in self.sub_results if r.valid]

    def combine(self, other: "ValidationResult") -> "ValidationResult":
        """Group two results under a new ``combined`` node."""
        return ValidationResult.composite("combined", (self, other))

    def summary(self) -> str:
        """Indented PASS/FAIL tree, one line per node."""
        lines = [f"{self.rule_name}: {'PASS' if self.valid else 'FAIL'}"]
        for sub in self.sub_results:
            lines.extend("  " + line for line in sub.summary().splitlines())
        return "\n".join(lines)

    def __str__(self) -> str:
        return f"{self.rule_name}: {'VALID' if self.valid else 'INVALID'} ({self.message})"


__all__ = ["ValidationResult"]
