"""
Transformation steps for NullSafeTransformer.

A step maps one value to the next. ``apply`` may raise; ``execute`` wraps
it into a Result so the pipeline sees failures as data:

    execute : value -> Ok(new_value) | Err(StepError)

Two class-level flags steer the pipeline's null handling:

- ``allows_null``: a ``None`` result does not abort the pipeline
- ``accepts_none``: the step may be invoked with ``None`` as input
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING, Any, Callable, ClassVar, Dict, Hashable, Iterable, List, Optional,
)

from ..container import NullSafe
from ..exceptions import FilterError, ValidationError
from ..result import Result, attempt, describe_error

if TYPE_CHECKING:
    from .pipeline import NullSafeTransformer


# =============================================================================
# Step error
# =============================================================================

@dataclass(frozen=True)
class StepError:
    """Why a pipeline stopped.

    ::: This is-in-layer Transformation-Layer.
    ::: This is a value-object.
    """
    step: str
    message: str
    index: int = -1
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        where = f"{self.step}#{self.index}" if self.index >= 0 else self.step
        return f"[{where}] {self.message}"


# =============================================================================
# Step base
# =============================================================================

class TransformationStep(ABC):
    """
    One unit of transformation logic within a pipeline.

    ::: This is-in-layer Transformation-Layer.
    ::: This is a step.
    ::: This is stateless.
    """
    name: ClassVar[str] = "step"
    allows_null: ClassVar[bool] = False
    accepts_none: ClassVar[bool] = False

    @abstractmethod
    def apply(self, value: Any) -> Any:
        """Transform ``value``; may raise."""
        raise NotImplementedError

    def execute(self, value: Any) -> Result[Any, StepError]:
        """Run apply() and capture a raised exception as Err(StepError)."""
        return attempt(self.apply, value).map_error(
            lambda e: StepError(self.name, f"{type(e).__name__}: {describe_error(e)}", cause=e)
        )


# =============================================================================
# Mapping steps
# =============================================================================

@dataclass(frozen=True)
class FunctionStep(TransformationStep):
    """``fn(value)``; a None result ends the pipeline."""
    name: ClassVar[str] = "map"
    fn: Callable[[Any], Any]

    def apply(self, value: Any) -> Any:
        return self.fn(value)


@dataclass(frozen=True)
class SafeFunctionStep(TransformationStep):
    """Like FunctionStep, but None passes through in both directions."""
    name: ClassVar[str] = "map_safe"
    allows_null: ClassVar[bool] = True
    accepts_none: ClassVar[bool] = True
    fn: Callable[[Any], Any]

    def apply(self, value: Any) -> Any:
        if value is None:
            return None
        return self.fn(value)


@dataclass(frozen=True)
class ValidatingStep(TransformationStep):
    """``fn(value)``, then raise ValidationError unless ``validator`` accepts it."""
    name: ClassVar[str] = "map_with_validation"
    fn: Callable[[Any], Any]
    validator: Callable[[Any], bool]

    def apply(self, value: Any) -> Any:
        transformed = self.fn(value)
        if not self.validator(transformed):
            raise ValidationError("Validation failed after transformation")
        return transformed


@dataclass(frozen=True)
class ConditionalStep(TransformationStep):
    name: ClassVar[str] = "map_conditional"
    condition: Callable[[Any], bool]
    if_true: Callable[[Any], Any]
    if_false: Callable[[Any], Any]

    def apply(self, value: Any) -> Any:
        if self.condition(value):
            return self.if_true(value)
        return self.if_false(value)


@dataclass(frozen=True)
class FallbackStep(TransformationStep):
    """``fn(value)``, or ``fallback`` if it raises."""
    name: ClassVar[str] = "map_with_fallback"
    fn: Callable[[Any], Any]
    fallback: Any

    def apply(self, value: Any) -> Any:
        try:
            return self.fn(value)
        except Exception:
            return self.fallback


@dataclass(frozen=True)
class ErrorHandlingStep(TransformationStep):
    """``fn(value)``, or ``handler(exc)`` if it raises."""
    name: ClassVar[str] = "map_with_error_handling"
    fn: Callable[[Any], Any]
    handler: Callable[[Exception], Any]

    def apply(self, value: Any) -> Any:
        try:
            return self.fn(value)
        except Exception as e:
            return self.handler(e)


@dataclass(frozen=True)
class FilterStep(TransformationStep):
    name: ClassVar[str] = "filter"
    predicate: Callable[[Any], bool]

    def apply(self, value: Any) -> Any:
        if not self.predicate(value):
            raise FilterError("Value does not match filter condition")
        return value


# =============================================================================
# Collection steps
# =============================================================================

@dataclass(frozen=True)
class FirstMatchStep(TransformationStep):
    """
    Expand the value into a collection, transform each element and keep the
    first non-None result (None when there is none).
    """
    name: ClassVar[str] = "first_match"
    allows_null: ClassVar[bool] = True
    to_collection: Callable[[Any], Iterable[Any]]
    element_fn: Callable[[Any], Any]

    def apply(self, value: Any) -> Any:
        for element in self.to_collection(value):
            transformed = self.element_fn(element)
            if transformed is not None:
                return transformed
        return None


@dataclass(frozen=True)
class ExpandStep(TransformationStep):
    """
    One-to-many: transform every element of ``to_collection(value)``, drop
    None results and hand the list to ``aggregate``.
    """
    name: ClassVar[str] = "expand"
    to_collection: Callable[[Any], Iterable[Any]]
    element_fn: Callable[[Any], Any]
    aggregate: Callable[[List[Any]], Any] = list

    def apply(self, value: Any) -> Any:
        results = (self.element_fn(element) for element in self.to_collection(value))
        return self.aggregate([r for r in results if r is not None])


@dataclass(frozen=True)
class ForkStep(TransformationStep):
    """
    One-to-many through a sub-pipeline: each element runs through its own
    copy of ``branch``; elements whose branch ends absent are dropped.
    """
    name: ClassVar[str] = "fork"
    to_collection: Callable[[Any], Iterable[Any]]
    branch: "NullSafeTransformer[Any, Any]"
    aggregate: Callable[[List[Any]], Any] = list

    def apply(self, value: Any) -> Any:
        outputs = (self.branch.with_input(NullSafe.of(e)).transform() for e in self.to_collection(value))
        return self.aggregate([out.get() for out in outputs if out.is_present()])


@dataclass(frozen=True)
class GroupByStep(TransformationStep):
    """Classify the value into a single-entry mapping ``{key: [value]}``."""
    name: ClassVar[str] = "group_by"
    classifier: Callable[[Any], Hashable]

    def apply(self, value: Any) -> Dict[Hashable, List[Any]]:
        return {self.classifier(value): [value]}


@dataclass(frozen=True)
class ReduceStep(TransformationStep):
    """``reducer(identity, value)``."""
    name: ClassVar[str] = "reduce"
    identity: Any
    reducer: Callable[[Any, Any], Any]

    def apply(self, value: Any) -> Any:
        return self.reducer(self.identity, value)


__all__ = [
    "StepError",
    "TransformationStep",
    "FunctionStep",
    "SafeFunctionStep",
    "ValidatingStep",
    "ConditionalStep",
    "FallbackStep",
    "ErrorHandlingStep",
    "FilterStep",
    "FirstMatchStep",
    "ExpandStep",
    "ForkStep",
    "GroupByStep",
    "ReduceStep",
]
