"""
NullSafeTransformer - ordered, short-circuiting transformation pipeline.

The transformer is persistent: every builder call returns a new transformer
with one more step, so a half-built pipeline can be shared and extended
without affecting other users of it.

Example:
    doubled_if_large = (
        NullSafeTransformer.from_(NullSafe.of(30))
        .map(lambda x: x * 2)
        .map_with_validation(lambda x: x, lambda x: x > 50)
    )
    doubled_if_large.transform()                           # NullSafe[60]
    doubled_if_large.with_input(NullSafe.of(10)).transform()  # NullSafe.empty

transform() is total: a failing step, a raised exception or an unexpected
None ends the pipeline with an absent container. transform_result()
runs the same algorithm and reports which step stopped it.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import (
    Any, Callable, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar,
)

from ..container import NullSafe
from ..logging_config import log_failure, pipeline_logger
from ..result import Err, Ok, Result
from .steps import (
    ConditionalStep,
    ErrorHandlingStep,
    ExpandStep,
    FallbackStep,
    FilterStep,
    FirstMatchStep,
    ForkStep,
    FunctionStep,
    GroupByStep,
    ReduceStep,
    SafeFunctionStep,
    StepError,
    TransformationStep,
    ValidatingStep,
)

T = TypeVar("T")
R = TypeVar("R")
R2 = TypeVar("R2")


@dataclass(frozen=True)
class NullSafeTransformer(Generic[T, R]):
    """
    A lazy sequence of steps applied to one input container.

    ::: This is-in-layer Transformation-Layer.
    ::: This is a pipeline.
    ::: This is stateless.
    """
    _input: NullSafe[T]
    _steps: Tuple[TransformationStep, ...] = ()

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_(cls, container: NullSafe[T],
              fn: Optional[Callable[[T], R]] = None) -> "NullSafeTransformer[T, Any]":
        """Start a pipeline on ``container``, optionally with a first map step."""
        transformer: NullSafeTransformer[T, Any] = cls(container)
        if fn is not None:
            transformer = transformer.map(fn)
        return transformer

    def with_input(self, container: NullSafe[Any]) -> "NullSafeTransformer[Any, R]":
        """The same steps, applied to a different input."""
        return NullSafeTransformer(container, self._steps)

    def _add_step(self, step: TransformationStep) -> "NullSafeTransformer[T, Any]":
        return NullSafeTransformer(self._input, self._steps + (step,))

    @property
    def steps(self) -> Tuple[TransformationStep, ...]:
        return self._steps

    @property
    def input(self) -> NullSafe[T]:
        return self._input

    def __len__(self) -> int:
        return len(self._steps)

    # -------------------------------------------------------------------------
    # Builder methods
    # -------------------------------------------------------------------------

    def map(self, fn: Callable[[R], R2]) -> "NullSafeTransformer[T, R2]":
        return self._add_step(FunctionStep(fn))

    def map_safe(self, fn: Callable[[R], R2]) -> "NullSafeTransformer[T, R2]":
        """Map that tolerates None input and output."""
        return self._add_step(SafeFunctionStep(fn))

    def map_with_validation(self, fn: Callable[[R], R2],
                            validator: Callable[[R2], bool]) -> "NullSafeTransformer[T, R2]":
        return self._add_step(ValidatingStep(fn, validator))

    def map_conditional(self, condition: Callable[[R], bool],
                        if_true: Callable[[R], R2],
                        if_false: Callable[[R], R2]) -> "NullSafeTransformer[T, R2]":
        return self._add_step(ConditionalStep(condition, if_true, if_false))

    def map_with_fallback(self, fn: Callable[[R], R2], fallback: R2) -> "NullSafeTransformer[T, R2]":
        return self._add_step(FallbackStep(fn, fallback))

    def map_with_error_handling(self, fn: Callable[[R], R2],
                                handler: Callable[[Exception], R2]) -> "NullSafeTransformer[T, R2]":
        return self._add_step(ErrorHandlingStep(fn, handler))

    def filter(self, predicate: Callable[[R], bool]) -> "NullSafeTransformer[T, R]":
        return self._add_step(FilterStep(predicate))

    def first_match(self, to_collection: Callable[[R], Iterable[Any]],
                    element_fn: Callable[[Any], R2]) -> "NullSafeTransformer[T, R2]":
        """Keep only the first non-None transformed element."""
        return self._add_step(FirstMatchStep(to_collection, element_fn))

    def expand(self, to_collection: Callable[[R], Iterable[Any]],
               element_fn: Callable[[Any], Any],
               aggregate: Callable[[List[Any]], R2] = list) -> "NullSafeTransformer[T, R2]":
        """Transform every element and aggregate the non-None results."""
        return self._add_step(ExpandStep(to_collection, element_fn, aggregate))

    def fork(self, to_collection: Callable[[R], Iterable[Any]],
             branch: Callable[["NullSafeTransformer[Any, Any]"], "NullSafeTransformer[Any, Any]"],
             aggregate: Callable[[List[Any]], R2] = list) -> "NullSafeTransformer[T, R2]":
        """
        Run every element through its own sub-pipeline.

        ``branch`` receives an empty transformer and adds the per-element
        steps to it; elements whose sub-pipeline ends absent are dropped.
        """
        template = branch(NullSafeTransformer(NullSafe.empty()))
        return self._add_step(ForkStep(to_collection, template, aggregate))

    def group_by(self, classifier: Callable[[R], Hashable]) -> "NullSafeTransformer[T, Any]":
        return self._add_step(GroupByStep(classifier))

    def reduce(self, identity: R2, reducer: Callable[[R2, R], R2]) -> "NullSafeTransformer[T, R2]":
        return self._add_step(ReduceStep(identity, reducer))

    def pipeline(self, *fns: Callable[[Any], Any]) -> "NullSafeTransformer[T, Any]":
        """Append one map step per function, in order."""
        transformer: NullSafeTransformer[T, Any] = self
        for fn in fns:
            transformer = transformer.map(fn)
        return transformer

    def then(self, step: TransformationStep) -> "NullSafeTransformer[T, Any]":
        """Append a custom step."""
        return self._add_step(step)

    def __rshift__(self, step: TransformationStep) -> "NullSafeTransformer[T, Any]":
        """transformer >> step"""
        return self._add_step(step)

    def __or__(self, step: TransformationStep) -> "NullSafeTransformer[T, Any]":
        """transformer | step"""
        return self >> step

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def transform_result(self) -> Result[R, StepError]:
        """
        Run the pipeline and report the outcome as a Result.

        The first failing step short-circuits; Err carries the step name,
        its index and, when a step raised, the exception.
        """
        if self._input.is_absent():
            return Err(StepError("input", "Input value is absent"))

        current: Any = self._input.get()
        for index, step in enumerate(self._steps):
            if current is None and not step.accepts_none:
                return self._abort(StepError(step.name, "Received null value", index))

            outcome = step.execute(current)
            if outcome.is_failure():
                return self._abort(dataclasses.replace(outcome.get_error().get(), index=index))

            result = outcome.get()
            if result is None and not step.allows_null:
                return self._abort(StepError(step.name, "Step produced null value", index))
            current = result

        if current is None:
            return self._abort(StepError("output", "Pipeline produced null value", len(self._steps)))
        return Ok(current)

    def transform(self) -> NullSafe[R]:
        """Run the pipeline; never raises, returns absent on any failure."""
        return self.transform_result().to_nullsafe()

    def _abort(self, error: StepError) -> Result[Any, StepError]:
        log_failure(pipeline_logger, "Pipeline stopped %s", error)
        return Err(error)

    def __repr__(self) -> str:
        names = " >> ".join(step.name for step in self._steps) or "<no steps>"
        return f"NullSafeTransformer({self._input!r}: {names})"


__all__ = ["NullSafeTransformer"]
