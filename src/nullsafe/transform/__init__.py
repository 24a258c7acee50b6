"""
Transformation pipeline.

- NullSafeTransformer: persistent builder + total executor
- TransformationStep and its variants
- StepError: why a pipeline stopped
"""

from .pipeline import NullSafeTransformer
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

__all__ = [
    "NullSafeTransformer",
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
