"""
Adapters - reusable, composable NullSafe -> NullSafe functions.

An adapter packages a chain of container operations under a name so it can
be applied with ``container.adapt(adapter)`` and composed with ``>>``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .container import NullSafe

T = TypeVar("T")
R = TypeVar("R")
V = TypeVar("V")


@dataclass(frozen=True)
class NullSafeAdapter(Generic[T, R]):
    """A named function from NullSafe[T] to NullSafe[R].

    ::: This is-in-layer Core-Layer.
    ::: This is a adapter.
    ::: This is stateless.
    """
    fn: Callable[[NullSafe[T]], NullSafe[R]]
    name: str = "adapter"

    def __call__(self, container: NullSafe[T]) -> NullSafe[R]:
        return self.fn(container)

    def and_then(self, after: "NullSafeAdapter[R, V]") -> "NullSafeAdapter[T, V]":
        """Compose: apply self, then ``after``."""
        return NullSafeAdapter(lambda c: after(self(c)), f"{self.name} >> {after.name}")

    def __rshift__(self, after: "NullSafeAdapter[R, V]") -> "NullSafeAdapter[T, V]":
        return self.and_then(after)


def adapter(name: str) -> Callable[[Callable[[NullSafe[T]], NullSafe[R]]], NullSafeAdapter[T, R]]:
    """
    Decorator turning a container function into a named adapter.

    Example:
        @adapter("strip")
        def strip(c):
            return c.map(str.strip)
    """
    def decorator(fn: Callable[[NullSafe[T]], NullSafe[R]]) -> NullSafeAdapter[T, R]:
        return NullSafeAdapter(fn, name)
    return decorator


# =============================================================================
# Built-in adapters
# =============================================================================

trim_string: NullSafeAdapter[str, str] = NullSafeAdapter(lambda c: c.map(str.strip), "trim_string")

to_upper: NullSafeAdapter[str, str] = NullSafeAdapter(lambda c: c.map(str.upper), "to_upper")

to_lower: NullSafeAdapter[str, str] = NullSafeAdapter(lambda c: c.map(str.lower), "to_lower")

filter_positive: NullSafeAdapter[float, float] = NullSafeAdapter(
    lambda c: c.filter(lambda v: v > 0), "filter_positive"
)

# Blank strings count as absent.
non_blank: NullSafeAdapter[str, str] = NullSafeAdapter(
    lambda c: c.filter(lambda s: bool(s.strip())), "non_blank"
)


__all__ = [
    "NullSafeAdapter",
    "adapter",
    "trim_string",
    "to_upper",
    "to_lower",
    "filter_positive",
    "non_blank",
]
