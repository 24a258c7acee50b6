"""
Result - tagged union for success (Ok) or failure (Err).

Prefer Result over NullSafe when the caller needs to know *why* a value is
missing. ``attempt()`` turns a call that may raise into a Result; the
validation engine and the transformation pipeline use it so that catching a
user callable's exception becomes plain data flow.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .container import NullSafe
from .exceptions import FailedResultError
from .typeclasses import Monad

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class Result(Monad[T], ABC, Generic[T, E]):
    """
    Either Ok(value) or Err(error); exactly one of the two is meaningful.

    ::: This is-in-layer Core-Layer.
    ::: This is a monad.
    ::: This is stateless.
    """

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def pure(cls, x: U) -> "Result[U, Any]":  # type: ignore[override]
        return Ok(x)

    @staticmethod
    def success(value: T) -> "Result[T, Any]":
        return Ok(value)

    @staticmethod
    def failure(error: E) -> "Result[Any, E]":
        return Err(error)

    @staticmethod
    def from_nullsafe(container: NullSafe[T], error: E) -> "Result[T, E]":
        if container.is_present():
            return Ok(container.get())
        return Err(error)

    @staticmethod
    def from_nullsafe_lazy(container: NullSafe[T], error_supplier: Callable[[], E]) -> "Result[T, E]":
        if container.is_present():
            return Ok(container.get())
        return Err(error_supplier())

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_success(self) -> bool:
        return isinstance(self, Ok)

    def is_failure(self) -> bool:
        return isinstance(self, Err)

    def get(self) -> T:
        """
        Return the value of an Ok.

        For an Err, the error is raised directly when it is an exception,
        otherwise it is wrapped in FailedResultError.
        """
        if isinstance(self, Ok):
            return self.value
        error = self.error  # type: ignore[attr-defined]
        if isinstance(error, BaseException):
            raise error
        raise FailedResultError(error)

    def get_error(self) -> NullSafe[E]:
        if isinstance(self, Err):
            return NullSafe.of(self.error)
        return NullSafe.empty()

    def or_else(self, default: T) -> T:
        if isinstance(self, Ok):
            return self.value
        return default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        if isinstance(self, Ok):
            return self.value
        return supplier()

    def or_else_raise(self, exception_supplier: Callable[[], BaseException]) -> T:
        if isinstance(self, Ok):
            return self.value
        raise exception_supplier()

    # -------------------------------------------------------------------------
    # Transformation
    # -------------------------------------------------------------------------

    def map(self, f: Callable[[T], U]) -> "Result[U, E]":  # type: ignore[override]
        return self.fmap(f)

    def flat_map(self, f: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":  # type: ignore[override]
        return self.bind(f)

    def map_error(self, f: Callable[[E], F]) -> "Result[T, F]":
        if isinstance(self, Err):
            return Err(f(self.error))
        return self  # type: ignore[return-value]

    def recover(self, f: Callable[[E], T]) -> "Result[T, E]":
        """Turn an Err into Ok(f(error))."""
        if isinstance(self, Err):
            return Ok(f(self.error))
        return self

    def recover_with(self, f: Callable[[E], "Result[T, E]"]) -> "Result[T, E]":
        if isinstance(self, Err):
            return f(self.error)
        return self

    def if_success(self, action: Callable[[T], Any]) -> "Result[T, E]":
        if isinstance(self, Ok):
            action(self.value)
        return self

    def if_failure(self, action: Callable[[E], Any]) -> "Result[T, E]":
        if isinstance(self, Err):
            action(self.error)
        return self

    def to_nullsafe(self) -> NullSafe[T]:
        """Ok(value) -> NullSafe.of(value); Err -> absent."""
        if isinstance(self, Ok):
            return NullSafe.of(self.value)
        return NullSafe.empty()


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """A successful result.

    ::: This is-in-layer Core-Layer.
    ::: This is a monad.
    ::: This is stateless.
    """
    value: T

    def bind(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:  # type: ignore[override]
        return f(self.value)

    def fmap(self, f: Callable[[T], U]) -> Result[U, E]:  # type: ignore[override]
        return Ok(f(self.value))

    def ap(self, x: Result[Any, E]) -> Result[Any, E]:  # type: ignore[override]
        if not callable(self.value):
            raise TypeError("Ok.ap expects an Ok(function).")
        if isinstance(x, Ok):
            return Ok(self.value(x.value))
        return x

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Result[Any, E]):
    """A failed result carrying error information.

    ::: This is-in-layer Core-Layer.
    ::: This is a monad.
    ::: This is stateless.
    """
    error: E

    def bind(self, f: Callable[[Any], Result[U, E]]) -> Result[U, E]:  # type: ignore[override]
        return self  # type: ignore[return-value]

    def fmap(self, f: Callable[[Any], U]) -> Result[U, E]:  # type: ignore[override]
        return self  # type: ignore[return-value]

    def ap(self, x: Result[Any, E]) -> Result[Any, E]:  # type: ignore[override]
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


def attempt(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Call ``fn`` and capture its outcome: Ok(return value) or Err(exception)."""
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as e:
        return Err(e)


def describe_error(error: BaseException) -> str:
    """
    Text of a captured exception, for error messages.

    Falls back to repr(), then to the bare type name, when the exception's
    own __str__ raises.
    """
    for render in (str, repr):
        rendered = attempt(render, error)
        if rendered.is_success():
            return rendered.get()
    return f"<unprintable {type(error).__name__}>"


__all__ = ["Result", "Ok", "Err", "attempt", "describe_error"]
