"""
NullSafe - the optional-value container.

A NullSafe holds zero or one value. ``None`` is the absent marker, so
``NullSafe.of(None)`` and ``NullSafe.empty()`` are the same container.
Instances are immutable; every operation returns a new container (or self
when nothing changes).

The container is a low-level primitive and is deliberately not total:
``get``, ``or_else_raise`` and ``validate`` raise, and exceptions thrown by
the functions given to ``map``/``flat_map``/``filter`` propagate to the
caller. Use ``or_else``/``or_else_get``/``recover`` when totality is needed,
or hand the container to NullSafeTransformer which never raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING, Any, Callable, Generic, Iterator, Optional, Type, TypeVar, Union,
)

from .exceptions import EmptyValueError, ValidationError
from .logging_config import get_logger
from .typeclasses import Monad

if TYPE_CHECKING:
    from .adapters import NullSafeAdapter
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")

logger = get_logger(__name__)


@dataclass(frozen=True)
class NullSafe(Monad[T], Generic[T]):
    """
    Immutable box around a possibly-absent value.

    ::: This is-in-layer Core-Layer.
    ::: This is a monad.
    ::: This is a value-object.
    ::: This is stateless.

    Example:
        NullSafe.of("  hello world  ").map(str.strip).filter(lambda s: len(s) > 5)
    """
    _value: Optional[T] = None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, value: Optional[T]) -> "NullSafe[T]":
        """Wrap a value; ``None`` yields an absent container."""
        return cls(value)

    @classmethod
    def empty(cls) -> "NullSafe[Any]":
        return cls(None)

    @classmethod
    def pure(cls, x: U) -> "NullSafe[U]":  # type: ignore[override]
        return cls(x)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_present(self) -> bool:
        return self._value is not None

    def is_absent(self) -> bool:
        return self._value is None

    is_empty = is_absent

    def get(self) -> T:
        """Return the value or raise EmptyValueError."""
        if self._value is None:
            raise EmptyValueError()
        return self._value

    # -------------------------------------------------------------------------
    # Functor / Monad
    # -------------------------------------------------------------------------

    def fmap(self, f: Callable[[T], U]) -> "NullSafe[U]":  # type: ignore[override]
        if self._value is None:
            return NullSafe(None)
        return NullSafe(f(self._value))

    def map(self, f: Callable[[T], U]) -> "NullSafe[U]":  # type: ignore[override]
        return self.fmap(f)

    def bind(self, f: Callable[[T], "NullSafe[U]"]) -> "NullSafe[U]":  # type: ignore[override]
        if self._value is None:
            return NullSafe(None)
        return f(self._value)

    def flat_map(self, f: Callable[[T], "NullSafe[U]"]) -> "NullSafe[U]":  # type: ignore[override]
        return self.bind(f)

    def ap(self, x: "NullSafe[Any]") -> "NullSafe[Any]":  # type: ignore[override]
        if self._value is None or x.is_absent():
            return NullSafe(None)
        if not callable(self._value):
            raise TypeError("NullSafe.ap expects a NullSafe holding a function.")
        return NullSafe(self._value(x._value))

    def filter(self, predicate: Callable[[T], bool]) -> "NullSafe[T]":
        if self._value is None or not predicate(self._value):
            return NullSafe(None)
        return self

    def as_type(self, cls: Type[U]) -> "NullSafe[U]":
        """Keep the value only if it is an instance of ``cls``."""
        if isinstance(self._value, cls):
            return NullSafe(self._value)
        return NullSafe(None)

    @staticmethod
    def combine(a: "NullSafe[A]", b: "NullSafe[B]", combiner: Callable[[A, B], U]) -> "NullSafe[U]":
        """Present only when both inputs are present."""
        return NullSafe.lift_a2(combiner, a, b)  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    def or_else(self, default: T) -> T:
        return self._value if self._value is not None else default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value, or call ``supplier`` only when absent."""
        return self._value if self._value is not None else supplier()

    def or_else_raise(self, exception_supplier: Optional[Callable[[], BaseException]] = None) -> T:
        if self._value is None:
            if exception_supplier is None:
                raise EmptyValueError()
            raise exception_supplier()
        return self._value

    # -------------------------------------------------------------------------
    # Validation and recovery
    # -------------------------------------------------------------------------

    def validate(self, predicate: Callable[[T], bool],
                 error: Union[str, Callable[[], BaseException]]) -> "NullSafe[T]":
        """
        Raise if a present value fails ``predicate``.

        ``error`` is either a message (raised as ValidationError) or a
        supplier of the exception to raise. An absent container is returned
        unchanged: absence is not a failure for this single-rule check.
        """
        if self._value is not None and not predicate(self._value):
            if isinstance(error, str):
                raise ValidationError(error)
            raise error()
        return self

    def recover(self, f: Callable[[BaseException], T]) -> "NullSafe[T]":
        """Replace absence with ``f(EmptyValueError)``; absent if ``f`` raises."""
        if self._value is not None:
            return self
        try:
            return NullSafe(f(EmptyValueError()))
        except Exception as e:
            logger.debug("recover function raised %r, staying absent", e)
            return NullSafe(None)

    def recover_with(self, f: Callable[[BaseException], "NullSafe[T]"]) -> "NullSafe[T]":
        if self._value is not None:
            return self
        try:
            return f(EmptyValueError())
        except Exception as e:
            logger.debug("recover_with function raised %r, staying absent", e)
            return NullSafe(None)

    # -------------------------------------------------------------------------
    # Side effects
    # -------------------------------------------------------------------------

    def if_present(self, action: Callable[[T], Any]) -> "NullSafe[T]":
        if self._value is not None:
            action(self._value)
        return self

    def if_absent(self, action: Callable[[], Any]) -> "NullSafe[T]":
        if self._value is None:
            action()
        return self

    def if_present_or_else(self, present_action: Callable[[T], Any],
                           absent_action: Callable[[], Any]) -> "NullSafe[T]":
        if self._value is not None:
            present_action(self._value)
        else:
            absent_action()
        return self

    peek = if_present

    def log_if_present(self, message: str, log: Optional[logging.Logger] = None) -> "NullSafe[T]":
        if self._value is not None:
            (log or logger).info("%s: %s", message, self._value)
        return self

    def log_if_absent(self, message: str, log: Optional[logging.Logger] = None) -> "NullSafe[T]":
        if self._value is None:
            (log or logger).info(message)
        return self

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_result(self, error: E) -> "Result[T, E]":
        """Ok(value) when present, Err(error) when absent."""
        from .result import Result
        return Result.from_nullsafe(self, error)

    def to_result_from(self, error_supplier: Callable[[], E]) -> "Result[T, E]":
        """As to_result, but the error is only built when absent."""
        from .result import Result
        return Result.from_nullsafe_lazy(self, error_supplier)

    def adapt(self, adapter: "NullSafeAdapter[T, U]") -> "NullSafe[U]":
        return adapter(self)

    def __iter__(self) -> Iterator[T]:
        if self._value is not None:
            yield self._value

    def __repr__(self) -> str:
        if self._value is None:
            return "NullSafe.empty"
        return f"NullSafe[{self._value!r}]"


__all__ = ["NullSafe"]
