"""
typeclasses.py - Functor / Applicative / Monad foundations for nullsafe.

Both NullSafe and Result implement these, so that the generic combinators
(lift_a2, flat_map, >>) behave identically on either container:

- Functor:     map a pure function over the contained value
- Applicative: lift values and apply wrapped functions (used by combine)
- Monad:       sequence computations that return a wrapped value

Helpers: compose, identity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

# ---------------------------------------------------------------------------
# Core typeclasses
# ---------------------------------------------------------------------------

class Functor(ABC, Generic[T]):
    """
    A container that supports mapping a function over its value.

    Laws (for all f: a->b, g: b->c):
      1) Identity:     fmap(id)        == id
      2) Composition:  fmap(g)∘fmap(f) == fmap(g∘f)

    ::: This is-in-layer Core-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @abstractmethod
    def fmap(self, f: Callable[[T], U]) -> "Functor[U]":
        """Map a pure function over the container."""
        raise NotImplementedError

    def map(self, f: Callable[[T], U]) -> "Functor[U]":
        return self.fmap(f)

class Applicative(Functor[T], ABC):
    """
    A Functor that can lift plain values and apply wrapped functions.

    Laws:
      1) Identity:     pure(id).ap(v)      == v
      2) Homomorphism: pure(f).ap(pure(x)) == pure(f(x))

    ::: This is-in-layer Core-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @classmethod
    @abstractmethod
    def pure(cls, x: U) -> "Applicative[U]":
        """Lift a value into the container."""
        raise NotImplementedError

    @abstractmethod
    def ap(self, x: "Applicative[T]") -> "Applicative[U]":
        """Apply the wrapped function held by self to a wrapped value."""
        raise NotImplementedError

    @classmethod
    def lift_a2(cls, f: Callable[[T, U], V], a: "Applicative[T]", b: "Applicative[U]") -> "Applicative[V]":
        """
        Lift a binary function over two containers.

        Equivalent to: pure(curried f).ap(a).ap(b)
        """
        return cls.pure(lambda x: lambda y: f(x, y)).ap(a).ap(b)  # type: ignore[misc]

class Monad(Applicative[T], ABC):
    """
    An Applicative that supports sequencing with bind (flat_map).

    Laws (for all x and functions f: a -> m b, g: b -> m c):
      1) Left identity:  pure(x).bind(f)   == f(x)
      2) Right identity: m.bind(pure)      == m
      3) Associativity:  m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))

    ::: This is-in-layer Core-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @abstractmethod
    def bind(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        """Chain a function that returns a wrapped value."""
        raise NotImplementedError

    def flat_map(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        return self.bind(f)

    def __rshift__(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        """m >> f == m.bind(f)"""
        return self.bind(f)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def compose(f: Callable[[U], V], g: Callable[[T], U]) -> Callable[[T], V]:
    """compose(f, g)(x) == f(g(x))"""
    return lambda x: f(g(x))

def identity(x: T) -> T:
    return x

__all__ = [
    "Functor", "Applicative", "Monad",
    "compose", "identity",
]
