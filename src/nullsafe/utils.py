"""
Null-filtering helpers for plain strings, collections and mappings.

These work on ordinary Python values (no container involved) and treat a
``None`` argument as an empty input.
"""

from typing import Callable, Dict, Iterable, List, Mapping, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K")
V = TypeVar("V")


def filter_non_null(items: Optional[Iterable[Optional[T]]]) -> List[T]:
    """Return the non-None elements of ``items`` as a list."""
    if items is None:
        return []
    return [item for item in items if item is not None]


def map_non_null(items: Optional[Iterable[Optional[T]]], fn: Callable[[T], Optional[R]]) -> List[R]:
    """Map ``fn`` over the non-None elements, dropping None results."""
    if items is None:
        return []
    results = (fn(item) for item in items if item is not None)
    return [r for r in results if r is not None]


def empty_if_null(value: Optional[str]) -> str:
    return value if value is not None else ""


def upper_if_present(value: Optional[str]) -> Optional[str]:
    return value.upper() if value is not None else None


def lower_if_present(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


def filter_non_null_entries(mapping: Optional[Mapping[Optional[K], Optional[V]]]) -> Dict[K, V]:
    """Drop entries whose key or value is None."""
    if mapping is None:
        return {}
    return {k: v for k, v in mapping.items() if k is not None and v is not None}


def map_non_null_values(mapping: Optional[Mapping[Optional[K], Optional[V]]],
                        fn: Callable[[V], R]) -> Dict[K, R]:
    """Apply ``fn`` to the values of the entries that survive filter_non_null_entries."""
    return {k: fn(v) for k, v in filter_non_null_entries(mapping).items()}


__all__ = [
    "filter_non_null",
    "map_non_null",
    "empty_if_null",
    "upper_if_present",
    "lower_if_present",
    "filter_non_null_entries",
    "map_non_null_values",
]
