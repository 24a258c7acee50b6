"""
Tests for adapters and the null-filtering helpers.
"""

import pytest

from nullsafe import NullSafe, NullSafeAdapter, adapter
from nullsafe.adapters import filter_positive, non_blank, to_lower, to_upper, trim_string
from nullsafe.utils import (
    empty_if_null,
    filter_non_null,
    filter_non_null_entries,
    lower_if_present,
    map_non_null,
    map_non_null_values,
    upper_if_present,
)


class TestAdapters:

    def test_builtin(self):
        assert NullSafe.of("  Hi ").adapt(trim_string) == NullSafe.of("Hi")
        assert NullSafe.of("Hi").adapt(to_upper) == NullSafe.of("HI")
        assert NullSafe.of("Hi").adapt(to_lower) == NullSafe.of("hi")
        assert NullSafe.of(-1).adapt(filter_positive).is_absent()
        assert NullSafe.of("   ").adapt(non_blank).is_absent()

    def test_absent_passes_through(self):
        assert NullSafe.empty().adapt(trim_string >> to_upper).is_absent()

    def test_composition(self):
        shout = trim_string >> non_blank >> to_upper
        assert shout.name == "trim_string >> non_blank >> to_upper"
        assert shout(NullSafe.of("  hey ")) == NullSafe.of("HEY")
        assert shout(NullSafe.of("    ")).is_absent()

    def test_decorator(self):
        @adapter("word_count")
        def word_count(container):
            return container.map(lambda s: len(s.split()))

        assert isinstance(word_count, NullSafeAdapter)
        assert word_count.name == "word_count"
        assert NullSafe.of("a b c").adapt(word_count) == NullSafe.of(3)
        assert (trim_string.and_then(word_count))(NullSafe.of(" one two ")) == NullSafe.of(2)


class TestUtils:

    def test_filter_non_null(self):
        assert filter_non_null([1, None, 0, None, 2]) == [1, 0, 2]
        assert filter_non_null(None) == []

    def test_map_non_null(self):
        assert map_non_null(["1", None, "x", "3"], lambda s: int(s) if s.isdigit() else None) == [1, 3]
        assert map_non_null(None, str) == []

    @pytest.mark.parametrize("fn, value, expected", [
        (empty_if_null, None, ""),
        (empty_if_null, "a", "a"),
        (upper_if_present, "a", "A"),
        (upper_if_present, None, None),
        (lower_if_present, "A", "a"),
        (lower_if_present, None, None),
    ])
    def test_string_helpers(self, fn, value, expected):
        assert fn(value) == expected

    def test_mapping_helpers(self):
        mapping = {"a": 1, "b": None, None: 3, "c": 0}
        assert filter_non_null_entries(mapping) == {"a": 1, "c": 0}
        assert map_non_null_values(mapping, lambda v: v * 10) == {"a": 10, "c": 0}
        assert filter_non_null_entries(None) == {}
