"""
Unit tests for Result / Ok / Err and attempt().
"""

import pytest

from nullsafe import Err, FailedResultError, NullSafe, Ok, Result, attempt, describe_error


class TestConstruction:

    def test_success_and_failure(self):
        assert Result.success(1) == Ok(1)
        assert Result.failure("bad") == Err("bad")
        assert Result.pure(2) == Ok(2)

    def test_from_nullsafe(self):
        assert Result.from_nullsafe(NullSafe.of("x"), "missing") == Ok("x")
        assert Result.from_nullsafe(NullSafe.empty(), "missing") == Err("missing")

    def test_repr(self):
        assert repr(Ok(1)) == "Ok(1)"
        assert repr(Err("e")) == "Err('e')"


class TestQueries:

    def test_flags(self):
        assert Ok(1).is_success() and not Ok(1).is_failure()
        assert Err("e").is_failure() and not Err("e").is_success()

    def test_get_ok(self):
        assert Ok(3).get() == 3

    def test_get_err_reraises_exception(self):
        with pytest.raises(KeyError):
            Err(KeyError("k")).get()

    def test_get_err_wraps_plain_error(self):
        with pytest.raises(FailedResultError) as exc_info:
            Err("not found").get()
        assert exc_info.value.error == "not found"

    def test_get_error(self):
        assert Err("e").get_error() == NullSafe.of("e")
        assert Ok(1).get_error().is_absent()

    def test_or_else_variants(self):
        assert Err("e").or_else(0) == 0
        assert Ok(1).or_else(0) == 1
        assert Err("e").or_else_get(lambda: 5) == 5
        with pytest.raises(RuntimeError):
            Err("e").or_else_raise(lambda: RuntimeError("fail"))
        assert Ok(1).or_else_raise(lambda: RuntimeError("fail")) == 1


class TestTransformation:

    def test_map(self):
        assert Ok(2).map(lambda v: v + 1) == Ok(3)
        assert Err("e").map(lambda v: v + 1) == Err("e")

    def test_flat_map(self):
        half = lambda v: Ok(v // 2) if v % 2 == 0 else Err(f"{v} is odd")
        assert Ok(4).flat_map(half) == Ok(2)
        assert Ok(3).flat_map(half) == Err("3 is odd")
        assert Err("e").flat_map(half) == Err("e")

    def test_rshift(self):
        assert (Ok(1) >> (lambda v: Ok(v * 10))) == Ok(10)

    def test_map_error(self):
        assert Err("e").map_error(str.upper) == Err("E")
        assert Ok(1).map_error(str.upper) == Ok(1)

    def test_recover(self):
        assert Err("e").recover(len) == Ok(1)
        assert Ok(5).recover(len) == Ok(5)
        assert Err("e").recover_with(lambda e: Err(e + "!")) == Err("e!")

    def test_callbacks(self):
        seen = []
        Ok(1).if_success(seen.append).if_failure(seen.append)
        Err("e").if_success(seen.append).if_failure(seen.append)
        assert seen == [1, "e"]

    def test_to_nullsafe(self):
        assert Ok("v").to_nullsafe() == NullSafe.of("v")
        assert Err("e").to_nullsafe().is_absent()

    def test_ap(self):
        assert Ok(lambda v: v * 2).ap(Ok(4)) == Ok(8)
        assert Ok(lambda v: v * 2).ap(Err("e")) == Err("e")
        assert Err("f").ap(Ok(4)) == Err("f")


class TestAttempt:

    def test_success(self):
        assert attempt(int, "42") == Ok(42)

    def test_failure_captures_exception(self):
        result = attempt(int, "forty-two")
        assert result.is_failure()
        assert isinstance(result.error, ValueError)

    def test_kwargs(self):
        assert attempt(sorted, [3, 1], reverse=True) == Ok([3, 1])


class TestDescribeError:

    def test_uses_str(self):
        assert describe_error(ValueError("bad input")) == "bad input"

    def test_falls_back_to_repr(self):
        class Unprintable(Exception):
            def __str__(self):
                raise RuntimeError("cannot render")

        assert describe_error(Unprintable("x")) == "Unprintable('x')"

    def test_falls_back_to_type_name(self):
        class Unrenderable(Exception):
            def __str__(self):
                raise RuntimeError("cannot render")

            def __repr__(self):
                raise RuntimeError("cannot render")

        assert describe_error(Unrenderable()) == "<unprintable Unrenderable>"
