"""Unit tests for authflow.core.types module."""

import pytest

from authflow.core.types import Result


class TestResultConstruction:
    """Test Result type construction via ok() and err() class methods."""

    def test_result_ok_creates_success_result(self) -> None:
        """Result.ok(value) creates a result with is_ok=True."""
        result: Result[int, str] = Result.ok(42)

        assert result.is_ok is True
        assert result.is_err is False
        assert result.value == 42

    def test_result_err_creates_error_result(self) -> None:
        """Result.err(error) creates a result with is_err=True."""
        result: Result[int, str] = Result.err("something went wrong")

        assert result.is_err is True
        assert result.is_ok is False
        assert result.error == "something went wrong"

    def test_ok_may_carry_none(self) -> None:
        """An Ok wrapping None is still Ok."""
        result: Result[None, str] = Result.ok(None)

        assert result.is_ok
        assert result.value is None

    def test_result_is_immutable(self) -> None:
        result: Result[int, str] = Result.ok(1)

        with pytest.raises(AttributeError):
            result._value = 2  # type: ignore[misc]


class TestResultAccessors:
    """Test value/error access on the wrong variant."""

    def test_value_on_err_raises(self) -> None:
        result: Result[int, str] = Result.err("boom")

        with pytest.raises(ValueError, match="Cannot access value"):
            _ = result.value

    def test_error_on_ok_raises(self) -> None:
        result: Result[int, str] = Result.ok(1)

        with pytest.raises(ValueError, match="Cannot access error"):
            _ = result.error


class TestResultTransforms:
    """Test map and and_then."""

    def test_map_transforms_ok_value(self) -> None:
        mapped = Result.ok(10).map(lambda x: f"value: {x}")

        assert mapped.is_ok
        assert mapped.value == "value: 10"

    def test_map_passes_err_through(self) -> None:
        calls: list[int] = []
        result: Result[int, str] = Result.err("bad")

        mapped = result.map(lambda x: calls.append(x))

        assert mapped.is_err
        assert mapped.error == "bad"
        assert calls == []

    def test_and_then_chains_on_ok(self) -> None:
        def half(x: int) -> Result[int, str]:
            if x % 2:
                return Result.err("odd")
            return Result.ok(x // 2)

        assert Result.ok(8).and_then(half).value == 4
        assert Result.ok(7).and_then(half).error == "odd"

    def test_and_then_skips_on_err(self) -> None:
        result: Result[int, str] = Result.err("first")

        chained = result.and_then(lambda x: Result.ok(x + 1))

        assert chained.error == "first"


class TestResultRepr:
    def test_repr_shows_variant(self) -> None:
        assert repr(Result.ok(3)) == "Ok(3)"
        assert repr(Result.err("x")) == "Err('x')"
