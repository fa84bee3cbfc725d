"""Tests for yr.core.result module."""

import pytest

from yr.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok(42).unwrap_or(0) == 42

    def test_flags(self) -> None:
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_map_err_is_noop(self) -> None:
        assert Ok(42).map_err(lambda e: f"error: {e}") == Ok(42)


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("boom").unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        assert Err("boom").unwrap_or(7) == 7

    def test_flags(self) -> None:
        assert Err("x").is_ok() is False
        assert Err("x").is_err() is True

    def test_map_is_noop(self) -> None:
        assert Err("boom").map(lambda x: x * 2) == Err("boom")

    def test_map_err(self) -> None:
        assert Err("boom").map_err(str.upper) == Err("BOOM")


class TestTypeGuards:
    def test_is_ok(self) -> None:
        result: Result[int, str] = Ok(1)
        assert is_ok(result)
        assert not is_err(result)

    def test_is_err(self) -> None:
        result: Result[int, str] = Err("no")
        assert is_err(result)
        assert not is_ok(result)


def test_match_statement() -> None:
    result: Result[int, str] = Err("dirty")
    match result:
        case Ok(value):
            pytest.fail(f"unexpected Ok({value})")
        case Err(error):
            assert error == "dirty"
