"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from time_now.kernel.errors import (
    ApplicationError,
    BaseError,
    ClockBeforeEpochError,
    ClockError,
    DomainError,
    InfrastructureError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        d = err.to_dict()
        assert "original" in d["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestValidationError:
    def test_is_domain_error(self) -> None:
        assert issubclass(ValidationError, DomainError)
        assert issubclass(DomainError, BaseError)

    def test_default_code(self) -> None:
        assert ValidationError("bad").code == "validation_error"

    def test_errors_in_dict(self) -> None:
        err = ValidationError("bad", errors=[{"field": "nanos", "value": -1}])
        assert err.to_dict()["errors"] == [{"field": "nanos", "value": -1}]

    def test_errors_default_empty(self) -> None:
        assert ValidationError("bad").errors == []


class TestClockErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ClockBeforeEpochError, ClockError)
        assert issubclass(ClockError, InfrastructureError)
        assert not issubclass(ClockError, ApplicationError)

    def test_offset_is_stored(self) -> None:
        err = ClockBeforeEpochError(1_500)
        assert err.offset_ns == 1_500
        assert err.detail["offset_ns"] == 1_500

    def test_code(self) -> None:
        assert ClockBeforeEpochError(1).code == "clock_before_epoch"

    def test_default_message_mentions_offset(self) -> None:
        err = ClockBeforeEpochError(42)
        assert "42 ns" in err.message
        assert "epoch" in err.message

    def test_custom_message_and_extra_detail(self) -> None:
        err = ClockBeforeEpochError(7, "clock went backwards", detail={"host": "h1"})
        assert err.message == "clock went backwards"
        assert err.detail == {"offset_ns": 7, "host": "h1"}

    def test_catchable_as_base_error(self) -> None:
        with pytest.raises(BaseError):
            raise ClockBeforeEpochError(1)
