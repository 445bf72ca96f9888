# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for value token coercion."""

import math
from pathlib import Path

import pytest

from cmdparam.model.types import (
    INT64_MAX,
    INT64_MIN,
    BoolValue,
    FloatValue,
    IntegerValue,
    ParameterType,
    PathValue,
    StringValue,
)
from cmdparam.parser.coercion import CoercionError, coerce

# ###############
# Integers
# ###############


class TestInteger:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("0", 0),
            ("42", 42),
            ("-42", -42),
            ("+7", 7),
            ("007", 7),
            ("0" * 5000 + "12", 12),
            (str(INT64_MAX), INT64_MAX),
            (str(INT64_MIN), INT64_MIN),
        ],
    )
    def test_well_formed(self, token: str, expected: int) -> None:
        assert coerce(token, ParameterType.INTEGER) == IntegerValue(value=expected)

    @pytest.mark.parametrize(
        "token",
        ["not_a_number", "1.5", " 1", "1 ", "1_000", "0x10", "-", "+", "١٢"],
    )
    def test_malformed(self, token: str) -> None:
        with pytest.raises(CoercionError) as exc_info:
            coerce(token, ParameterType.INTEGER)
        assert exc_info.value.token == token
        assert exc_info.value.parameter_type == ParameterType.INTEGER

    @pytest.mark.parametrize("token", [str(INT64_MAX + 1), "+" + str(INT64_MAX + 1), "9" * 25, "9" * 5000])
    def test_overflow(self, token: str) -> None:
        with pytest.raises(CoercionError, match="too large") as exc_info:
            coerce(token, ParameterType.INTEGER)
        assert exc_info.value.token == token

    @pytest.mark.parametrize("token", [str(INT64_MIN - 1), "-" + "9" * 5000])
    def test_underflow(self, token: str) -> None:
        with pytest.raises(CoercionError, match="too small"):
            coerce(token, ParameterType.INTEGER)


# ###############
# Floats
# ###############


class TestFloat:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("1.5", 1.5),
            ("-2", -2.0),
            ("3.", 3.0),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("2.5E-1", 0.25),
            ("inf", math.inf),
            ("-Infinity", -math.inf),
        ],
    )
    def test_well_formed(self, token: str, expected: float) -> None:
        assert coerce(token, ParameterType.FLOAT) == FloatValue(value=expected)

    def test_nan(self) -> None:
        value = coerce("NaN", ParameterType.FLOAT)
        assert isinstance(value, FloatValue)
        assert math.isnan(value.value)

    @pytest.mark.parametrize("token", ["abc", ".", "1e", "e5", " 1.0", "1_0.0", "1.0f", "--1"])
    def test_malformed(self, token: str) -> None:
        with pytest.raises(CoercionError):
            coerce(token, ParameterType.FLOAT)


# ###############
# Booleans
# ###############


class TestBool:
    def test_true(self) -> None:
        assert coerce("true", ParameterType.BOOL) == BoolValue(value=True)

    def test_false(self) -> None:
        assert coerce("false", ParameterType.BOOL) == BoolValue(value=False)

    @pytest.mark.parametrize("token", ["True", "FALSE", "1", "0", "yes", "no"])
    def test_malformed(self, token: str) -> None:
        with pytest.raises(CoercionError, match="`true` or `false`"):
            coerce(token, ParameterType.BOOL)


# ###############
# Verbatim types
# ###############


def test_path_is_verbatim() -> None:
    assert coerce("/tmp/x", ParameterType.PATH) == PathValue(raw="/tmp/x")


@pytest.mark.parametrize("token", ["./hello.txt", "out//", "a/./b/"])
def test_path_keeps_token_as_written(token: str) -> None:
    value = coerce(token, ParameterType.PATH)
    assert isinstance(value, PathValue)
    assert value.raw == token
    assert value.value == Path(token)


def test_string_is_verbatim() -> None:
    assert coerce("--looks-like-an-alias", ParameterType.STRING) == StringValue(value="--looks-like-an-alias")


def test_flag_takes_no_token() -> None:
    with pytest.raises(ValueError):
        coerce("x", ParameterType.FLAG)
