# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of raw value tokens into typed parameter values.

Numeric and boolean tokens follow a strict grammar: no surrounding
whitespace, no digit separators, and booleans spelled exactly ``true`` or
``false``. Python's own ``int()`` and ``float()`` are more lenient, so tokens
are matched against a pattern before they are converted.
"""

import re

from cmdparam.model.types import (
    INT64_MAX,
    INT64_MIN,
    BoolValue,
    FloatValue,
    IntegerValue,
    ParameterType,
    ParameterValue,
    PathValue,
    StringValue,
)

# ###############
# Public Interface
# ###############


class CoercionError(Exception):
    """Raised when a value token cannot be converted to the requested type.

    Attributes:
        token: The offending token.
        parameter_type: The type the token was converted to.
    """

    def __init__(self, message: str, token: str, parameter_type: ParameterType) -> None:
        super().__init__(message)
        self.token = token
        self.parameter_type = parameter_type


def coerce(token: str, parameter_type: ParameterType) -> ParameterValue:
    """Convert *token* into a value of *parameter_type*.

    Args:
        token: The raw, non-empty value token.
        parameter_type: The declared type of the parameter the token belongs to.

    Returns:
        The typed value.

    Raises:
        CoercionError: If the token is not a valid integer, float, or bool.
        ValueError: If *parameter_type* is FLAG, which takes no value token.
    """
    if parameter_type == ParameterType.INTEGER:
        return IntegerValue(value=_parse_integer(token))
    if parameter_type == ParameterType.FLOAT:
        return FloatValue(value=_parse_float(token))
    if parameter_type == ParameterType.BOOL:
        return BoolValue(value=_parse_bool(token))
    if parameter_type == ParameterType.PATH:
        return PathValue(raw=token)
    if parameter_type == ParameterType.STRING:
        return StringValue(value=token)
    raise ValueError(f"{parameter_type.value} parameters take no value token")


# ################
# Implementation
# ################

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?",
)

_FLOAT_SPECIALS = frozenset({"inf", "infinity", "nan"})

_INT64_DIGITS = len(str(INT64_MAX))


def _parse_integer(token: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(token):
        raise CoercionError(f"invalid digit found in string: {token!r}", token, ParameterType.INTEGER)
    digits = token.lstrip("+-").lstrip("0")
    if len(digits) > _INT64_DIGITS:
        bound = "small" if token.startswith("-") else "large"
        raise CoercionError(f"number too {bound} to fit in target type: {token!r}", token, ParameterType.INTEGER)
    # int() rejects digit strings past the interpreter's conversion limit,
    # leading zeros included.
    number = int(digits or "0")
    if token.startswith("-"):
        number = -number
    if number > INT64_MAX:
        raise CoercionError(f"number too large to fit in target type: {token!r}", token, ParameterType.INTEGER)
    if number < INT64_MIN:
        raise CoercionError(f"number too small to fit in target type: {token!r}", token, ParameterType.INTEGER)
    return number


def _parse_float(token: str) -> float:
    unsigned = token[1:] if token[:1] in ("+", "-") else token
    if not _FLOAT_PATTERN.fullmatch(token) and unsigned.lower() not in _FLOAT_SPECIALS:
        raise CoercionError(f"invalid float literal: {token!r}", token, ParameterType.FLOAT)
    return float(token)


def _parse_bool(token: str) -> bool:
    if token == "true":
        return True
    if token == "false":
        return False
    raise CoercionError(f"provided string was not `true` or `false`: {token!r}", token, ParameterType.BOOL)
