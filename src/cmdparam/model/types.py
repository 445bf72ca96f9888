# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parameter types and typed parameter values."""

from __future__ import annotations

import math
from enum import Enum
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ParameterType(Enum):
    """How the value of a parameter is read from the command line."""

    FLAG = "flag"
    INTEGER = "integer"
    FLOAT = "float"
    PATH = "path"
    STRING = "string"
    BOOL = "bool"


class FlagValue(BaseModel):
    """Marker stored when a flag parameter was given."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["flag"] = "flag"


class IntegerValue(BaseModel):
    """A signed 64-bit integer value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["integer"] = "integer"
    value: Annotated[int, _Field(ge=INT64_MIN, le=INT64_MAX, strict=True)]


class FloatValue(BaseModel):
    """A double-precision floating-point value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["float"] = "float"
    value: float


class PathValue(BaseModel):
    """A filesystem path value.

    The token is kept as written; ``value`` is the corresponding ``Path``,
    which drops redundant separators and leading ``./`` components.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    raw: Annotated[str, _Field(strict=True)]

    @property
    def value(self) -> Path:
        return Path(self.raw)


class StringValue(BaseModel):
    """A plain string value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: Annotated[str, _Field(strict=True)]


class BoolValue(BaseModel):
    """A boolean value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bool"] = "bool"
    value: Annotated[bool, _Field(strict=True)]


# A concrete parameter value. "Unset" is not a member of the union; it is
# represented by ``None`` wherever a value may be absent.
ParameterValue = Annotated[
    FlagValue | IntegerValue | FloatValue | PathValue | StringValue | BoolValue,
    _Field(discriminator="kind"),
]


def value_type(value: ParameterValue) -> ParameterType:
    """Return the parameter type a concrete value belongs to."""
    return ParameterType(value.kind)


def make_value(parameter_type: ParameterType, raw: object) -> ParameterValue:
    """Build a typed value of *parameter_type* from a plain Python object.

    Flags accept ``True`` (set). Integers reject booleans and values outside
    the signed 64-bit range. Floats accept ints and floats. Paths accept
    strings and ``Path`` objects. Strings and bools accept only their own type.

    Raises:
        ValueError: If *raw* cannot represent a value of *parameter_type*.
    """
    if parameter_type == ParameterType.FLAG:
        if raw is True:
            return FlagValue()
    elif parameter_type == ParameterType.INTEGER:
        if isinstance(raw, int) and not isinstance(raw, bool):
            if INT64_MIN <= raw <= INT64_MAX:
                return IntegerValue(value=raw)
            raise ValueError(f"integer {raw} does not fit in 64 bits")
    elif parameter_type == ParameterType.FLOAT:
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return FloatValue(value=float(raw))
    elif parameter_type == ParameterType.PATH:
        if isinstance(raw, (str, Path)):
            return PathValue(raw=str(raw))
    elif parameter_type == ParameterType.STRING:
        if isinstance(raw, str):
            return StringValue(value=raw)
    elif parameter_type == ParameterType.BOOL:
        if isinstance(raw, bool):
            return BoolValue(value=raw)
    raise ValueError(f"{raw!r} is not a valid {parameter_type.value} value")


def zero_value(parameter_type: ParameterType) -> int | float | Path | str | bool:
    """Return the value an unset, optional parameter reads back as."""
    return _ZERO_VALUES[parameter_type]


def to_help_string(value: ParameterValue | None) -> str:
    """Render a value for the DefaultValue column of the help table."""
    if value is None:
        return ""
    if isinstance(value, FlagValue):
        return "true"
    if isinstance(value, BoolValue):
        return "true" if value.value else "false"
    if isinstance(value, FloatValue):
        return _format_float(value.value)
    if isinstance(value, PathValue):
        return value.raw
    return str(value.value)


# ################
# Implementation
# ################

_ZERO_VALUES: dict[ParameterType, int | float | Path | str | bool] = {
    ParameterType.FLAG: False,
    ParameterType.INTEGER: 0,
    ParameterType.FLOAT: 0.0,
    ParameterType.PATH: Path(""),
    ParameterType.STRING: "",
    ParameterType.BOOL: False,
}


def _format_float(number: float) -> str:
    """Format a float without a trailing '.0' for integral values."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number.is_integer():
        return str(int(number))
    return repr(number)
