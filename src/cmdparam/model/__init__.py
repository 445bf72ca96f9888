# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parameter model: types, typed values, and registered parameters."""

from cmdparam.model.parameter import (
    Parameter,
    ParameterAccessError,
    ValueNotSetError,
    WrongValueTypeError,
)
from cmdparam.model.types import (
    BoolValue,
    FlagValue,
    FloatValue,
    IntegerValue,
    ParameterType,
    ParameterValue,
    PathValue,
    StringValue,
    make_value,
    to_help_string,
    value_type,
    zero_value,
)

__all__ = [
    # Types and values
    "ParameterType",
    "ParameterValue",
    "FlagValue",
    "IntegerValue",
    "FloatValue",
    "PathValue",
    "StringValue",
    "BoolValue",
    "make_value",
    "to_help_string",
    "value_type",
    "zero_value",
    # Parameters
    "Parameter",
    "ParameterAccessError",
    "ValueNotSetError",
    "WrongValueTypeError",
]
