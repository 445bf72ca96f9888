# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registered parameters and their typed accessors.

A :class:`Parameter` is both the registry entry and the handle handed back to
the caller at registration time. Both sides hold the same object, so values
written by the parser are visible through the handle without a second lookup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from cmdparam.model.types import (
    BoolValue,
    FlagValue,
    FloatValue,
    IntegerValue,
    ParameterType,
    ParameterValue,
    PathValue,
    StringValue,
    zero_value,
)

# ###############
# Public Interface
# ###############


class ParameterAccessError(Exception):
    """Base class for errors raised by the typed value accessors.

    Attributes:
        parameter_name: Name of the parameter that was read.
    """

    def __init__(self, message: str, parameter_name: str) -> None:
        super().__init__(message)
        self.parameter_name = parameter_name


class ValueNotSetError(ParameterAccessError):
    """Raised when a required parameter is read before it received a value."""


class WrongValueTypeError(ParameterAccessError):
    """Raised when a value is read through an accessor of a different type."""


class Parameter:
    """A named command-line parameter and its current value.

    Attributes:
        name: Unique key of the parameter in its registry.
        parameter_type: How the parameter's value token is interpreted.
        allow_empty: Whether the parameter may stay unset.
        aliases: Tokens that select this parameter on the command line.
        description: Human-readable description shown in the help text.
        default: The value the parameter starts out with (``None`` for unset).
    """

    def __init__(
        self,
        name: str,
        parameter_type: ParameterType,
        allow_empty: bool,
        aliases: tuple[str, ...],
        description: str,
        default: ParameterValue | None,
    ) -> None:
        self._name = name
        self._parameter_type = parameter_type
        self._allow_empty = allow_empty
        self._aliases = aliases
        self._description = description
        self._default = default
        self._value = default

    def __repr__(self) -> str:
        return f"Parameter(name={self._name!r}, type={self._parameter_type.value}, value={self._value!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameter_type(self) -> ParameterType:
        return self._parameter_type

    @property
    def allow_empty(self) -> bool:
        return self._allow_empty

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    @property
    def description(self) -> str:
        return self._description

    @property
    def default(self) -> ParameterValue | None:
        return self._default

    @property
    def value(self) -> ParameterValue | None:
        """The current value, or ``None`` while the parameter is unset."""
        return self._value

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def to_flag_value(self) -> bool:
        """Return True if the flag was given on the command line."""
        return isinstance(self._read(FlagValue, ParameterType.FLAG), FlagValue)

    def to_int_value(self) -> int:
        return self._read(IntegerValue, ParameterType.INTEGER)

    def to_float_value(self) -> float:
        return self._read(FloatValue, ParameterType.FLOAT)

    def to_path_value(self) -> Path:
        return self._read(PathValue, ParameterType.PATH)

    def to_string_value(self) -> str:
        return self._read(StringValue, ParameterType.STRING)

    def to_bool_value(self) -> bool:
        return self._read(BoolValue, ParameterType.BOOL)

    # ------------------------------------------------------------------
    # Parser-side mutation
    # ------------------------------------------------------------------

    def _assign(self, value: ParameterValue) -> None:
        """Store a value parsed from the command line (parser engine only)."""
        self._value = value

    # ------------------------------------------------------------------
    # Accessor helper
    # ------------------------------------------------------------------

    def _read(self, expected: type, requested: ParameterType) -> Any:
        """Shared logic of the typed accessors.

        Unset values read back as the requested type's zero value when the
        parameter allows emptiness. Flag values carry no payload, so reading
        them returns the marker itself.
        """
        value = self._value
        if value is None:
            if self._allow_empty:
                return zero_value(requested)
            raise ValueNotSetError(f"parameter {self._name!r} has no value", self._name)
        if not isinstance(value, expected):
            raise WrongValueTypeError(
                f"wrong value type for {self._name}: expected {requested.value}, got {value.kind}",
                self._name,
            )
        return getattr(value, "value", value)

