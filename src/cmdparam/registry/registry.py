# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry of declared command-line parameters.

The registry is populated before parsing, written by the parser engine during
a single parse pass, and read afterwards. Parameters are kept in registration
order, which also decides which parameter wins when two of them share an
alias: the first one registered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from cmdparam.model.parameter import Parameter
from cmdparam.model.types import ParameterType, ParameterValue, value_type

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class RegistrationError(Exception):
    """Raised when a parameter declaration is invalid."""


class AliasConflictError(RegistrationError):
    """Raised in strict mode when an alias is already owned by another parameter.

    Attributes:
        alias: The contested alias token.
        owner: Name of the parameter that already owns the alias.
    """

    def __init__(self, alias: str, owner: str, name: str) -> None:
        super().__init__(f"Alias {alias!r} of parameter {name!r} is already used by parameter {owner!r}")
        self.alias = alias
        self.owner = owner


def canonical_aliases(name: str) -> tuple[str, str]:
    """Return the two aliases every parameter named *name* receives."""
    return f"/{name}", f"--{name}"


class Registry:
    """Ordered mapping from parameter names to :class:`Parameter` entries.

    Args:
        strict_aliases: Reject an alias already owned by another parameter
            instead of resolving the collision in registration order.
    """

    def __init__(self, strict_aliases: bool = False) -> None:
        self._parameters: dict[str, Parameter] = {}
        self._strict_aliases = strict_aliases
        self._version_text: str | None = None
        self._aborted = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        parameter_type: ParameterType,
        allow_empty: bool,
        default: ParameterValue | None,
        description: str,
        extra_aliases: Sequence[str] = (),
    ) -> Parameter:
        """Declare a parameter and return its shared handle.

        The ``/name`` and ``--name`` aliases are appended to *extra_aliases*
        unless already present; each alias is kept once. Registering a name a
        second time replaces the earlier entry.

        Raises:
            RegistrationError: If *name* is empty, *default* does not match
                *parameter_type*, or *extra_aliases* is a single string.
            AliasConflictError: In strict mode, if an alias is already used by
                another parameter.
        """
        if not name:
            raise RegistrationError("Parameter name must not be empty")
        if isinstance(extra_aliases, str):
            raise RegistrationError(f"Aliases of parameter {name!r} must be a sequence of strings, not a string")
        if default is not None and value_type(default) != parameter_type:
            raise RegistrationError(
                f"Default value of parameter {name!r} is a {default.kind} value, expected {parameter_type.value}"
            )

        aliases = _merge_aliases(extra_aliases, canonical_aliases(name))
        self._check_aliases(name, aliases)

        if name in self._parameters:
            logger.warning("Parameter %r registered twice; the later registration replaces the earlier one", name)

        parameter = Parameter(
            name=name,
            parameter_type=parameter_type,
            allow_empty=allow_empty,
            aliases=aliases,
            description=description,
            default=default,
        )
        self._parameters[name] = parameter
        logger.debug("Registered parameter %r (%s) with aliases %s", name, parameter_type.value, aliases)
        return parameter

    def register_simple(self, name: str, parameter_type: ParameterType, description: str) -> Parameter:
        """Declare a required parameter without default or extra aliases."""
        return self.register(name, parameter_type, False, None, description)

    def register_can_be_empty(
        self,
        name: str,
        parameter_type: ParameterType,
        default: ParameterValue | None,
        description: str,
    ) -> Parameter:
        """Declare an optional parameter with a default and no extra aliases."""
        return self.register(name, parameter_type, True, default, description)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_parameter(self, name: str) -> Parameter | None:
        """Return the parameter registered under *name*, or None."""
        return self._parameters.get(name)

    def get_value(self, name: str) -> ParameterValue | None:
        """Return the current value of *name*.

        None is returned both for unknown names and for unset parameters; use
        :meth:`get_parameter` to tell the two apart.
        """
        parameter = self._parameters.get(name)
        if parameter is None:
            return None
        return parameter.value

    def find_by_alias(self, token: str) -> Parameter | None:
        """Return the first registered parameter that has *token* as an alias."""
        for parameter in self._parameters.values():
            if token in parameter.aliases:
                return parameter
        return None

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        """All parameters in registration order."""
        return tuple(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __iter__(self) -> Iterator[Parameter]:
        return iter(tuple(self._parameters.values()))

    # ------------------------------------------------------------------
    # Version text and abort state
    # ------------------------------------------------------------------

    @property
    def version_text(self) -> str | None:
        return self._version_text

    def set_version_text(self, version_text: str) -> None:
        """Set the text printed for ``--version``."""
        self._version_text = version_text

    @property
    def aborted(self) -> bool:
        """True once parsing stopped early or found a missing parameter."""
        return self._aborted

    def _mark_aborted(self) -> None:
        self._aborted = True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_aliases(self, name: str, aliases: tuple[str, ...]) -> None:
        """Report aliases shared with other parameters."""
        for alias in aliases:
            owner = self.find_by_alias(alias)
            if owner is None or owner.name == name:
                continue
            if self._strict_aliases:
                raise AliasConflictError(alias, owner.name, name)
            logger.warning(
                "Alias %r of parameter %r is already used by %r; %r takes precedence",
                alias,
                name,
                owner.name,
                owner.name,
            )


# ################
# Implementation
# ################


def _merge_aliases(extra_aliases: Iterable[str], canonical: tuple[str, ...]) -> tuple[str, ...]:
    """Concatenate caller and canonical aliases, dropping duplicates in order."""
    merged: list[str] = []
    for alias in (*extra_aliases, *canonical):
        if alias not in merged:
            merged.append(alias)
    return tuple(merged)
