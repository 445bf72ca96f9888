# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Single-pass parser for command-line argument lists.

Walks the argument tokens left to right, matches each one against the
built-in help and version switches or the aliases of registered parameters,
consumes the value token a parameter's type requires, and stores the converted
value on the parameter.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from cmdparam.model.parameter import Parameter
from cmdparam.model.types import FlagValue, ParameterType
from cmdparam.parser.coercion import CoercionError, coerce
from cmdparam.registry.registry import Registry

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

HELP_ALIASES: frozenset[str] = frozenset({"--help", "--h"})
VERSION_ALIASES: frozenset[str] = frozenset({"--version", "--v"})

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_MISSING_REQUIRED = 2


class IssueKind(enum.Enum):
    """Classification of problems found while parsing."""

    UNKNOWN_TOKEN = "unknown-token"
    MISSING_VALUE = "missing-value"
    CONVERSION_FAILURE = "conversion-failure"
    MISSING_REQUIRED_PARAMETER = "missing-required-parameter"


class ParseOutcome(enum.Enum):
    """How a parse pass ended."""

    OK = "ok"
    HELP = "help"
    VERSION = "version"
    ERROR = "error"


@dataclass(frozen=True)
class ParseIssue:
    """A problem found while parsing.

    Attributes:
        kind: The class of problem.
        message: Human-readable description, printed by the terminating front end.
        parameter: Name of the parameter involved, if any.
        token: The offending token, if any.
    """

    kind: IssueKind
    message: str
    parameter: str | None = None
    token: str | None = None


@dataclass
class ParseResult:
    """Result of a parse pass.

    Attributes:
        outcome: How the pass ended.
        issues: Problems found, in the order they were found.
    """

    outcome: ParseOutcome = ParseOutcome.OK
    issues: list[ParseIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True if parsing completed without aborting."""
        return self.outcome == ParseOutcome.OK

    @property
    def aborted(self) -> bool:
        return not self.ok

    @property
    def exit_code(self) -> int:
        """Process exit status for this result.

        Missing required parameters found after a clean scan exit with
        EXIT_MISSING_REQUIRED; every other abort exits with EXIT_ABORTED.
        """
        if self.ok:
            return EXIT_OK
        if self.outcome == ParseOutcome.ERROR and all(
            issue.kind == IssueKind.MISSING_REQUIRED_PARAMETER for issue in self.issues
        ):
            return EXIT_MISSING_REQUIRED
        return EXIT_ABORTED

    def issues_of(self, kind: IssueKind) -> list[ParseIssue]:
        """Return the issues of the given kind."""
        return [issue for issue in self.issues if issue.kind == kind]


def parse_arguments(registry: Registry, tokens: Sequence[str], *, fail_fast: bool = True) -> ParseResult:
    """Parse *tokens* against the parameters declared in *registry*.

    Values are written to the registry's parameters as they are parsed. The
    registry's abort flag is set whenever the result is not OK. Nothing is
    printed and the process is never terminated; see
    :class:`cmdparam.processor.CommandLineProcessor` for that behaviour.

    Parse a given registry at most once: a second pass starts from the values
    left by the first one rather than from the defaults.

    Args:
        registry: The populated parameter registry.
        tokens: The argument list, without the program path.
        fail_fast: Stop at the first unknown token, missing value, or
            conversion failure. When False, those issues are collected and
            scanning continues, followed by the missing-parameter check.

    Returns:
        A ParseResult describing the outcome and every issue found.
    """
    result = _Parser(registry, tokens, fail_fast).parse()
    if result.aborted:
        registry._mark_aborted()
    return result


# ################
# Implementation
# ################

_VALUE_TYPE_NAMES: dict[ParameterType, str] = {
    ParameterType.INTEGER: "integer",
    ParameterType.FLOAT: "float",
    ParameterType.BOOL: "bool",
}


class _Parser:
    """Token cursor and parse state for one pass."""

    def __init__(self, registry: Registry, tokens: Sequence[str], fail_fast: bool) -> None:
        self._registry = registry
        self._tokens = list(tokens)
        self._pos = 0
        self._fail_fast = fail_fast
        self._result = ParseResult()
        self._failed: set[str] = set()

    def parse(self) -> ParseResult:
        """Run the token loop and the missing-parameter check."""
        stopped = self._scan()
        if not stopped:
            self._check_required()
        if self._result.issues and self._result.outcome == ParseOutcome.OK:
            self._result.outcome = ParseOutcome.ERROR
        return self._result

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _advance(self) -> str | None:
        """Consume and return the current token, or None at the end."""
        if self._at_end():
            return None
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    # ------------------------------------------------------------------
    # Token loop
    # ------------------------------------------------------------------

    def _scan(self) -> bool:
        """Walk all tokens. Return True if the loop stopped early."""
        while (token := self._advance()) is not None:
            if token in HELP_ALIASES:
                self._result.outcome = ParseOutcome.HELP
                return True
            if token in VERSION_ALIASES:
                self._result.outcome = ParseOutcome.VERSION
                return True

            parameter = self._registry.find_by_alias(token)
            if parameter is None:
                self._report(IssueKind.UNKNOWN_TOKEN, f"Unknown parameter: {token}", token=token)
                if self._fail_fast:
                    return True
                continue

            logger.debug("Token %r selects parameter %r", token, parameter.name)
            if not self._consume(parameter) and self._fail_fast:
                return True
        return False

    def _consume(self, parameter: Parameter) -> bool:
        """Read the value of *parameter*. Return False on a reported issue."""
        if parameter.parameter_type == ParameterType.FLAG:
            parameter._assign(FlagValue())
            return True

        token = self._advance()
        if not token:
            if parameter.allow_empty:
                logger.debug("No value for optional parameter %r; keeping %r", parameter.name, parameter.value)
                return True
            self._report(
                IssueKind.MISSING_VALUE,
                f"No value passed for parameter {parameter.name}",
                parameter=parameter.name,
                token=token,
            )
            return False

        try:
            value = coerce(token, parameter.parameter_type)
        except CoercionError as exc:
            type_name = _VALUE_TYPE_NAMES[parameter.parameter_type]
            self._report(
                IssueKind.CONVERSION_FAILURE,
                f"Unable to convert parameter {parameter.name} to {type_name}\n{exc}",
                parameter=parameter.name,
                token=token,
            )
            return False

        parameter._assign(value)
        logger.debug("Parameter %r set to %r", parameter.name, value)
        return True

    # ------------------------------------------------------------------
    # Post-loop validation
    # ------------------------------------------------------------------

    def _check_required(self) -> None:
        """Report every required parameter that is still unset."""
        for parameter in self._registry:
            if parameter.allow_empty or parameter.is_set or parameter.name in self._failed:
                continue
            self._report(
                IssueKind.MISSING_REQUIRED_PARAMETER,
                f"cmd arg {parameter.name} is not set",
                parameter=parameter.name,
            )

    def _report(
        self,
        kind: IssueKind,
        message: str,
        parameter: str | None = None,
        token: str | None = None,
    ) -> None:
        logger.debug("Parse issue (%s): %s", kind.value, message)
        self._result.issues.append(ParseIssue(kind=kind, message=message, parameter=parameter, token=token))
        if parameter is not None:
            self._failed.add(parameter)
