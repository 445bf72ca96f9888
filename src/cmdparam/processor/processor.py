# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line processor: the program-facing front end.

Typical use::

    processor = CommandLineProcessor()
    path = processor.add_parameter_detail(
        "path", ParameterType.PATH, False, None, "file path", ["-p"]
    )
    value = processor.add_parameter_detail(
        "value", ParameterType.INTEGER, False, None, "value", ["-v"]
    )
    processor.parse_command_line()
    print(path.to_path_value(), value.to_int_value())

``parse_command_line`` prints help, version text, and diagnostics to stdout
and exits the process when parsing aborts. ``parse`` performs the same pass
without printing or exiting.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cmdparam.help.formatter import format_help, format_version
from cmdparam.model.parameter import Parameter
from cmdparam.model.types import ParameterType, ParameterValue
from cmdparam.parser.engine import ParseOutcome, ParseResult, parse_arguments
from cmdparam.registry.registry import Registry

# ###############
# Public Interface
# ###############


class CommandLineProcessor:
    """Declares parameters, parses the command line, and reports usage errors.

    Args:
        registry: Registry to populate. A new, empty one is created if omitted.
        program: Program path shown in the help text. Defaults to ``sys.argv[0]``.
    """

    def __init__(self, registry: Registry | None = None, program: str | None = None) -> None:
        self._registry = registry if registry is not None else Registry()
        self._program = program

    @property
    def registry(self) -> Registry:
        return self._registry

    def add_parameter_detail(
        self,
        parameter_name: str,
        parameter_type: ParameterType,
        allow_empty: bool,
        default_value: ParameterValue | None,
        description: str,
        aliases: Sequence[str] = (),
    ) -> Parameter:
        """Add a parameter with every setting spelled out."""
        return self._registry.register(parameter_name, parameter_type, allow_empty, default_value, description, aliases)

    def add_simple_parameter(self, parameter_name: str, parameter_type: ParameterType, description: str) -> Parameter:
        """Add a required parameter."""
        return self._registry.register_simple(parameter_name, parameter_type, description)

    def add_can_empty_parameter(
        self,
        parameter_name: str,
        parameter_type: ParameterType,
        default_value: ParameterValue | None,
        description: str,
    ) -> Parameter:
        """Add an optional parameter with a default."""
        return self._registry.register_can_be_empty(parameter_name, parameter_type, default_value, description)

    def set_version_text(self, version_text: str) -> None:
        self._registry.set_version_text(version_text)

    def get_parameter_value(self, parameter_name: str) -> ParameterValue | None:
        return self._registry.get_value(parameter_name)

    def abort_flag(self) -> bool:
        """Return True if parsing was aborted (help, version, or an error)."""
        return self._registry.aborted

    def help_text(self) -> str:
        return format_help(self._registry, self._program)

    def parse(self, tokens: Sequence[str], *, fail_fast: bool = True) -> ParseResult:
        """Parse *tokens* without printing anything or exiting."""
        return parse_arguments(self._registry, tokens, fail_fast=fail_fast)

    def parse_command_line(self, argv: Sequence[str] | None = None, *, fail_fast: bool = True) -> ParseResult:
        """Parse the process arguments, exiting the process if parsing aborts.

        Args:
            argv: Arguments to parse, without the program path. Defaults to
                ``sys.argv[1:]``.
            fail_fast: See :func:`cmdparam.parser.parse_arguments`.

        Returns:
            The ParseResult of a successful parse.

        Raises:
            SystemExit: With EXIT_ABORTED after help, version, an unknown
                token, or a bad value, and with EXIT_MISSING_REQUIRED when a
                required parameter was not given.
        """
        if argv is None:
            argv = sys.argv[1:]
        result = self.parse(argv, fail_fast=fail_fast)
        if result.ok:
            return result

        report_result(result, self._registry, self._program)
        sys.exit(result.exit_code)


def report_result(result: ParseResult, registry: Registry, program: str | None = None) -> None:
    """Print what an aborted parse produced.

    Help is printed once for ``--help``; every other abort prints its version
    text or issue messages followed by the help text.
    """
    if result.outcome == ParseOutcome.HELP:
        print(format_help(registry, program))
    elif result.outcome == ParseOutcome.VERSION:
        print(format_version(registry))
    for issue in result.issues:
        print(issue.message)
    if result.outcome != ParseOutcome.HELP:
        print(format_help(registry, program))
