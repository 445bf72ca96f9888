# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the cmdparam command-line interface."""

import argparse
import sys
from pathlib import Path

import yaml

from cmdparam.config.declarations import DeclarationError, build_registry, load_declarations
from cmdparam.help.formatter import format_help
from cmdparam.model.types import FlagValue, PathValue
from cmdparam.parser.engine import parse_arguments
from cmdparam.processor.processor import report_result
from cmdparam.registry.registry import Registry

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the cmdparam CLI."""
    parser = argparse.ArgumentParser(
        prog="cmdparam",
        description="cmdparam - try out command-line parameter declarations",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Parse arguments against a declaration file",
        description=(
            "Build the parameters declared in CONFIG, parse ARGS against them, "
            "and print the resulting values as YAML. Options of this command go before "
            "CONFIG; separate ARGS with '--'."
        ),
    )
    check_parser.add_argument("config", help="Path to the YAML declaration file")
    check_parser.add_argument(
        "--collect-all",
        action="store_true",
        help="Report every problem instead of stopping at the first one",
    )
    check_parser.add_argument("arguments", nargs=argparse.REMAINDER, help="Arguments to parse")

    # describe subcommand
    describe_parser = subparsers.add_parser(
        "describe",
        help="Print the help table for a declaration file",
        description="Print the usage and option table of the parameters declared in CONFIG.",
    )
    describe_parser.add_argument("config", help="Path to the YAML declaration file")
    describe_parser.add_argument(
        "--program",
        default=None,
        help="Program name shown in the usage line (default: the declaration file name)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "describe":
        return _cmd_describe(args)
    return 0


def _load_registry(config: str) -> Registry | None:
    """Build the registry declared in *config*, printing an error on failure."""
    try:
        return build_registry(load_declarations(Path(config)))
    except DeclarationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    registry = _load_registry(args.config)
    if registry is None:
        return 1

    arguments = list(args.arguments)
    if arguments[:1] == ["--"]:
        arguments = arguments[1:]

    program = Path(args.config).stem
    result = parse_arguments(registry, arguments, fail_fast=not args.collect_all)
    if result.aborted:
        report_result(result, registry, program)
        return result.exit_code

    print(yaml.safe_dump(_resolved_values(registry), default_flow_style=False, sort_keys=False), end="")
    return 0


def _cmd_describe(args: argparse.Namespace) -> int:
    """Handle the describe subcommand."""
    registry = _load_registry(args.config)
    if registry is None:
        return 1

    program = args.program if args.program is not None else Path(args.config).stem
    print(format_help(registry, program))
    return 0


def _resolved_values(registry: Registry) -> dict[str, object]:
    """Return plain, YAML-safe values for every parameter in registration order."""
    values: dict[str, object] = {}
    for parameter in registry:
        value = parameter.value
        if value is None:
            values[parameter.name] = None
        elif isinstance(value, FlagValue):
            values[parameter.name] = True
        elif isinstance(value, PathValue):
            values[parameter.name] = value.raw
        else:
            values[parameter.name] = value.value
    return values
