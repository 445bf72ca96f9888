# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Help and version text for a parameter registry."""

import sys

from cmdparam.model.types import to_help_string
from cmdparam.registry.registry import Registry

# ###############
# Public Interface
# ###############

HELP_COLUMNS: tuple[str, str, str, str] = ("arg", "IsCanEmpty", "DefaultValue", "Description")

NO_VERSION_TEXT = "No version text has been set."


def format_help(registry: Registry, program: str | None = None) -> str:
    """Return the usage block and option table for *registry*.

    Args:
        registry: The registry whose parameters are listed.
        program: Program path shown in the usage line. Defaults to ``sys.argv[0]``
            as the program was invoked, which is not necessarily the absolute
            path of the running executable; pass the path explicitly to show
            that instead.
    """
    if program is None:
        program = sys.argv[0]

    rows = [list(HELP_COLUMNS)]
    for parameter in registry:
        rows.append(
            [
                ",".join(parameter.aliases),
                "true" if parameter.allow_empty else "false",
                to_help_string(parameter.default),
                parameter.description,
            ]
        )

    widths = [max(len(row[col]) for row in rows) for col in range(len(HELP_COLUMNS))]
    lines = [
        "USAGE",
        f"\t{program} [OPTIONS]",
        "",
        "OPTIONS",
    ]
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        lines.append("\t" + "\t".join(cells))
    return "\n".join(lines)


def format_version(registry: Registry) -> str:
    """Return the version text, or a notice that none was set."""
    if registry.version_text is None:
        return NO_VERSION_TEXT
    return registry.version_text
