# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Help and version text rendering."""

from cmdparam.help.formatter import HELP_COLUMNS, NO_VERSION_TEXT, format_help, format_version

__all__ = [
    "HELP_COLUMNS",
    "NO_VERSION_TEXT",
    "format_help",
    "format_version",
]
