# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Argument parser engine and value coercion."""

from cmdparam.parser.coercion import CoercionError, coerce
from cmdparam.parser.engine import (
    EXIT_ABORTED,
    EXIT_MISSING_REQUIRED,
    EXIT_OK,
    HELP_ALIASES,
    VERSION_ALIASES,
    IssueKind,
    ParseIssue,
    ParseOutcome,
    ParseResult,
    parse_arguments,
)

__all__ = [
    "coerce",
    "CoercionError",
    "parse_arguments",
    "ParseResult",
    "ParseIssue",
    "ParseOutcome",
    "IssueKind",
    "HELP_ALIASES",
    "VERSION_ALIASES",
    "EXIT_OK",
    "EXIT_ABORTED",
    "EXIT_MISSING_REQUIRED",
]
