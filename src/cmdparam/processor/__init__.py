# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Program-facing command-line processor."""

from cmdparam.processor.processor import CommandLineProcessor, report_result

__all__ = [
    "CommandLineProcessor",
    "report_result",
]
