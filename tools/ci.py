#!/usr/bin/env python3
# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the cmdparam CI checks locally: format, lint, tests with coverage, build.

Pass step names to run a subset, e.g. ``tools/ci.py lint tests``.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "tests": ["uv", "run", "pytest", "--cov=cmdparam", "--cov-report=term-missing"],
    "build": ["uv", "build"],
}


def main(argv: list[str]) -> int:
    """Run the selected CI steps (all by default) and print a summary."""
    selected = argv or list(STEPS)
    unknown = [name for name in selected if name not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(STEPS)}"))
        return 2

    results: list[tuple[str, int, float]] = []
    for name in selected:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(STEPS[name], cwd=_REPO_ROOT)
        results.append((name, proc.returncode, time.monotonic() - start))

    _banner("summary")
    for name, returncode, elapsed in results:
        if returncode == 0:
            print(chalk.green(f"  PASS  {name} ({elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {name} ({elapsed:.1f}s, exit {returncode})"))
    print()
    return 0 if all(returncode == 0 for _, returncode, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = pathlib.Path(__file__).resolve().parent.parent


def _banner(title: str) -> None:
    rule = chalk.blue("=" * 60)
    print(f"\n{rule}\n{chalk.blue(title)}\n{rule}")


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
