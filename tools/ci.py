#!/usr/bin/env python3
# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the joinport CI checks locally and print a coloured summary.

Usage: ``python tools/ci.py [--only NAME ...] [--fail-fast]``.
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "tests": ["uv", "run", "pytest", "--cov=joinport", "--cov-report=term-missing"],
    "build": ["uv", "build"],
}


def main() -> int:
    """Run the selected CI steps and report results."""
    parser = argparse.ArgumentParser(description="Run joinport CI checks.")
    parser.add_argument("--only", nargs="+", choices=list(STEPS), help="Run only these steps")
    parser.add_argument("--fail-fast", action="store_true", help="Stop after the first failing step")
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    for name in args.only or list(STEPS):
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(STEPS[name], cwd=_REPO_ROOT)
        results.append((name, proc.returncode == 0, time.monotonic() - start))
        if args.fail_fast and proc.returncode != 0:
            break

    return _report(results)


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent

_RULE = "=" * 60


def _banner(title: str) -> None:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue(title))
    print(chalk.blue(_RULE))


def _report(results: list[tuple[str, bool, float]]) -> int:
    """Print the summary table; returns the process exit code."""
    _banner("Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


if __name__ == "__main__":
    sys.exit(main())
