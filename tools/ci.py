#!/usr/bin/env python3
# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=memoml", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main(steps: list[tuple[str, list[str]]] | None = None) -> int:
    """Run the CI steps and print a summary; return 0 only if every step passed."""
    results = [_run_step(name, cmd) for name, cmd in (steps if steps is not None else STEPS)]

    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue("  Summary"))
    print(sep)
    for name, passed, elapsed in results:
        status = "PASS" if passed else "FAIL"
        color = chalk.green if passed else chalk.red
        print(color(f"  {status}  {name} ({elapsed:.1f}s)"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(name))
    print(sep)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_repo_root())
    return name, proc.returncode == 0, time.monotonic() - start


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
