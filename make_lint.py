#!/usr/bin/env python3
"""
Tiny lint/format harness to keep the repo tidy without imposing global configs.
Runs ruff (if installed), flake8 (if installed) and black (if installed) in
check mode over the tracker packages; otherwise no-ops.
"""
from __future__ import annotations

import shutil
import subprocess
import sys

PATHS = ["emission_tracker", "ui", "tests"]


def run(cmd: list[str]) -> int:
    try:
        return subprocess.run(cmd, check=False).returncode
    except FileNotFoundError:
        return 0


def main() -> int:
    paths = sys.argv[1:] or PATHS
    rc = 0
    if shutil.which("ruff"):
        rc |= run(["ruff", "check", *paths])
    elif shutil.which("flake8"):
        rc |= run(["flake8", "--max-line-length", "130", *paths])
    if shutil.which("black"):
        rc |= run(["black", "--check", "--line-length", "130", *paths])
    return rc


if __name__ == "__main__":
    sys.exit(main())
