"""Detect bun installs without a frozen lockfile and unpinned adds."""

from __future__ import annotations

import re
from typing import List

from lockguard.result import Violation

from . import Rule, build_violation, has_version_pin

BUN_INSTALL_PATTERN = re.compile(r"\bbun\s+install\b")
BUN_ADD_PATTERN = re.compile(r"\bbun\s+add\s")
FROZEN_LOCKFILE_PATTERN = re.compile(r"--frozen-lockfile")

FROZEN_MESSAGE = "Use 'bun install --frozen-lockfile' to respect lockfile"
UNPINNED_MESSAGE = "bun package installation without version pin (use 'bun add package@version')"


class BunRule:
    name = "bun"

    def check(self, line: str, line_num: int) -> List[Violation]:
        violations: List[Violation] = []
        if BUN_INSTALL_PATTERN.search(line) and not FROZEN_LOCKFILE_PATTERN.search(line):
            violations.append(build_violation(self, line, line_num, FROZEN_MESSAGE))
        if BUN_ADD_PATTERN.search(line) and not has_version_pin(line):
            violations.append(build_violation(self, line, line_num, UNPINNED_MESSAGE))
        return violations


def get_rule() -> Rule:
    return BunRule()
