"""Detect pnpm installs without a frozen lockfile and unpinned adds."""

from __future__ import annotations

import re
from typing import List

from lockguard.result import Violation

from . import Rule, build_violation, has_version_pin

PNPM_INSTALL_PATTERN = re.compile(r"\bpnpm\s+install\b")
PNPM_ADD_PATTERN = re.compile(r"\bpnpm\s+add\s")
FROZEN_LOCKFILE_PATTERN = re.compile(r"--frozen-lockfile")

FROZEN_MESSAGE = "Use 'pnpm install --frozen-lockfile' to respect lockfile"
UNPINNED_MESSAGE = "pnpm package installation without version pin (use 'pnpm add package@version')"


class PnpmRule:
    """Require ``--frozen-lockfile`` installs and pinned ``pnpm add`` calls."""

    name = "pnpm"

    def check(self, line: str, line_num: int) -> List[Violation]:
        violations: List[Violation] = []
        if PNPM_INSTALL_PATTERN.search(line) and not FROZEN_LOCKFILE_PATTERN.search(line):
            violations.append(build_violation(self, line, line_num, FROZEN_MESSAGE))
        if PNPM_ADD_PATTERN.search(line) and not has_version_pin(line):
            violations.append(build_violation(self, line, line_num, UNPINNED_MESSAGE))
        return violations


def get_rule() -> Rule:
    return PnpmRule()
