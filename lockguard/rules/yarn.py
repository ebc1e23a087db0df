"""Detect yarn installs that may rewrite the lockfile and unpinned adds."""

from __future__ import annotations

import re
from typing import List

from lockguard.result import Violation

from . import Rule, build_violation, has_version_pin

# Bare ``yarn`` installs too, so the command must end the statement.
YARN_INSTALL_PATTERN = re.compile(r"\byarn(\s+install)?(\s+)?($|&&|;|\||#)")
YARN_ADD_PATTERN = re.compile(r"\byarn\s+(global\s+)?add\s")
FROZEN_PATTERN = re.compile(r"--(frozen-lockfile|immutable)")

FROZEN_MESSAGE = "Use 'yarn install --frozen-lockfile' to respect lockfile"
UNPINNED_MESSAGE = "yarn package installation without version pin (use 'yarn add package@version')"


class YarnRule:
    """Require frozen or immutable installs and pinned ``yarn add`` calls."""

    name = "yarn"

    def check(self, line: str, line_num: int) -> List[Violation]:
        violations: List[Violation] = []
        if YARN_INSTALL_PATTERN.search(line) and not FROZEN_PATTERN.search(line):
            violations.append(build_violation(self, line, line_num, FROZEN_MESSAGE))
        if YARN_ADD_PATTERN.search(line) and not has_version_pin(line):
            violations.append(build_violation(self, line, line_num, UNPINNED_MESSAGE))
        return violations


def get_rule() -> Rule:
    return YarnRule()
