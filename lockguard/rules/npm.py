"""Detect npm installs that bypass the lockfile or skip version pins."""

from __future__ import annotations

import re
from typing import List

from lockguard.result import Violation

from . import Rule, build_violation, has_version_pin

OTHER_MANAGER_PATTERN = re.compile(r"\b(pnpm|yarn|bun)\b")
NPM_CI_PATTERN = re.compile(r"\bnpm\s+ci\b")
NPM_INSTALL_PATTERN = re.compile(r"\bnpm\s+(install|i)(\s|$)")
BARE_INSTALL_PATTERN = re.compile(r"\bnpm\s+(install|i)(\s+)?($|&&|;|\||#)")

USE_CI_MESSAGE = "Use 'npm ci' instead of 'npm install' for lockfile-based installations"
UNPINNED_MESSAGE = "npm package installation without version pin (use 'npm i package@version')"


class NpmRule:
    """Require ``npm ci`` for project installs and pinned versions for packages."""

    name = "npm"

    def check(self, line: str, line_num: int) -> List[Violation]:
        # Lines naming another manager belong to that manager's rule.
        if OTHER_MANAGER_PATTERN.search(line):
            return []
        if NPM_CI_PATTERN.search(line):
            return []
        if not NPM_INSTALL_PATTERN.search(line):
            return []
        if has_version_pin(line):
            return []

        if BARE_INSTALL_PATTERN.search(line):
            return [build_violation(self, line, line_num, USE_CI_MESSAGE)]
        return [build_violation(self, line, line_num, UNPINNED_MESSAGE)]


def get_rule() -> Rule:
    return NpmRule()
