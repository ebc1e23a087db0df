"""Rule registry and shared pattern vocabulary for package-manager rules."""

from __future__ import annotations

import re
from typing import List, Protocol

from lockguard.result import Violation

# An ``@`` glued to a package name and followed by at least major.minor.
# The leading ``@`` of a scoped name (``@types/node``) never qualifies.
VERSION_PIN_PATTERN = re.compile(r"(?<=[^\s@/])@[0-9]+\.[0-9]+")


class Rule(Protocol):
    """Protocol implemented by all package-manager rules."""

    name: str

    def check(self, line: str, line_num: int) -> List[Violation]:
        """Return the violations found on ``line``."""


def has_version_pin(line: str) -> bool:
    return VERSION_PIN_PATTERN.search(line) is not None


def build_violation(rule: Rule, line: str, line_num: int, message: str) -> Violation:
    return Violation(
        line_num=line_num,
        message=message,
        line_content=line.strip(),
        rule=rule.name,
    )
