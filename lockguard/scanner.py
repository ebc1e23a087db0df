"""Line-level scanning of one file's text for package-manager violations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple

from .result import Violation
from .rules import Rule, bun, npm, pnpm, yarn

FENCE_MARKER = "```"
EXEMPT_PREFIXES = ("#", "`", ">", "-")
PLACEHOLDERS = ("<package>", "<version>")


@dataclass(frozen=True)
class ScanState:
    """Per-file state carried from one line to the next."""

    in_code_block: bool = False


def load_rules() -> List[Rule]:
    return [
        npm.get_rule(),
        pnpm.get_rule(),
        yarn.get_rule(),
        bun.get_rule(),
    ]


_DEFAULT_RULES: Tuple[Rule, ...] = tuple(load_rules())


def iter_lines(content: str) -> Iterator[Tuple[int, str]]:
    """Yield 1-based line numbers and text, tolerating ``\\r\\n`` endings."""

    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for index, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        yield index, line


def update_fence(line: str, state: ScanState) -> Tuple[bool, ScanState]:
    """Toggle the code-block state on a fence marker line.

    Returns whether the line was consumed as a fence together with the new
    state.
    """

    if line.strip().startswith(FENCE_MARKER):
        return True, replace(state, in_code_block=not state.in_code_block)
    return False, state


def is_exempt(line: str) -> bool:
    """Return ``True`` for comments, quoted examples and placeholder lines."""

    trimmed = line.strip()
    if trimmed.startswith(EXEMPT_PREFIXES):
        return True
    return any(placeholder in trimmed for placeholder in PLACEHOLDERS)


def scan_line(
    line: str, line_num: int, state: ScanState, rules: Sequence[Rule]
) -> Tuple[List[Violation], ScanState]:
    consumed, state = update_fence(line, state)
    if consumed or state.in_code_block:
        return [], state
    if is_exempt(line):
        return [], state

    violations: List[Violation] = []
    for rule in rules:
        violations.extend(rule.check(line, line_num))
    return violations, state


def scan_content(content: str, rules: Optional[Sequence[Rule]] = None) -> List[Violation]:
    """Scan the full text of one file and return violations in line order."""

    active_rules = _DEFAULT_RULES if rules is None else rules
    state = ScanState()
    violations: List[Violation] = []
    for line_num, line in iter_lines(content):
        found, state = scan_line(line, line_num, state, active_rules)
        violations.extend(found)
    return violations
