"""Core result data structures for the linter."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, List


@dataclass(frozen=True)
class Violation:
    """A single package-manager policy breach on one line."""

    line_num: int
    message: str
    line_content: str
    rule: str = ""

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass
class FileReport:
    """Violations reported for one file."""

    path: str
    violations: List[Violation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "path": self.path,
            "violations": [violation.to_dict() for violation in self.violations],
        }


@dataclass
class ScanResult:
    """Bundle file counts and reported violations."""

    violations_found: int = 0
    files_checked: int = 0
    suppressed_files: int = 0
    reports: List[FileReport] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.violations_found == 0

    def add_file_report(self, report: FileReport) -> None:
        self.violations_found += len(report.violations)
        self.reports.append(report)

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": {
                "violations_found": self.violations_found,
                "files_checked": self.files_checked,
                "suppressed_files": self.suppressed_files,
            },
            "files": [report.to_dict() for report in self.reports],
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        return 0 if self.passed else 1


def format_report(result: ScanResult) -> str:
    """Create a human-readable report for console output."""

    lines: List[str] = []
    for report in result.reports:
        lines.append(f"✗ {report.path}")
        for violation in report.violations:
            lines.append(f"  Line {violation.line_num}: {violation.message}")
            lines.append(f"  > {violation.line_content}")
        lines.append("")

    lines.append("=" * 39)
    if result.passed:
        lines.append("✓ No violations found!")
        lines.append(f"Files checked: {result.files_checked}")
    else:
        lines.append(
            f"✗ Found {result.violations_found} violation(s) in {result.files_checked} files"
        )
    return "\n".join(lines)
