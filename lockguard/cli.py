"""Command-line entry point for the lockguard package-install linter."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .config import CONFIG_FILENAME, ConfigError, LintConfig, load_config
from .result import FileReport, ScanResult, format_report
from .scanner import scan_content
from .utils import GitignoreIndex, iter_candidate_files, read_text_file

logger = logging.getLogger(__name__)

HEADER = "Checking for JS package manager violations...\n"
CONFIG_ERROR_EXIT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Flag JavaScript package-manager commands that ignore lockfiles or version pins",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Repository root to scan (defaults to the current directory).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a YAML config file (defaults to <root>/{CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "--exclude",
        "-e",
        dest="excludes",
        action="append",
        default=[],
        help="Directory or file name to skip (repeatable).",
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Report violations in files matched by .gitignore.",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format for stdout (defaults to text); --out always writes JSON.",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the JSON report (e.g., artifacts/lockguard.json).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log skipped files and suppression decisions.",
    )
    return parser


def _display_path(path: Path, root: Path) -> str:
    return path.relative_to(root).as_posix()


def run_scan(root: Path, config: LintConfig | None = None) -> ScanResult:
    config = config or LintConfig()
    root = root.resolve()
    gitignores = GitignoreIndex.from_tree(root, config.exclude) if config.respect_gitignore else GitignoreIndex()
    result = ScanResult()

    for path in iter_candidate_files(root, config.exclude):
        try:
            content = read_text_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable file %s: %s", path, exc)
            continue
        result.files_checked += 1

        violations = scan_content(content)
        if not violations:
            continue
        if gitignores.is_ignored(path):
            logger.debug("Suppressing %d violation(s) in ignored file %s", len(violations), path)
            result.suppressed_files += 1
            continue
        result.add_file_report(FileReport(path=_display_path(path, root), violations=violations))
    return result


def write_output(result: ScanResult, output_path: str | None, report_format: str) -> None:
    payload = json.dumps(result.to_dict(), indent=2)
    if report_format == "json":
        print(payload)
    else:
        print(format_report(result))

    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        if report_format == "text":
            print(f"\nReport written to {output_path}")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = Path(args.root)
    if not root.is_dir():
        print(f"lockguard: {root} is not a directory", file=sys.stderr)
        return CONFIG_ERROR_EXIT

    config_path = Path(args.config) if args.config else root / CONFIG_FILENAME
    try:
        config = load_config(config_path, required=args.config is not None)
    except ConfigError as exc:
        print(f"lockguard: {exc}", file=sys.stderr)
        return CONFIG_ERROR_EXIT
    config = config.with_overrides(args.excludes, no_gitignore=args.no_gitignore)

    if args.format == "text":
        print(HEADER)
    result = run_scan(root, config)
    write_output(result, args.output_path, args.format)
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
