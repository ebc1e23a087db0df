"""Repository traversal and file eligibility helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator, Iterable

EXCLUDES = {"node_modules", ".git"}
SELF_SCRIPT_NAME = "lint-package-install.sh"
WORKFLOW_DIR = ".github/workflows"


def is_excluded(path: Path, extra_excludes: Iterable[str] = ()) -> bool:
    """Return ``True`` for dependency caches, VCS internals and the lint script."""

    parts = set(path.parts)
    if parts & EXCLUDES:
        return True
    if parts & set(extra_excludes):
        return True
    return path.name == SELF_SCRIPT_NAME


def should_check_file(path: Path) -> bool:
    """Return ``True`` when the file type may contain install instructions."""

    name = path.name
    if name.startswith("Dockerfile") or name.endswith(".dockerfile"):
        return True

    suffix = path.suffix.lower()
    if suffix in {".md", ".sh"}:
        return True
    if suffix in {".yml", ".yaml"}:
        return WORKFLOW_DIR in path.as_posix()
    return False


def iter_candidate_files(root: Path, extra_excludes: Iterable[str] = ()) -> Generator[Path, None, None]:
    """Yield eligible files beneath ``root`` in a stable order.

    Excluded directories are pruned before descending so large dependency
    trees are never walked.
    """

    excludes = tuple(extra_excludes)
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        dirnames[:] = sorted(
            name for name in dirnames if not is_excluded(current.relative_to(root) / name, excludes)
        )
        for filename in sorted(filenames):
            path = current / filename
            if is_excluded(path.relative_to(root), excludes):
                continue
            if should_check_file(path):
                yield path
