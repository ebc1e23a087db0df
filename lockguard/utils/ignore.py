"""Gitignore-based suppression of reported violations."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

import pathspec

from .discovery import is_excluded

logger = logging.getLogger(__name__)

GITIGNORE_NAME = ".gitignore"


@dataclass
class GitignoreIndex:
    """Every ``.gitignore`` in a tree, each scoped to its own directory."""

    entries: List[Tuple[Path, pathspec.PathSpec]] = field(default_factory=list)

    @classmethod
    def from_tree(cls, root: Path, extra_excludes: Iterable[str] = ()) -> "GitignoreIndex":
        excludes = tuple(extra_excludes)
        index = cls()
        for dirpath, dirnames, filenames in os.walk(root):
            current = Path(dirpath)
            dirnames[:] = sorted(
                name for name in dirnames if not is_excluded(current.relative_to(root) / name, excludes)
            )
            if GITIGNORE_NAME in filenames:
                index.add(Path(dirpath) / GITIGNORE_NAME)
        return index

    def add(self, gitignore_path: Path) -> None:
        try:
            lines = gitignore_path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable %s: %s", gitignore_path, exc)
            return
        spec = pathspec.GitIgnoreSpec.from_lines(lines)
        self.entries.append((gitignore_path.parent, spec))

    def is_ignored(self, path: Path) -> bool:
        """Return ``True`` when any enclosing ``.gitignore`` matches ``path``."""

        for base, spec in self.entries:
            try:
                relative = path.relative_to(base)
            except ValueError:
                continue
            if spec.match_file(relative.as_posix()):
                return True
        return False
