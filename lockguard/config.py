"""Optional YAML configuration for the linter."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Tuple

import yaml

from .utils import read_yaml_file

CONFIG_FILENAME = ".lockguard.yaml"


class ConfigError(ValueError):
    """Raised when the configuration file cannot be interpreted."""


@dataclass(frozen=True)
class LintConfig:
    """Settings that shape traversal and suppression."""

    exclude: Tuple[str, ...] = ()
    respect_gitignore: bool = True

    def with_overrides(self, extra_excludes: Iterable[str] = (), no_gitignore: bool = False) -> "LintConfig":
        return LintConfig(
            exclude=self.exclude + tuple(extra_excludes),
            respect_gitignore=self.respect_gitignore and not no_gitignore,
        )


def _coerce_names(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    raise ConfigError(f"'exclude' must be a string or a list, got {type(value).__name__}")


def load_config(path: Path, required: bool = False) -> LintConfig:
    """Load ``path`` into a :class:`LintConfig`.

    A missing file yields defaults unless ``required`` is set.
    """

    if required and not path.is_file():
        raise ConfigError(f"Configuration file {path} does not exist")

    try:
        data = read_yaml_file(path)
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if data is None:
        return LintConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration at {path} is not a mapping")

    respect_gitignore = data.get("respect_gitignore", True)
    if not isinstance(respect_gitignore, bool):
        raise ConfigError("'respect_gitignore' must be true or false")
    return LintConfig(
        exclude=_coerce_names(data.get("exclude")),
        respect_gitignore=respect_gitignore,
    )
