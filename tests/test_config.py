import pytest

from lockguard.config import ConfigError, LintConfig, load_config


def test_missing_config_yields_defaults(tmp_path):
    config = load_config(tmp_path / ".lockguard.yaml")

    assert config == LintConfig()
    assert config.respect_gitignore is True


def test_config_reads_excludes_and_gitignore_flag(tmp_path):
    path = tmp_path / ".lockguard.yaml"
    path.write_text("exclude:\n  - vendor\n  - third_party\nrespect_gitignore: false\n", encoding="utf-8")

    config = load_config(path)

    assert config.exclude == ("vendor", "third_party")
    assert config.respect_gitignore is False


def test_single_exclude_string_is_accepted(tmp_path):
    path = tmp_path / ".lockguard.yaml"
    path.write_text("exclude: vendor\n", encoding="utf-8")

    assert load_config(path).exclude == ("vendor",)


def test_non_mapping_config_is_rejected(tmp_path):
    path = tmp_path / ".lockguard.yaml"
    path.write_text("- vendor\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_yaml_is_rejected(tmp_path):
    path = tmp_path / ".lockguard.yaml"
    path.write_text("exclude: [vendor\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_overrides_extend_config():
    config = LintConfig(exclude=("vendor",)).with_overrides(["dist"], no_gitignore=True)

    assert config.exclude == ("vendor", "dist")
    assert config.respect_gitignore is False


def test_required_config_must_exist(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "custom.yaml", required=True)
