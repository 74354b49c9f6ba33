"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from retrace.deep_merge import deep_merge
from retrace.errors import ConfigError
from retrace.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_lists_replace() -> None:
    """Verify that lists are replaced, not concatenated."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3]})
    assert merged == {"arr": [3]}


def test_load_config_defaults() -> None:
    """Verify that the defaults are returned when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config["retrace"]["verbose"] is False


def test_load_config_does_not_share_defaults() -> None:
    """Verify that changing a loaded config leaves the defaults alone."""
    config = load_config(None)
    config["retrace"]["verbose"] = True
    assert DEFAULT_CONFIG["retrace"]["verbose"] is False


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"retrace": {"verbose": True}}))

    loaded = load_config(str(config_file))
    assert loaded["retrace"]["verbose"] is True
    assert loaded["retrace"]["regex"] is None  # Default


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing file falls back to the defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a YAML list is not accepted as configuration."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- verbose\n")
    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config(str(config_file))


def test_load_config_rejects_bad_yaml(tmp_path: Path) -> None:
    """Verify that YAML syntax errors raise ConfigError."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("retrace: [unclosed\n")
    with pytest.raises(ConfigError, match="Can't read config file"):
        load_config(str(config_file))


def test_load_config_rejects_non_mapping_section(tmp_path: Path) -> None:
    """Verify that the retrace section must be a mapping."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("retrace: fast\n")
    with pytest.raises(ConfigError, match="'retrace' must be a mapping"):
        load_config(str(config_file))


def test_load_config_rejects_non_string_templates(tmp_path: Path) -> None:
    """Verify that regex and pattern templates must be strings."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"retrace": {"regex": 5}}))
    with pytest.raises(ConfigError, match="'retrace.regex' must be a string"):
        load_config(str(config_file))

    config_file.write_text(yaml.dump({"retrace": {"pattern": ["%c"]}}))
    with pytest.raises(ConfigError, match="'retrace.pattern' must be a string"):
        load_config(str(config_file))


def test_load_config_rejects_non_bool_verbose(tmp_path: Path) -> None:
    """Verify that a quoted 'false' is not taken as a boolean."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("retrace:\n  verbose: 'false'\n")
    with pytest.raises(ConfigError, match="'retrace.verbose' must be true or false"):
        load_config(str(config_file))


def test_load_config_empty_section_keeps_defaults(tmp_path: Path) -> None:
    """Verify that an empty retrace key falls back to the defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("retrace:\n")
    assert load_config(str(config_file)) == DEFAULT_CONFIG
