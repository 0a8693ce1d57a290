"""Tests for project config loader."""

from pathlib import Path

import pytest

from unit_cover.config_loader import load_project_config


class TestLoadProjectConfig:
    """Tests for load_project_config function."""

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads and parses a valid unit_cover.yaml file."""
        (tmp_path / "unit_cover.yaml").write_text(
            """
erl_opts:
  - debug_info
  - [d, NODEBUG]
eunit_compile_opts:
  - [src_dirs, [lib]]
eunit_opts:
  - verbose
cover_enabled: true
"""
        )

        config = load_project_config(tmp_path)

        assert list(config.compile_opts) == ["debug_info", ("d", "NODEBUG")]
        assert list(config.test_compile_opts) == [("src_dirs", ["lib"])]
        assert list(config.test_opts) == ["verbose"]
        assert config.cover_enabled is True

    def test_defaults_when_file_missing(self, tmp_path: Path) -> None:
        """Uses defaults when the project has no configuration."""
        config = load_project_config(tmp_path)

        assert config.cover_enabled is False
        assert list(config.compile_opts) == []

    def test_defaults_for_empty_file(self, tmp_path: Path) -> None:
        """Treats an empty file as default configuration."""
        (tmp_path / "unit_cover.yaml").write_text("")

        assert load_project_config(tmp_path).cover_enabled is False

    def test_ignores_unknown_keys(self, tmp_path: Path) -> None:
        """Ignores keys meant for other plugins."""
        (tmp_path / "unit_cover.yaml").write_text("deps: []\ncover_enabled: true\n")

        assert load_project_config(tmp_path).cover_enabled is True

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Reads an explicitly given configuration file."""
        config_path = tmp_path / "custom.yaml"
        config_path.write_text("cover_enabled: true\n")

        assert load_project_config(tmp_path, config_path).cover_enabled is True

    def test_raises_for_missing_explicit_path(self, tmp_path: Path) -> None:
        """Raises FileNotFoundError for a missing explicit file."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_project_config(tmp_path, tmp_path / "missing.yaml")

    def test_raises_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ValueError for malformed YAML."""
        (tmp_path / "unit_cover.yaml").write_text("invalid: yaml: content: [")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_project_config(tmp_path)

    def test_raises_for_non_mapping(self, tmp_path: Path) -> None:
        """Raises ValueError when the document is not a mapping."""
        (tmp_path / "unit_cover.yaml").write_text("- debug_info\n")

        with pytest.raises(ValueError, match="Invalid project config schema"):
            load_project_config(tmp_path)

    def test_raises_for_invalid_schema(self, tmp_path: Path) -> None:
        """Raises ValueError for schema validation errors."""
        (tmp_path / "unit_cover.yaml").write_text("cover_enabled: maybe-not\n")

        with pytest.raises(ValueError, match="Invalid project config schema"):
            load_project_config(tmp_path)
