"""Loader for the project's unit_cover.yaml configuration."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from unit_cover.models.config import ProjectConfig

log = logging.getLogger(__name__)

CONFIG_FILE = "unit_cover.yaml"


def load_project_config(base_dir: Path, config_path: Path | None = None) -> ProjectConfig:
    """Load the project configuration.

    Args:
        base_dir: Project root, searched for unit_cover.yaml
        config_path: Explicit configuration file overriding the default location

    Returns:
        Parsed configuration; defaults when the default file is absent or empty

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If the file is not valid YAML or does not match the schema

    """
    if config_path is None:
        config_path = base_dir / CONFIG_FILE
        if not config_path.exists():
            log.debug("No %s in %s, using defaults", CONFIG_FILE, base_dir)
            return ProjectConfig()
    elif not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return ProjectConfig()
    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid project config schema in {config_path}: expected a mapping"
        )

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid project config schema in {config_path}: {e}") from e
