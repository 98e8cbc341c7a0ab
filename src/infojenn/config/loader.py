"""Configuration loading with YAML parsing and validation."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pydantic_yaml

from .schema import InfojennConfig


def load_config(config_path: Path | str) -> InfojennConfig:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated InfojennConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        pydantic.ValidationError: If config is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        yaml_content = f.read()

    # An empty file means all defaults
    if not yaml_content.strip():
        return InfojennConfig()

    return pydantic_yaml.parse_yaml_raw_as(InfojennConfig, yaml_content)


def apply_overrides(
    config: InfojennConfig,
    overrides: Mapping[str, Any],
) -> InfojennConfig:
    """
    Return a copy of `config` with individual section fields replaced.

    Keys take the form "section.field" (e.g. "ic.module_root"). None values
    are ignored, so unset CLI options leave the loaded value in place.

    Args:
        config: Loaded (or default) configuration
        overrides: Replacement values keyed by "section.field"

    Returns:
        Revalidated InfojennConfig, or `config` itself if nothing was replaced

    Raises:
        KeyError: If a key does not name a field of a config section
        pydantic.ValidationError: If a replacement value is invalid
    """
    by_section: dict[str, dict[str, Any]] = {}
    for key, value in overrides.items():
        if value is None:
            continue
        section, _, field = key.partition(".")
        section_field = InfojennConfig.model_fields.get(section)
        if section_field is None or field not in section_field.annotation.model_fields:
            raise KeyError(f"Unknown config key: {key}")
        by_section.setdefault(section, {})[field] = value

    if not by_section:
        return config

    data = config.model_dump()
    for section, fields in by_section.items():
        data[section].update(fields)
    return InfojennConfig.model_validate(data)
