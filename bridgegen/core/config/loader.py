"""
Configuration loader — reads bridgegen.yml into a GeneratorConfig.

This is the primary entry point for loading generator configuration.
It reads YAML (JSON works too, being a YAML subset), validates against
the Pydantic schema, and returns an immutable config object whose
relative paths are anchored at the config file's directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from bridgegen.core.errors import ConfigurationError
from bridgegen.core.models.config import GeneratorConfig

logger = logging.getLogger(__name__)

# Filenames searched for, in order of preference
CONFIG_FILENAMES = ("bridgegen.yml", "bridgegen.yaml", "bridgegen.json")

# Optional wrapper key: the document may nest everything under it
_WRAPPER_KEY = "bridgegen"


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for a config file starting from the given directory, walking up.

    This allows running the generator from subdirectories and still
    finding the config.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        for filename in CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load and validate generator configuration.

    Args:
        path: Explicit path to the config file. If None, searches upward.

    Returns:
        Validated GeneratorConfig with ``base_path`` set to the file's directory.

    Raises:
        ConfigurationError: If the file is missing or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigurationError(
            f"No {CONFIG_FILENAMES[0]} found. Create one, or specify --config."
        )

    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")

    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a YAML mapping in {path}, got {type(data).__name__}"
        )

    if isinstance(data.get(_WRAPPER_KEY), dict):
        data = data[_WRAPPER_KEY]

    data = {**data, "base_path": str(config_root(path))}

    try:
        config = GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid generator configuration: {e}") from e

    logger.info("Loaded %s with %d target(s)", path.name, len(config.targets))
    return config


def config_root(config_path: Path) -> Path:
    """Get the directory relative config paths are anchored at."""
    return config_path.parent.resolve()
