"""
Config check use case — validate bridgegen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from bridgegen.core.config.loader import config_root, find_config_file, load_config
from bridgegen.core.engine.batch import validate_target_name
from bridgegen.core.errors import BridgegenError, ConfigurationError
from bridgegen.core.models.config import GeneratorConfig
from bridgegen.core.services.header_scan import compile_ignore_pattern


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: GeneratorConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "target_count": len(self.config.targets) if self.config else 0,
            "targets": sorted(self.config.targets) if self.config else [],
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator configuration and report issues.

    Errors are problems that make ``generate`` fail. Warnings point at
    paths that don't exist yet.

    Args:
        config_path: Optional explicit path to the config file.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.errors.append("No bridgegen.yml found.")
        return result

    result.config_path = config_path

    # Load and validate
    try:
        config = load_config(config_path)
        result.config = config
    except ConfigurationError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    if not config.targets:
        result.errors.append("No targets defined. There is nothing to generate.")

    for name, spec in config.sorted_targets():
        try:
            validate_target_name(name)
            compile_ignore_pattern(spec.ignore_pattern)
        except BridgegenError as e:
            result.errors.append(f"Target '{name}': {e.message}")

    # Path checks (relative to the config file's directory)
    root = config_root(config_path)
    output_dir = root / Path(config.output_directory).expanduser()
    if not output_dir.is_dir():
        result.warnings.append(f"Output directory does not exist: {config.output_directory}")

    search_root = root / Path(config.base_search_path).expanduser()
    if not search_root.is_dir():
        result.warnings.append(f"Base search path does not exist: {config.base_search_path}")
    else:
        for name, spec in config.sorted_targets():
            if not (search_root / Path(spec.search_path).expanduser()).is_dir():
                result.warnings.append(
                    f"Target '{name}' search path does not exist: {spec.search_path}"
                )

    result.valid = len(result.errors) == 0
    return result
