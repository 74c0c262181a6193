"""Configuration loading for typeprune."""

import json
from pathlib import Path

from typeprune.driver import DEFAULT_MAX_CYCLES
from typeprune.errors import ConfigurationError


def load_config(config_path: Path) -> dict:
    """Load a typeprune JSON configuration file."""
    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e
    if not isinstance(config, dict):
        raise ConfigurationError(f"Config must be a JSON object: {config_path}")
    return config


def get_entrypoint_types(config: dict) -> list[str]:
    """Get the fully qualified entrypoint type names from config."""
    entrypoints = config.get("entrypoint_types", [])
    if isinstance(entrypoints, str) or not all(isinstance(e, str) for e in entrypoints):
        raise ConfigurationError("'entrypoint_types' must be a list of type names")
    return list(entrypoints)


def should_check_documentation(config: dict) -> bool:
    """Check if doc comment references should keep types alive."""
    return bool(config.get("check_documentation", False))


def get_max_cycles(config: dict) -> int:
    """Get the maximum number of passes to run while looking for a fixed point."""
    return int(config.get("max_cycles", DEFAULT_MAX_CYCLES))


def get_output_indent(config: dict) -> int:
    """Get the JSON indent used when writing the pruned forest."""
    output = config.get("output", {})
    if not isinstance(output, dict):
        raise ConfigurationError("'output' must be an object")
    return int(output.get("indent", 2))
