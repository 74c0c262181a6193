"""Centralized path management for typeprune output files."""

from pathlib import Path

# Directory name for typeprune outputs
TYPEPRUNE_DIR = ".typeprune"

# File names within the .typeprune directory
CONFIG_FILE = "config.json"
RESULTS_FILE = "results.json"
PRUNED_FILE = "pruned.json"


def get_typeprune_dir(project_path: Path) -> Path:
    """Get the .typeprune directory path for a project."""
    return project_path / TYPEPRUNE_DIR


def ensure_typeprune_dir(project_path: Path) -> Path:
    """Ensure .typeprune directory exists and return its path."""
    typeprune_dir = get_typeprune_dir(project_path)
    typeprune_dir.mkdir(parents=True, exist_ok=True)
    return typeprune_dir


def get_config_path(project_path: Path) -> Path:
    """Get the config.json path for a project."""
    return get_typeprune_dir(project_path) / CONFIG_FILE


def get_results_path(project_path: Path) -> Path:
    """Get the results.json path for a project."""
    return get_typeprune_dir(project_path) / RESULTS_FILE


def get_pruned_path(project_path: Path) -> Path:
    """Get the path of the pruned forest written by ``typeprune prune``."""
    return get_typeprune_dir(project_path) / PRUNED_FILE
