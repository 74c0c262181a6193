"""JSON output writers for config, results and pruned forests."""

import json
from pathlib import Path

from typeprune.driver import DEFAULT_MAX_CYCLES
from typeprune.models.results import PruneResults
from typeprune.tree.codec import dump_forest
from typeprune.tree.nodes import Forest


def write_config(
    entrypoint_types: list[str],
    output_path: Path,
    check_documentation: bool = False,
    max_cycles: int = DEFAULT_MAX_CYCLES,
) -> None:
    """Write a typeprune configuration file."""
    config = {
        "version": "1.0",
        "entrypoint_types": entrypoint_types,
        "check_documentation": check_documentation,
        "max_cycles": max_cycles,
        "output": {
            "indent": 2,
        },
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)


def write_results(results: PruneResults, output_path: Path) -> None:
    """Write pruning results to JSON file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(results.to_dict(), f, indent=2)


def write_forest(forest: Forest, output_path: Path, indent: int = 2) -> None:
    """Write the pruned forest in the JSON interchange format."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    dump_forest(forest, output_path, indent=indent)
