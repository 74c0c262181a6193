"""Output modules for CLI display and file writing."""

from typeprune.output.json_writer import write_config, write_forest, write_results
from typeprune.output.tree import build_graph_tree, build_results_tree, display_tree

__all__ = [
    "build_graph_tree",
    "build_results_tree",
    "display_tree",
    "write_config",
    "write_forest",
    "write_results",
]
