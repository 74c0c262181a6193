"""Rich tree visualization for pruning results and dependency graphs."""

from collections import defaultdict
from pathlib import PurePosixPath

from rich.text import Text
from rich.tree import Tree

from typeprune.console import console
from typeprune.models.graph import DependencyGraph
from typeprune.models.results import PrunePlan, PruneResults


def build_results_tree(results: PruneResults, title: str = "Removed types") -> Tree:
    """Build a Rich tree showing removed types by file."""
    dropped = {item.file for item in results.dropped_files}

    # Group by file
    by_file: dict[PurePosixPath, list] = defaultdict(list)
    for item in results.removed_types:
        by_file[PurePosixPath(item.file)].append(item)

    root = Tree(f"[bold]{title}[/]", guide_style="dim")

    # Track directories we've added
    dir_nodes: dict[PurePosixPath, Tree] = {}

    for file_path in sorted(by_file):
        parent = root
        for i, part in enumerate(file_path.parts[:-1]):
            dir_path = PurePosixPath(*file_path.parts[: i + 1])
            if dir_path not in dir_nodes:
                dir_nodes[dir_path] = parent.add(f"[bold blue]{part}/[/]")
            parent = dir_nodes[dir_path]

        label = f"[yellow]{file_path.name}[/]"
        if str(file_path) in dropped:
            label += " [red](file dropped)[/]"
        file_node = parent.add(label)

        for item in sorted(by_file[file_path], key=lambda x: x.qualified_name):
            item_text = Text()
            item_text.append("x ", style="red bold")
            item_text.append(item.qualified_name, style="red")
            kind = f"nested {item.kind}" if item.nested else item.kind
            item_text.append(f" ({kind})", style="dim")
            file_node.add(item_text)

    if results.sanitized_references:
        refs_node = root.add(f"[cyan]Unlinked doc references[/] ({len(results.sanitized_references)})")
        for ref in results.sanitized_references:
            refs_node.add(f"@{ref.tag} {ref.text} [dim]in {ref.file}[/]")

    return root


def build_graph_tree(graph: DependencyGraph, plan: PrunePlan | None = None) -> Tree:
    """Build a Rich tree of every in-tree type and the types it depends on."""
    root = Tree("[bold]Type dependencies[/]", guide_style="dim")

    for model in sorted(graph, key=lambda m: m.qualified_name):
        if model.is_external:
            continue
        type_node = root.add(_type_label(model.qualified_name, graph, plan))
        for dependency in sorted(model.dependencies):
            type_node.add(_type_label(dependency, graph, plan))

    return root


def _type_label(name: str, graph: DependencyGraph, plan: PrunePlan | None) -> Text:
    model = graph.get(name)
    text = Text()
    if model is None or model.is_external:
        text.append(name, style="dim")
        text.append(" (external)", style="dim")
        return text
    if plan is None:
        text.append(name, style="cyan")
    elif plan.keeps(name):
        text.append(name, style="green")
    else:
        text.append("x ", style="red bold")
        text.append(name, style="red")
    return text


def display_tree(tree: Tree) -> None:
    """Display the tree to console."""
    console.print()
    console.print(tree)
    console.print()
