"""typeprune CLI - eliminate types unreachable from a set of entrypoints."""

import time
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from typeprune import __version__
from typeprune.analysis.closure import compute_plan
from typeprune.analysis.scanner import scan_forest
from typeprune.config import (
    get_entrypoint_types,
    get_max_cycles,
    get_output_indent,
    load_config,
    should_check_documentation,
)
from typeprune.console import configure_logging, console
from typeprune.driver import DEFAULT_MAX_CYCLES, PruneRun, run_to_fixed_point
from typeprune.errors import ConfigurationError, InternalConsistencyError
from typeprune.models.results import PruneMetadata, PruneResults, PruneSummary
from typeprune.output.json_writer import write_config, write_forest, write_results
from typeprune.output.tree import build_graph_tree, build_results_tree, display_tree
from typeprune.paths import (
    ensure_typeprune_dir,
    get_config_path,
    get_pruned_path,
    get_results_path,
)
from typeprune.recipe import EliminateUnreachableTypes
from typeprune.tree.codec import load_forest
from typeprune.tree.nodes import Forest

app = typer.Typer(
    name="typeprune",
    help="Eliminate types that are unreachable from a set of entrypoint types",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"typeprune version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Eliminate types that are unreachable from a set of entrypoint types."""


@app.command()
def prune(
    forest: Path = typer.Argument(
        ...,
        help="Path to the forest JSON produced by the parser",
    ),
    entrypoint: Optional[list[str]] = typer.Option(
        None,
        "--entrypoint",
        "-e",
        help="Fully qualified entrypoint type (repeatable, overrides config)",
    ),
    check_docs: Optional[bool] = typer.Option(
        None,
        "--check-docs/--no-check-docs",
        help="Keep types referenced only from doc comments",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: .typeprune/config.json)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Path for the pruned forest (default: .typeprune/pruned.json)",
    ),
    results: Optional[Path] = typer.Option(
        None,
        "--results",
        "-r",
        help="Path for results JSON output (default: .typeprune/results.json)",
    ),
    max_cycles: Optional[int] = typer.Option(
        None,
        "--max-cycles",
        help="Maximum passes while looking for a fixed point",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the full tree of removed types and debug logging",
    ),
) -> None:
    """Remove every type not reachable from the entrypoints."""
    configure_logging(verbose)
    project = Path.cwd()

    config_data = _load_config_or_exit(config, project)
    entrypoints = list(entrypoint or []) or _config_value(get_entrypoint_types, config_data)
    if not entrypoints:
        console.print("[red]No entrypoint types given.[/]")
        console.print("Pass [bold]--entrypoint[/] or set [bold]entrypoint_types[/] in the config.")
        raise typer.Exit(1)
    check_documentation = (
        check_docs
        if check_docs is not None
        else _config_value(should_check_documentation, config_data)
    )
    cycles = max_cycles if max_cycles is not None else _config_value(get_max_cycles, config_data)
    indent = _config_value(get_output_indent, config_data)

    units = _load_forest_or_exit(forest)

    console.print(Panel.fit("[bold blue]typeprune - Eliminate Unreachable Types[/]"))
    console.print(f"\n[dim]Forest:[/] {forest} ({len(units)} units)")
    console.print(f"[dim]Entrypoints:[/] {', '.join(entrypoints)}\n")

    start_time = time.time()
    try:
        recipe = EliminateUnreachableTypes(entrypoints, check_documentation=check_documentation)
        run = run_to_fixed_point(units, recipe, max_cycles=cycles)
    except InternalConsistencyError as e:
        console.print(f"[red]Internal error:[/] {e}")
        raise typer.Exit(2)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)
    duration_ms = int((time.time() - start_time) * 1000)

    prune_results = _build_results(
        forest, units, run, entrypoints, check_documentation, duration_ms
    )

    if output is None:
        ensure_typeprune_dir(project)
        output = get_pruned_path(project)
    if results is None:
        ensure_typeprune_dir(project)
        results = get_results_path(project)

    try:
        for path in (output, results):
            path.parent.mkdir(parents=True, exist_ok=True)
        write_forest(run.forest, output, indent=indent)
        write_results(prune_results, results)
    except OSError as e:
        console.print(f"[red]Could not write output:[/] {e}")
        raise typer.Exit(1)
    console.print(f"[green]Pruned forest saved to:[/] {output}")
    console.print(f"[green]Results saved to:[/] {results}")

    if verbose:
        display_tree(build_results_tree(prune_results))
    else:
        _display_summary(prune_results)


@app.command()
def graph(
    forest: Path = typer.Argument(
        ...,
        help="Path to the forest JSON produced by the parser",
    ),
    entrypoint: Optional[list[str]] = typer.Option(
        None,
        "--entrypoint",
        "-e",
        help="Mark types kept or removed for these entrypoints",
    ),
    check_docs: bool = typer.Option(
        False,
        "--check-docs/--no-check-docs",
        help="Count doc comment references as dependencies",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Show the type dependency graph of a forest."""
    configure_logging(verbose)
    units = _load_forest_or_exit(forest)

    dependency_graph = scan_forest(units, check_documentation=check_docs)
    plan = None
    if entrypoint:
        try:
            plan = compute_plan(dependency_graph, entrypoint)
        except InternalConsistencyError as e:
            console.print(f"[red]Internal error:[/] {e}")
            raise typer.Exit(2)
        except ConfigurationError as e:
            console.print(f"[red]Error:[/] {e}")
            raise typer.Exit(1)

    display_tree(build_graph_tree(dependency_graph, plan))
    if plan is not None:
        console.print(
            f"[green]{len(plan.keep)} kept[/], [red]{len(plan.remove)} removed[/], "
            f"[dim]{len(dependency_graph.external_names())} external[/]"
        )


@app.command()
def init(
    path: Path = typer.Argument(
        Path("."),
        help="Project directory to create .typeprune/config.json in",
    ),
    entrypoint: Optional[list[str]] = typer.Option(
        None,
        "--entrypoint",
        "-e",
        help="Fully qualified entrypoint type (repeatable)",
    ),
    check_docs: bool = typer.Option(
        False,
        "--check-docs/--no-check-docs",
        help="Keep types referenced only from doc comments",
    ),
    max_cycles: int = typer.Option(
        DEFAULT_MAX_CYCLES,
        "--max-cycles",
        help="Maximum passes while looking for a fixed point",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write a default configuration file."""
    path = path.resolve()
    config_path = get_config_path(path)

    if config_path.exists() and not force:
        console.print(f"[yellow]Config file already exists:[/] {config_path}")
        console.print("Use [bold]--force[/] to overwrite it.")
        raise typer.Exit(1)

    ensure_typeprune_dir(path)
    write_config(
        list(entrypoint or []),
        config_path,
        check_documentation=check_docs,
        max_cycles=max_cycles,
    )
    console.print(f"[green]Configuration saved to:[/] {config_path}")


def _load_config_or_exit(config: Optional[Path], project: Path) -> dict:
    """Load the given config, or the project default if there is one."""
    if config is None:
        default_path = get_config_path(project)
        if not default_path.exists():
            return {}
        config = default_path
    elif not config.exists():
        console.print(f"[red]Config file not found:[/] {config}")
        raise typer.Exit(1)

    try:
        return load_config(config)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)


def _config_value(getter, config_data: dict):
    try:
        return getter(config_data)
    except (ConfigurationError, TypeError, ValueError) as e:
        console.print(f"[red]Invalid config:[/] {e}")
        raise typer.Exit(1)


def _load_forest_or_exit(forest: Path) -> Forest:
    if not forest.exists():
        console.print(f"[red]Forest file not found:[/] {forest}")
        raise typer.Exit(1)
    try:
        return load_forest(forest)
    except ValueError as e:
        console.print(f"[red]Invalid forest:[/] {e}")
        raise typer.Exit(1)


def _build_results(
    forest_path: Path,
    units: Forest,
    run: PruneRun,
    entrypoints: list[str],
    check_documentation: bool,
    duration_ms: int,
) -> PruneResults:
    """Collect the outcome of all passes into a results model."""
    types_before = len(run.passes[0].graph.in_tree_names()) if run.passes else 0
    types_kept = len(scan_forest(run.forest).in_tree_names())
    removed_types = run.removed_types

    return PruneResults(
        metadata=PruneMetadata(
            forest=str(forest_path),
            pruned_at=datetime.now(),
            typeprune_version=__version__,
            entrypoint_types=entrypoints,
            check_documentation=check_documentation,
            cycles=run.cycles,
            converged=run.converged,
            duration_ms=duration_ms,
        ),
        summary=PruneSummary(
            files_before=len(units),
            files_after=len(run.forest),
            types_before=types_before,
            types_kept=types_kept,
            types_removed=types_before - types_kept,
            references_sanitized=len(run.sanitized_references),
            by_kind=dict(Counter(item.kind for item in removed_types)),
        ),
        removed_types=removed_types,
        dropped_files=run.dropped_files,
        sanitized_references=run.sanitized_references,
    )


def _display_summary(results: PruneResults) -> None:
    """Display pruning summary."""
    if not results.summary:
        return

    summary = results.summary

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Types removed", f"{summary.types_removed} of {summary.types_before}")
    for kind, count in sorted(summary.by_kind.items()):
        table.add_row(f"  {kind}", str(count))

    table.add_row("", "")
    table.add_row("Files", f"{summary.files_before} -> {summary.files_after}")
    table.add_row("Doc references unlinked", str(summary.references_sanitized))

    if results.metadata:
        table.add_row("", "")
        status = "[green]yes[/]" if results.metadata.converged else "[yellow]no[/]"
        table.add_row("Passes", str(results.metadata.cycles))
        table.add_row("Fixed point reached", status)

    console.print(Panel(table, title="[bold]Pruning Summary[/]", border_style="blue"))


if __name__ == "__main__":
    app()
