"""
Directory Analyzer CLI

A command-line tool for scoring registered project directories by:
1. Counting entries and measuring directory size and age
2. Correlating package.json dependencies with their usage in source files
3. Parsing import declarations and ranking packages by weighted signals
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from diranalyzer import __version__
from diranalyzer.analyzers.dependency_analyzer import (
    analyze_dependencies,
    create_bar_chart,
    read_declared_dependencies,
)
from diranalyzer.analyzers.import_analyzer import (
    ImportAnalysisError,
    analyze_imports,
    import_score,
    to_import_entries,
)
from diranalyzer.config import Settings
from diranalyzer.reporting.charts import render_ranking
from diranalyzer.schemas import DependencyTally, DependencyUsage, ImportData, ImportUsage
from diranalyzer.scoring.directory_scorer import analyze_directory
from diranalyzer.scoring.score_calculator import ScoringError, calculate_score
from diranalyzer.store import DirectoryStore, expand_path

app = typer.Typer(
    name="diranalyzer",
    help="Directory Analyzer - score project directories and rank their dependencies",
    add_completion=False,
)

console = Console(soft_wrap=True)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _get_store(ctx: typer.Context) -> DirectoryStore:
    return ctx.obj["store"]


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Directories file (default: $DIRANALYZER_CONFIG_FILE or ~/.diranalyzer/directories.json)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
):
    """
    Score stored directories, or add one interactively when no command is given.
    """
    try:
        settings = Settings.from_env()
    except ValueError as e:
        console.print(f"[red]❌ Error: invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _configure_logging("DEBUG" if verbose else settings.log_level)

    config_file = config.expanduser() if config else settings.config_file
    try:
        store = DirectoryStore(config_file)
    except OSError as e:
        console.print(f"[red]❌ Error: cannot initialize {config_file}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    ctx.obj = {"settings": settings, "store": store}

    if ctx.invoked_subcommand is None:
        console.print("Welcome to Directory Analyzer!")
        raw_path = typer.prompt("Please enter the path to the directory you want to analyze")
        _add_directory(store, raw_path)


def _add_directory(store: DirectoryStore, raw_path: str) -> None:
    absolute_path = expand_path(raw_path)

    if not absolute_path.is_dir():
        console.print("[red]Error: Directory does not exist![/red]")
        raise typer.Exit(1)

    if store.save_directory(absolute_path):
        console.print(f'Directory "{absolute_path}" has been saved!', markup=False)
    else:
        console.print(f'Directory "{absolute_path}" is already stored.', markup=False)


@app.command()
def add(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Directory to remember (~ is expanded)"),
):
    """Remember a directory for analysis."""
    _add_directory(_get_store(ctx), path)


@app.command()
def remove(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Stored directory to forget"),
):
    """Forget a stored directory."""
    store = _get_store(ctx)

    # Accept both the stored spelling and any path resolving to it
    if not store.remove_directory(path) and not store.remove_directory(expand_path(path)):
        console.print(f"[red]❌ Not a stored directory: {escape(path)}[/red]")
        raise typer.Exit(1)

    console.print(f'Directory "{path}" has been removed.', markup=False)


@app.command("list")
def list_directories(ctx: typer.Context):
    """Print the stored directories."""
    directories = _get_store(ctx).get_stored_directories()

    console.print("\n[bold]Stored directories:[/bold]")
    for index, dir_path in enumerate(directories, start=1):
        console.print(f"{index}. {dir_path}", markup=False, highlight=False)


@app.command()
def analyze(
    ctx: typer.Context,
    top: int = typer.Option(10, "--top", "-t", min=1, help="Package scores to show per directory"),
):
    """
    Score every stored directory and rank dependencies across all of them.

    For each directory this prints the dependency usage chart, the import
    analysis score, the weighted package ranking and the overall 0-100 score.
    A combined DEPENDENCY USAGE RANKING follows.
    """
    directories = _get_store(ctx).get_stored_directories()

    if not directories:
        console.print("No stored directories. Add one with: diranalyzer add <path>")
        return

    console.print("\n[bold cyan]Analyzing stored directories:[/bold cyan]\n")

    tally: Dict[str, DependencyTally] = {}
    total_import_score = 0

    try:
        for dir_path in directories:
            total_import_score += _analyze_one(dir_path, tally, top)

        console.print()
        for line in render_ranking(tally, total_import_score, len(directories)):
            console.print(line, markup=False, highlight=False)

    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Analysis interrupted by user[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"\n[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _analyze_one(dir_path: str, tally: Dict[str, DependencyTally], top: int) -> int:
    """Analyze one directory, update the tally and return its import score."""
    console.print(Panel.fit(f"[bold]Analyzing {escape(dir_path)}[/bold]", border_style="cyan"))

    # Dependencies
    dependencies = analyze_dependencies(dir_path)
    if dependencies:
        console.print("\n[bold]Dependency Usage Chart:[/bold]")
        console.print(create_bar_chart(dependencies), markup=False, highlight=False)

        console.print("\n[bold]Dependencies found:[/bold]")
        for dep in dependencies:
            console.print(f"{dep.name}@{dep.version} - Used {dep.count} times", markup=False, highlight=False)
            tally.setdefault(dep.name, DependencyTally()).add(dep, dir_path)
    else:
        console.print("No dependencies found or no package.json present")

    # Imports
    try:
        import_map = analyze_imports(dir_path)
    except ImportAnalysisError as e:
        logger.error(str(e))
        import_map = {}

    imports = import_score(import_map)
    if imports > 0:
        console.print(f"\nImport Analysis Score: [cyan]{imports}[/cyan]")
    else:
        console.print("\nNo imports found or unable to analyze imports")

    # Weighted package ranking
    _print_package_scores(dir_path, dependencies, import_map, top)

    # Overall
    analysis = analyze_directory(dir_path, dependencies=dependencies, import_map=import_map)
    console.print("\n[bold]Overall Analysis:[/bold]")
    if analysis.error:
        console.print(f"- [red]Error: {escape(analysis.error)}[/red]")
    else:
        console.print(f"- File Count: {analysis.file_count}")
        console.print(f"- Directory Size: {analysis.size} MB")
    console.print(f"- Overall Score: {analysis.score}/100\n")

    return imports


def _print_package_scores(
    dir_path: str,
    dependencies: List[DependencyUsage],
    import_map: Dict[str, ImportUsage],
    top: int,
) -> None:
    try:
        declared = list(read_declared_dependencies(dir_path))
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read declared dependencies of {dir_path}: {e}")
        declared = []

    if not declared and not import_map:
        return

    try:
        scores = calculate_score(
            [(dep.name, dep.count) for dep in dependencies],
            ImportData(direct_deps=declared, import_analysis=to_import_entries(import_map)),
        )
    except ScoringError as e:
        logger.error(f"Could not score packages of {dir_path}: {e}")
        return

    table = Table(title="Package Importance", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Package")
    table.add_column("Score", justify="right")
    table.add_column("Direct")
    table.add_column("Imports", justify="right")
    table.add_column("Entry Point")
    table.add_column("Usage", justify="right")

    for index, result in enumerate(scores[:top], start=1):
        details = result.details
        table.add_row(
            str(index),
            escape(result.package),
            str(result.score),
            "[green]Yes[/green]" if details.is_direct else "No",
            str(details.import_count),
            "[green]Yes[/green]" if details.is_in_entry_point else "No",
            str(details.dependency_count),
        )

    console.print()
    console.print(table)


@app.command()
def version():
    """Show the version of diranalyzer."""
    console.print(f"[bold cyan]Directory Analyzer[/bold cyan] v{__version__}")
    console.print("Directory and dependency importance scoring")


if __name__ == "__main__":
    app()
