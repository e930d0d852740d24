"""Stagewise CLI — Typer application with show, find, and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from stagewise import __version__

app = typer.Typer(
    name="stagewise",
    help="Inspect working directory changes and what is selected for commit.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _load_status(snapshot: Path, config: Optional[str], strict: Optional[bool]):
    """Load config and snapshot, returning ``(cfg, status)``. Exits 2 on failure."""
    from stagewise.config.loader import ConfigError, load_config
    from stagewise.git.classify import ClassificationError
    from stagewise.git.snapshot import SnapshotError, build_status, load_snapshot
    from stagewise.selection.diff_selection import DiffSelectionType
    from stagewise.status.working_directory import DuplicateFileIdError

    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if strict is not None:
        cfg.status.strict_ids = strict

    initial = DiffSelectionType.ALL if cfg.status.initial_selection == "all" else DiffSelectionType.NONE
    try:
        items = load_snapshot(snapshot)
        status = build_status(items, strict=cfg.status.strict_ids, initial_selection=initial)
    except SnapshotError as exc:
        console.print(f"[bold red]Snapshot error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except (ClassificationError, DuplicateFileIdError) as exc:
        console.print(f"[bold red]Status error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    return cfg, status


# ── show ──────────────────────────────────────────────────────────────────────


@app.command()
def show(
    snapshot: Path = typer.Argument(..., help="Status snapshot (YAML or JSON)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .stagewise.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    include_all: Optional[bool] = typer.Option(
        None, "--include-all/--exclude-all", help="Include or exclude every file before rendering",
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Reject snapshots where two files share an id",
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Show the changed files of a status snapshot and their selection."""
    from stagewise.output import json_report, terminal

    _configure_logging(debug)

    if format and format not in ("terminal", "json"):
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)

    cfg, status = _load_status(snapshot, config, strict)
    if format:
        cfg.output.format = format  # type: ignore[assignment]

    if include_all is not None:
        status = status.with_include_all_files(include_all)

    if verbose or debug:
        console.print(f"[dim]Snapshot: {snapshot}[/dim]")
        console.print(f"[dim]Strict ids: {cfg.status.strict_ids}[/dim]")
        duplicates = status.duplicate_ids()
        if duplicates:
            console.print(f"[yellow]Shadowed ids:[/yellow] {', '.join(duplicates)}")

    if cfg.output.format == "json":
        print(json_report.render(status))
    else:
        terminal.render(status, console=console, show_summary=cfg.output.show_summary)

    if output:
        try:
            Path(output).write_text(json_report.render(status), encoding="utf-8")
        except OSError as exc:
            console.print(f"[bold red]Output error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")


# ── find ──────────────────────────────────────────────────────────────────────


@app.command()
def find(
    snapshot: Path = typer.Argument(..., help="Status snapshot (YAML or JSON)"),
    file_id: str = typer.Argument(..., help="File id, e.g. 'Renamed+new.py+old.py'"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .stagewise.toml"),
) -> None:
    """Look up a file by id. Exits 1 when no file has that id."""
    _, status = _load_status(snapshot, config, None)

    ix = status.find_file_index_by_id(file_id)
    found = status.find_file_with_id(file_id)
    if found is None:
        console.print(f"[red]✗[/red] No file with id {file_id}")
        raise typer.Exit(code=1)

    print(f"{ix}\t{found.path}\t{found.selection.get_selection_type().value}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .stagewise.toml in the current directory."""
    from stagewise.config.defaults import DEFAULT_TOML
    from stagewise.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"stagewise {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Stagewise — working directory changes and partial selection."""
