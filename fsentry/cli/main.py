"""fsentry CLI Tool."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from fsentry.cli import __version__
from fsentry.cli.commands import binary, entry, folder
from fsentry.cli.utils.context import CLIContext, handle_store_errors
from fsentry.cli.utils.output import OutputFormatter
from fsentry.core.config import get_settings
from fsentry.infrastructure.logging import setup_logging

app = typer.Typer(
    name="fsentry",
    help="fsentry - store folders, JSON entries and binaries on the filesystem",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    pretty_exceptions_enable=False,
)

console = Console()


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        console.print(f"fsentry v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug output",
    ),
    output_format: str = typer.Option(
        "table",
        "--output",
        "-o",
        help="Output format: table, json, yaml",
    ),
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Root directory of the store (default: FSENTRY_ROOT_PATH)",
    ),
    pretty: Optional[bool] = typer.Option(
        None,
        "--pretty/--compact",
        help="Write indented or compact JSON metadata",
    ),
):
    """
    fsentry CLI

    Manage a hierarchical object store kept in plain files and folders.
    """
    settings = get_settings()
    if debug:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    setup_logging(settings)

    cli_context = CLIContext(
        debug=debug,
        settings=settings,
        formatter=OutputFormatter(output_format, console=console),
        console=console,
        root=root,
        pretty=pretty,
    )

    ctx.obj = cli_context

    if debug:
        console.print("[dim]Debug mode enabled[/dim]")


app.add_typer(folder.app, name="folder", help="Manage folders")
app.add_typer(entry.app, name="entry", help="Manage entries")
app.add_typer(binary.app, name="binary", help="Manage binaries")


@app.command("init")
def init_command(ctx: typer.Context):
    """
    Create the store root directory.
    """
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "initialize store"):
        store = cli_ctx.get_store()
        store.init()
        cli_ctx.formatter.print_success(f"Store initialized at {store.root}")


@app.command("drop")
def drop_command(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """
    Delete the store root with every object in it.
    """
    cli_ctx: CLIContext = ctx.obj
    store = cli_ctx.get_store()

    if not yes and not Confirm.ask(f"Delete everything under {store.root}?"):
        console.print("Aborted")
        raise typer.Exit(1)

    with handle_store_errors(cli_ctx, "drop store"):
        store.drop()
        cli_ctx.formatter.print_success(f"Store at {store.root} dropped")


@app.command("list")
def list_command(
    ctx: typer.Context,
    path: Optional[List[str]] = typer.Argument(
        None, help="Nested folder path, one segment per argument"
    ),
):
    """
    List the folders and entries inside a path.

    Examples:
        fsentry list
        fsentry list archive 2024
    """
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "list"):
        result = cli_ctx.get_store().list(*(path or []))
        cli_ctx.formatter.print_listing(
            {
                "folders": result.folders,
                "entries": result.entries,
                "corrupted_folders": result.corrupted_folders,
            },
            title="/".join(path or []) or "/",
        )


if __name__ == "__main__":
    app()
