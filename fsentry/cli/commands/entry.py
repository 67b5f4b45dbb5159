"""Entry management commands."""

from typing import Optional

import typer

from fsentry.cli.utils.context import (
    CLIContext,
    handle_store_errors,
    parse_data,
    split_path,
)

app = typer.Typer(help="Manage entries")

PATH_OPTION = typer.Option(
    None, "--path", "-p", help="Nested path of the parent folder, '/' separated"
)


@app.command("create")
def create_entry(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Entry name"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="JSON payload"),
    path: Optional[str] = PATH_OPTION,
):
    """
    Create a new entry.

    Example:
        fsentry entry create "Shopping List" --data '["milk", "eggs"]'
    """
    cli_ctx: CLIContext = ctx.obj
    payload = parse_data(data)

    with handle_store_errors(cli_ctx, "create entry"):
        entry = cli_ctx.get_store().create_entry(name, payload, *split_path(path))
        cli_ctx.formatter.print_success(f"Entry '{entry.id}' created")
        if cli_ctx.debug:
            cli_ctx.formatter.print_detail(entry.model_dump(mode="json"))


@app.command("get")
def get_entry(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Entry name"),
    path: Optional[str] = PATH_OPTION,
):
    """Show an entry with its payload."""
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "get entry"):
        entry = cli_ctx.get_store().get_entry(name, *split_path(path))
        cli_ctx.formatter.print_detail(
            entry.model_dump(mode="json"), title=f"Entry: {entry.id}"
        )


@app.command("move")
def move_entry(
    ctx: typer.Context,
    old_name: str = typer.Argument(..., help="Current entry name"),
    new_name: str = typer.Argument(..., help="New entry name"),
    path: Optional[str] = PATH_OPTION,
):
    """Rename an entry."""
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "move entry"):
        entry = cli_ctx.get_store().move_entry(old_name, new_name, *split_path(path))
        cli_ctx.formatter.print_success(f"Entry moved to '{entry.id}'")


@app.command("update")
def update_entry(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Entry name"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="JSON payload"),
    path: Optional[str] = PATH_OPTION,
):
    """Replace the payload of an entry."""
    cli_ctx: CLIContext = ctx.obj
    payload = parse_data(data)

    with handle_store_errors(cli_ctx, "update entry"):
        entry = cli_ctx.get_store().update_entry(name, payload, *split_path(path))
        cli_ctx.formatter.print_success(f"Entry '{entry.id}' updated")


@app.command("remove")
def remove_entry(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Entry name"),
    path: Optional[str] = PATH_OPTION,
):
    """Remove an entry."""
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "remove entry"):
        cli_ctx.get_store().remove_entry(name, *split_path(path))
        cli_ctx.formatter.print_success(f"Entry '{name}' removed")


@app.command("duplicate")
def duplicate_entry(
    ctx: typer.Context,
    src_name: str = typer.Argument(..., help="Source entry name"),
    dst_name: str = typer.Argument(..., help="Name of the copy"),
    path: Optional[str] = PATH_OPTION,
    dst_path: Optional[str] = typer.Option(
        None, "--dst-path", help="Parent of the copy, defaults to --path"
    ),
):
    """Copy an entry's payload into a new entry."""
    cli_ctx: CLIContext = ctx.obj
    target = split_path(dst_path) if dst_path is not None else None

    with handle_store_errors(cli_ctx, "duplicate entry"):
        entry = cli_ctx.get_store().duplicate_entry(
            src_name, dst_name, *split_path(path), dst_path=target
        )
        cli_ctx.formatter.print_success(f"Entry '{src_name}' copied to '{entry.id}'")
