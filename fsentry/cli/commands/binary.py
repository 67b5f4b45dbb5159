"""Binary management commands."""

from pathlib import Path
from typing import Optional

import typer

from fsentry.cli.utils.context import CLIContext, handle_store_errors, split_path

app = typer.Typer(help="Manage binaries")

PATH_OPTION = typer.Option(
    None, "--path", "-p", help="Nested path of the parent folder, '/' separated"
)
FILE_OPTION = typer.Option(
    ...,
    "--file",
    "-f",
    exists=True,
    dir_okay=False,
    readable=True,
    help="File to read the content from",
)


@app.command("create")
def create_binary(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Binary name"),
    file: Path = FILE_OPTION,
    path: Optional[str] = PATH_OPTION,
):
    """
    Store the content of a local file as a new binary.

    Example:
        fsentry binary create avatar --file ./avatar.png
    """
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "create binary"):
        binary = cli_ctx.get_store().create_binary(
            name, file.read_bytes(), *split_path(path)
        )
        cli_ctx.formatter.print_success(
            f"Binary '{binary.id}' created ({binary.size} bytes)"
        )


@app.command("get")
def get_binary(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Binary name"),
    out: Optional[Path] = typer.Option(
        None, "--out", help="Write the content to this file"
    ),
    path: Optional[str] = PATH_OPTION,
):
    """
    Read a binary, optionally saving its content to a file.

    Example:
        fsentry binary get avatar --out ./avatar.png
    """
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "get binary"):
        binary = cli_ctx.get_store().get_binary(name, *split_path(path))

    if out is not None:
        out.write_bytes(binary.data)
        cli_ctx.formatter.print_success(f"Binary '{binary.id}' written to {out}")
    else:
        cli_ctx.formatter.print_detail(
            {"id": binary.id, "size": binary.size}, title=f"Binary: {binary.id}"
        )


@app.command("move")
def move_binary(
    ctx: typer.Context,
    old_name: str = typer.Argument(..., help="Current binary name"),
    new_name: str = typer.Argument(..., help="New binary name"),
    path: Optional[str] = PATH_OPTION,
):
    """Rename a binary."""
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "move binary"):
        cli_ctx.get_store().move_binary(old_name, new_name, *split_path(path))
        cli_ctx.formatter.print_success(f"Binary '{old_name}' moved to '{new_name}'")


@app.command("update")
def update_binary(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Binary name"),
    file: Path = FILE_OPTION,
    path: Optional[str] = PATH_OPTION,
):
    """Replace the content of a binary with a local file."""
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "update binary"):
        binary = cli_ctx.get_store().update_binary(
            name, file.read_bytes(), *split_path(path)
        )
        cli_ctx.formatter.print_success(
            f"Binary '{binary.id}' updated ({binary.size} bytes)"
        )


@app.command("remove")
def remove_binary(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Binary name"),
    path: Optional[str] = PATH_OPTION,
):
    """Remove a binary."""
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "remove binary"):
        cli_ctx.get_store().remove_binary(name, *split_path(path))
        cli_ctx.formatter.print_success(f"Binary '{name}' removed")


@app.command("duplicate")
def duplicate_binary(
    ctx: typer.Context,
    src_name: str = typer.Argument(..., help="Source binary name"),
    dst_name: str = typer.Argument(..., help="Name of the copy"),
    path: Optional[str] = PATH_OPTION,
    dst_path: Optional[str] = typer.Option(
        None, "--dst-path", help="Parent of the copy, defaults to --path"
    ),
):
    """Copy a binary under a new name."""
    cli_ctx: CLIContext = ctx.obj
    target = split_path(dst_path) if dst_path is not None else None

    with handle_store_errors(cli_ctx, "duplicate binary"):
        binary = cli_ctx.get_store().duplicate_binary(
            src_name, dst_name, *split_path(path), dst_path=target
        )
        cli_ctx.formatter.print_success(f"Binary '{src_name}' copied to '{binary.id}'")
