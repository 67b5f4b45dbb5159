"""Folder management commands."""

from typing import Optional

import typer

from fsentry.cli.utils.context import (
    CLIContext,
    handle_store_errors,
    parse_data,
    split_path,
)

app = typer.Typer(help="Manage folders")

PATH_OPTION = typer.Option(
    None, "--path", "-p", help="Nested path of the parent folder, '/' separated"
)


@app.command("create")
def create_folder(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Folder name"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="JSON payload"),
    path: Optional[str] = PATH_OPTION,
):
    """
    Create a new folder.

    Example:
        fsentry folder create "My Photos" --data '{"owner": "me"}'
    """
    cli_ctx: CLIContext = ctx.obj
    payload = parse_data(data)

    with handle_store_errors(cli_ctx, "create folder"):
        info = cli_ctx.get_store().create_folder(name, payload, *split_path(path))
        cli_ctx.formatter.print_success(f"Folder '{info.id}' created")
        if cli_ctx.debug:
            cli_ctx.formatter.print_detail(info.model_dump(mode="json"))


@app.command("get")
def get_folder(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Folder name"),
    path: Optional[str] = PATH_OPTION,
):
    """
    Show the metadata of a folder.

    Example:
        fsentry folder get my_photos --path archive/2024
    """
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "get folder"):
        info = cli_ctx.get_store().get_folder(name, *split_path(path))
        cli_ctx.formatter.print_detail(
            info.model_dump(mode="json"), title=f"Folder: {info.id}"
        )


@app.command("move")
def move_folder(
    ctx: typer.Context,
    old_name: str = typer.Argument(..., help="Current folder name"),
    new_name: str = typer.Argument(..., help="New folder name"),
    keep_timestamps: bool = typer.Option(
        False, "--keep-timestamps", help="Do not touch the update timestamp"
    ),
    path: Optional[str] = PATH_OPTION,
):
    """
    Rename a folder.

    Example:
        fsentry folder move photos pictures --keep-timestamps
    """
    cli_ctx: CLIContext = ctx.obj
    store = cli_ctx.get_store()
    move = store.move_folder_without_timestamp if keep_timestamps else store.move_folder

    with handle_store_errors(cli_ctx, "move folder"):
        info = move(old_name, new_name, *split_path(path))
        cli_ctx.formatter.print_success(f"Folder moved to '{info.id}'")


@app.command("update")
def update_folder(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Folder name"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="JSON payload"),
    path: Optional[str] = PATH_OPTION,
):
    """
    Replace the payload of a folder.

    Example:
        fsentry folder update photos --data '[1, 2, 3]'
    """
    cli_ctx: CLIContext = ctx.obj
    payload = parse_data(data)

    with handle_store_errors(cli_ctx, "update folder"):
        info = cli_ctx.get_store().update_folder(name, payload, *split_path(path))
        cli_ctx.formatter.print_success(f"Folder '{info.id}' updated")


@app.command("remove")
def remove_folder(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Folder name"),
    path: Optional[str] = PATH_OPTION,
):
    """
    Remove a folder with everything inside it.
    """
    cli_ctx: CLIContext = ctx.obj

    with handle_store_errors(cli_ctx, "remove folder"):
        cli_ctx.get_store().remove_folder(name, *split_path(path))
        cli_ctx.formatter.print_success(f"Folder '{name}' removed")


@app.command("duplicate")
def duplicate_folder(
    ctx: typer.Context,
    src_name: str = typer.Argument(..., help="Source folder name"),
    dst_name: str = typer.Argument(..., help="Name of the copy"),
    path: Optional[str] = PATH_OPTION,
    dst_path: Optional[str] = typer.Option(
        None, "--dst-path", help="Parent of the copy, defaults to --path"
    ),
):
    """
    Copy a folder with its content.

    Example:
        fsentry folder duplicate photos photos_backup --dst-path archive
    """
    cli_ctx: CLIContext = ctx.obj
    target = split_path(dst_path) if dst_path is not None else None

    with handle_store_errors(cli_ctx, "duplicate folder"):
        info = cli_ctx.get_store().duplicate_folder(
            src_name, dst_name, *split_path(path), dst_path=target
        )
        cli_ctx.formatter.print_success(f"Folder '{src_name}' copied to '{info.id}'")
