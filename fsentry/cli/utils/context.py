"""CLI context management."""

import json
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, List, Optional

import typer
from rich.console import Console

from fsentry.application.services import StoreService
from fsentry.cli.utils.output import OutputFormatter
from fsentry.core.config import Settings
from fsentry.core.exceptions import FSEntryError
from fsentry.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CLIContext:
    """Context object passed through CLI commands."""

    debug: bool
    settings: Settings
    formatter: OutputFormatter
    console: Console
    root: Optional[Path] = None
    pretty: Optional[bool] = None

    def get_store(self) -> StoreService:
        """
        Get a store bound to the configured root.

        Returns:
            StoreService instance
        """
        return StoreService(self.root, pretty=self.pretty, settings=self.settings)


def split_path(path: Optional[str]) -> List[str]:
    """Turn a "/"-separated nested path into its segments."""
    if not path:
        return []
    return [segment for segment in path.strip("/").split("/") if segment]


def parse_data(raw: Optional[str]) -> Any:
    """Decode a --data option; no option means a null payload."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"not valid JSON: {e.msg}", param_hint="--data")


@contextmanager
def handle_store_errors(cli_ctx: CLIContext, action: str) -> Iterator[None]:
    """Report store errors through the formatter and exit with status 1."""
    try:
        yield
    except FSEntryError as e:
        logger.debug("cli_command_failed", action=action, **e.to_dict())
        cli_ctx.formatter.print_error(f"Failed to {action}: {e.message}", e.to_dict())
        raise typer.Exit(1)
