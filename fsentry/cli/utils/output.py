"""Output formatting utilities for CLI."""

import json
from enum import Enum
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.table import Table


class OutputFormat(Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class OutputFormatter:
    """Handle output formatting for different formats."""

    def __init__(self, format_type: str = "table", console: Optional[Console] = None):
        """
        Initialize output formatter.

        Args:
            format_type: Output format (table, json, yaml)
            console: Console to print to, a new one by default
        """
        self.console = console or Console()
        try:
            self.format = OutputFormat(format_type.lower())
        except ValueError:
            self.format = OutputFormat.TABLE

    def _print_raw(self, text: str):
        # Machine readable output must not be wrapped or styled
        self.console.print(
            text, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def _dump(self, value: Any):
        if self.format == OutputFormat.JSON:
            self._print_raw(json.dumps(value, indent=2, default=str, ensure_ascii=False))
        else:
            self._print_raw(
                yaml.safe_dump(value, default_flow_style=False, allow_unicode=True)
            )

    def print_listing(self, listing: Dict[str, List[str]], title: Optional[str] = None):
        """
        Print the children of one directory grouped by kind.

        Args:
            listing: Mapping of kind to names
            title: Table title (for table format)
        """
        if self.format != OutputFormat.TABLE:
            self._dump(listing)
            return

        rows = [(kind, name) for kind, names in listing.items() for name in names]
        if not rows:
            self.console.print("[dim]No items found[/dim]")
            return

        table = Table(title=title)
        table.add_column("Kind", style="cyan")
        table.add_column("Name")
        for kind, name in rows:
            table.add_row(kind, name)
        self.console.print(table)

    def print_detail(
        self,
        item: Dict[str, Any],
        title: Optional[str] = None,
    ):
        """
        Print detailed view of a single item.

        Args:
            item: Item to print
            title: Optional title
        """
        if self.format != OutputFormat.TABLE:
            self._dump(item)
            return

        if title:
            self.console.print(f"[bold]{title}[/bold]\n")

        for key, value in item.items():
            formatted_key = key.replace("_", " ").title()

            if value is None:
                formatted_value = "[dim]Not set[/dim]"
            elif isinstance(value, (list, dict)):
                formatted_value = json.dumps(value, indent=2, ensure_ascii=False)
            else:
                formatted_value = str(value)

            self.console.print(
                f"[cyan]{formatted_key}:[/cyan] ", end="", highlight=False
            )
            self.console.print(
                formatted_value, markup=value is None, emoji=False, highlight=False
            )

    def print_success(self, message: str):
        """Print success message."""
        if self.format == OutputFormat.TABLE:
            self.console.print(f"[green]✓[/green] {message}")
        else:
            self._dump({"status": "success", "message": message})

    def print_error(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Print error message."""
        if self.format == OutputFormat.TABLE:
            self.console.print(f"[red]✗[/red] {message}", markup=True, highlight=False)
            return
        payload: Dict[str, Any] = {"status": "error", "message": message}
        if details:
            payload["error"] = details
        self._dump(payload)
