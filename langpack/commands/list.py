# langpack/commands/list.py

import typer
from rich.console import Console
from rich.table import Table

from langpack.core.catalog import Catalog, default_catalog
from langpack.core.console import ConsoleAware
from langpack.core.exceptions import LangPackError
from langpack.core.global_config import get_catalog_file

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def list_command(console_awr: ConsoleAware):
    """Command wrapper for list command."""
    catalog: Catalog = default_catalog(get_catalog_file())

    table = Table(title="🌐 Available language packs", title_justify="left")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Language", style="bold")
    table.add_column("Size", justify="right")
    table.add_column("Required", justify="center")
    table.add_column("Default", justify="center")

    for component in catalog.list_components():
        table.add_row(
            component.id,
            component.display_name,
            component.size_estimate,
            "✓" if component.required else "",
            "✓" if component.required or component.default_selected else "",
        )

    console_awr.print(table)


def register(app):
    """Register the list command with the main Typer app."""

    @app.command(name="list")
    def list_packs():
        """List the language packs that can be installed."""
        console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=False)
        try:
            console_awr.print("")
            list_command(console_awr)
            console_awr.print("")

        except LangPackError as e:
            console_awr.fail("List failed", e)
            raise typer.Exit(code=1)

        except Exception as e:
            console_awr.fail("Unexpected error", e)
            raise typer.Exit(code=1)
