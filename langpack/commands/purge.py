# langpack/commands/purge.py

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from langpack.core.console import ConsoleAware
from langpack.core.exceptions import LangPackError
from langpack.core.global_config import get_destination_dir
from langpack.core.purge import purge_installation

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def purge_command(console_awr: ConsoleAware, destination: Path):
    """Command wrapper for purge command."""
    if purge_installation(destination):
        console_awr.print(f"🗑️  [bold green]Removed[/bold green] [cyan]{destination}[/cyan]")
    else:
        console_awr.print(f"[dim]Nothing to remove at {destination}[/dim]")


def register(app):
    """Register the purge command with the Typer app."""

    @app.command()
    def purge(
        dest: Optional[Path] = typer.Option(
            None,
            "--dest",
            "-d",
            help="Destination directory (defaults to the application directory)"
        ),
        yes: bool = typer.Option(
            False,
            "--yes",
            "-y",
            help="Do not ask for confirmation"
        ),
    ):
        """Remove the runtime and every installed language pack."""
        console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=False)
        destination = dest if dest else get_destination_dir()
        try:
            console_awr.print("")
            if not yes and not typer.confirm(f"Remove {destination} and everything in it?", default=False):
                console_awr.print("[yellow]Purge aborted.[/yellow]")
                console_awr.print("")
                raise typer.Exit(code=1)

            purge_command(console_awr, destination)
            console_awr.print("")

        except KeyboardInterrupt:
            console_awr.print("\n[bold yellow]⚠️  Purge cancelled by user.[/bold yellow]")
            console_awr.print("")
            raise typer.Exit(code=1)

        except LangPackError as e:
            console_awr.fail("Purge failed", e)
            raise typer.Exit(code=1)

        except typer.Exit:
            raise

        except Exception as e:
            console_awr.fail("Unexpected error", e)
            raise typer.Exit(code=1)
