# langpack/commands/status.py

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from langpack.core.console import ConsoleAware
from langpack.core.constants import OPTIONAL_PACKAGES_DIR
from langpack.core.exceptions import LangPackError
from langpack.core.global_config import get_destination_dir
from langpack.core.guard import completion_marker, is_already_installed
from langpack.core.manifest import read_manifest
from langpack.core.release import detect_platform

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def status_command(console_awr: ConsoleAware, destination: Path, platform: str):
    """Command wrapper for status command."""
    console_awr.print("🔍 [bold cyan]Installation Status[/bold cyan]\n")
    console_awr.field("Destination", destination)
    console_awr.field("Platform", platform)

    marker = completion_marker(destination, platform).relative_to(destination).as_posix()
    if is_already_installed(destination, platform):
        console_awr.field("Runtime", f"installed ({marker})", style="green")
    else:
        console_awr.field("Runtime", f"not installed ({marker} missing)", style="yellow")

    installed = read_manifest(destination)
    if installed:
        console_awr.field("Languages", ", ".join(installed))
    else:
        console_awr.field("Languages", "no manifest", style="dim")

    packages_dir = destination / OPTIONAL_PACKAGES_DIR
    if packages_dir.is_dir():
        count = sum(1 for _ in packages_dir.iterdir())
        console_awr.field("Package entries", f"{count} in {OPTIONAL_PACKAGES_DIR}")


def register(app):
    """Register the status command with the Typer app."""

    @app.command()
    def status(
        dest: Optional[Path] = typer.Option(
            None,
            "--dest",
            "-d",
            help="Destination directory (defaults to the application directory)"
        ),
        platform: Optional[str] = typer.Option(
            None,
            "--platform",
            "-p",
            help="Artifact platform (windows-x64, macos-arm64). Auto-detected by default"
        ),
    ):
        """Show what is installed in the destination directory."""
        console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=False)
        try:
            console_awr.print("")
            status_command(
                console_awr,
                dest if dest else get_destination_dir(),
                platform if platform else detect_platform(),
            )
            console_awr.print("")

        except KeyboardInterrupt:
            console_awr.print("\n[bold yellow]⚠️  Status check cancelled by user.[/bold yellow]")
            console_awr.print("")
            raise typer.Exit(code=1)

        except LangPackError as e:
            console_awr.fail("Status check failed", e)
            raise typer.Exit(code=1)

        except Exception as e:
            console_awr.fail("Unexpected error", e)
            raise typer.Exit(code=1)
