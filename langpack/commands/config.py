# langpack/commands/config.py

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from langpack.core.catalog import default_catalog
from langpack.core.console import ConsoleAware
from langpack.core.exceptions import LangPackError
from langpack.core.global_config import (
    config_path,
    get_catalog_file,
    get_default_languages,
    get_destination_dir,
    get_release_host,
    get_release_version,
    set_global_default,
    set_global_release,
)
from langpack.core.release import parse_version

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def config_command(
        release_host: Optional[str],
        release_version: Optional[str],
        destination: Optional[Path],
        languages: Optional[List[str]],
        console: Console
    ):
    """Command wrapper for config command."""
    console_awr = ConsoleAware(console=console, verbose=False)

    if release_version and release_version.lower() != "latest":
        parse_version(release_version)

    if release_host or release_version:
        set_global_release(release_host, release_version)
        if release_host:
            console_awr.print(f"⚙️ [bold green]Release host set[/bold green] → [cyan]{release_host}[/cyan]")
        if release_version:
            console_awr.print(f"⚙️ [bold green]Release version set[/bold green] → [cyan]{release_version}[/cyan]")

    if destination:
        set_global_default("destination", str(destination))
        console_awr.print(f"📁 [green]Destination set[/green] → [cyan]{destination}[/cyan]")

    if languages:
        catalog = default_catalog(get_catalog_file())
        codes = [code.strip().lower() for code in languages]
        for code in codes:
            catalog.get(code)
        set_global_default("languages", codes)
        console_awr.print(f"🌐 [green]Default languages set[/green] → [cyan]{', '.join(codes)}[/cyan]")

    console_awr.print("")
    console_awr.print(f"📋 [bold cyan]Config file[/bold cyan] → [cyan]{config_path()}[/cyan]")
    console_awr.field("Release host", get_release_host())
    console_awr.field("Release version", get_release_version())
    console_awr.field("Destination", get_destination_dir())
    default_languages = get_default_languages()
    console_awr.field("Default languages", ", ".join(default_languages) if default_languages else "catalog defaults")


def register(app: typer.Typer):

    @app.command()
    def config(
        release_host: Optional[str] = typer.Option(
            None,
            "--release-host",
            help="Set the artifact host root (release versions are appended as /v<version>)"
        ),
        release_version: Optional[str] = typer.Option(
            None,
            "--release-version",
            help="Set the default release version, or 'latest'"
        ),
        destination: Optional[Path] = typer.Option(
            None,
            "--destination",
            help="Set the default destination directory"
        ),
        languages: Optional[List[str]] = typer.Option(
            None,
            "--language",
            help="Set the default language selection (repeatable)"
        ),
    ):
        """Configure langpack defaults."""
        console = Console(log_path=False)

        console_awr = ConsoleAware(console=console, verbose=False)

        try:
            console_awr.print("")
            config_command(release_host, release_version, destination, languages, console)
            console_awr.print("")
        except KeyboardInterrupt:
            console_awr.print("\n[bold yellow]⚠️  Config setting cancelled by user.[/bold yellow]")
            console_awr.print("")
            raise typer.Exit(code=1)

        except LangPackError as e:
            console_awr.fail("Config setting failed", e)
            raise typer.Exit(code=1)

        except Exception as e:
            console_awr.fail("Unexpected error", e)
            raise typer.Exit(code=1)
