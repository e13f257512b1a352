# langpack/commands/install.py

"""
langpack install command.

Builds the language selection from the command line and the global
configuration, then runs the provisioning pipeline with a rich progress
display.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from langpack.core.catalog import Catalog, default_catalog
from langpack.core.console import ConsoleAware
from langpack.core.exceptions import LangPackError, ProvisioningError, SelectionError
from langpack.core.global_config import (
    get_catalog_file,
    get_default_languages,
    get_destination_dir,
    get_release_host,
    get_release_version,
)
from langpack.core.orchestrator import run_provisioning
from langpack.core.progress import DetailLog, ProgressBus, RichProgressView
from langpack.core.release import detect_platform, resolve_version, versioned_base_url
from langpack.core.selection import Selection

# ==============================================================
# SELECTION BUILDING
# ==============================================================

def build_selection(catalog: Catalog, langs: List[str], excludes: List[str],
                    select_all: bool, no_defaults: bool) -> Selection:
    """
    Apply defaults, then --all, then --lang, then --exclude.

    Configured default languages replace the catalog defaults.
    """
    configured = get_default_languages()
    use_catalog_defaults = not no_defaults and configured is None
    selection = Selection(catalog, defaults=use_catalog_defaults)

    if configured and not no_defaults:
        selection.select(configured)
    if select_all:
        selection.select(catalog.ids())
    selection.select(code.strip().lower() for code in langs)
    selection.deselect(code.strip().lower() for code in excludes)
    return selection

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def install_command(selection: Selection, destination: Path, release_version: str,
                    platform: str, details: bool, console: Console, verbose: bool) -> None:
    """Command wrapper for install command."""
    console_awr = ConsoleAware(console=console, verbose=verbose)

    release_host = get_release_host()

    def base_url() -> str:
        version = resolve_version(release_version)
        console_awr.log(f"Resolved release {release_version} → {version}")
        return versioned_base_url(release_host, version)

    detail_log = DetailLog(visible=details)
    bus = ProgressBus(detail_log)

    console_awr.print(
        f"📦 [bold]Installing language packs[/bold] → [cyan]{', '.join(selection.selected_ids())}[/cyan]"
    )
    console_awr.log(f"Destination: {destination}")
    console_awr.log(f"Platform: {platform}")

    with RichProgressView(detail_log, console=console, verbose=verbose) as view:
        result = run_provisioning(
            selection, destination, base_url, platform,
            subscribers=[view], bus=bus,
        )

    if result.skipped:
        console_awr.print(
            f"[green]✓[/] Language packs already installed in [cyan]{destination}[/cyan], nothing to do."
        )
        return

    console_awr.print(
        f"[bold green]✅ Installed[/bold green] [cyan]{','.join(result.installed_ids)}[/cyan] "
        f"into [cyan]{destination}[/cyan]"
    )
    if result.warning is not None:
        console_awr.warn(f"{result.warning}")


def register(app):
    """Register the install command with the main Typer app."""

    @app.command()
    def install(
        langs: Optional[List[str]] = typer.Option(
            None,
            "--lang",
            "-l",
            help="Language pack to install (repeatable), e.g. -l zh -l es"
        ),
        excludes: Optional[List[str]] = typer.Option(
            None,
            "--exclude",
            "-x",
            help="Language pack to leave out (repeatable)"
        ),
        select_all: bool = typer.Option(
            False,
            "--all",
            help="Install every language pack in the catalog"
        ),
        no_defaults: bool = typer.Option(
            False,
            "--no-defaults",
            help="Start from the required language packs only"
        ),
        dest: Optional[Path] = typer.Option(
            None,
            "--dest",
            "-d",
            help="Destination directory (defaults to the application directory)"
        ),
        release_version: Optional[str] = typer.Option(
            None,
            "--release-version",
            "-r",
            help="Release version to provision from, or 'latest'"
        ),
        platform: Optional[str] = typer.Option(
            None,
            "--platform",
            "-p",
            help="Artifact platform (windows-x64, macos-arm64). Auto-detected by default"
        ),
        details: bool = typer.Option(
            False,
            "--details",
            help="Show the detailed log while installing"
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            help="Show detailed output"
        )
    ):
        """Download and install language packs."""
        console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=verbose)

        try:
            console_awr.print("")
            catalog = default_catalog(get_catalog_file())
            selection = build_selection(catalog, langs or [], excludes or [], select_all, no_defaults)

            install_command(
                selection,
                dest if dest else get_destination_dir(),
                release_version if release_version else get_release_version(),
                platform if platform else detect_platform(),
                details,
                console,
                verbose,
            )
            console_awr.print("")

        except KeyboardInterrupt:
            console_awr.print("\n[bold yellow]⚠️  Install cancelled by user.[/bold yellow]")
            console_awr.print("")
            raise typer.Exit(code=1)

        except SelectionError as e:
            console_awr.fail("Invalid selection", e)
            raise typer.Exit(code=1)

        except ProvisioningError as e:
            console_awr.print(f"\n[bold red]❌ Install failed:[/bold red] {e}")
            if not details:
                console_awr.print("[dim]Run again with --details to see the full log.[/dim]")
            console_awr.print("")
            raise typer.Exit(code=1)

        except LangPackError as e:
            console_awr.fail("Install failed", e)
            raise typer.Exit(code=1)

        except Exception as e:
            console_awr.fail("Unexpected error", e)
            raise typer.Exit(code=1)
