# langpack/cli.py
"""
Main CLI entry point for langpack.

This module sets up the Typer application and registers all commands.
"""
import typer
from rich.console import Console

from langpack.commands import (
    list as list_cmd,
    install,
    status,
    purge,
    config,
)

import importlib.metadata

app = typer.Typer(
    name="langpack",
    help="langpack - Language pack provisioning for Screen Translate",
    add_completion=False,
    no_args_is_help=True,
)

# Register commands
list_cmd.register(app)
install.register(app)
status.register(app)
purge.register(app)
config.register(app)

def get_package_version():
    package_name = "langpack-provisioner"

    try:
        return importlib.metadata.version(package_name)
    except importlib.metadata.PackageNotFoundError:
        from langpack import __version__
        return __version__

@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version of langpack and exit.",
        callback=lambda value: _version_callback(value),
        is_eager=True,
    )
):
    """
    langpack CLI.
    """
    pass

def _version_callback(value: bool):
    if value:
        console = Console(log_path=False)
        console.print(f"[bold green]langpack[/] version [cyan]{get_package_version()}[/]")
        raise typer.Exit()

if __name__ == "__main__":
    app()
