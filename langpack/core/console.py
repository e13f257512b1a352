# langpack/core/console.py

"""
Console plumbing shared by the commands and the progress view.

Anything exposing rich's `print`/`log` surface can be handed around; the
commands always pass a `rich.console.Console(log_path=False)`.
"""

from typing import Any, Optional, Protocol


class Console(Protocol):
    def print(self, *objects: Any) -> None:
        ...

    def log(self, *objects: Any) -> None:
        ...


class ConsoleAware:
    """Optional console output, with diagnostics gated on `verbose`."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console
        self.verbose = verbose

    def print(self, msg: Any) -> None:
        if self.console is not None:
            self.console.print(msg)

    def log(self, msg: str) -> None:
        """Diagnostic line, shown with --verbose only."""
        if self.console is not None and self.verbose:
            self.console.log(f"[dim]{msg}[/dim]")

    def field(self, label: str, value: Any, style: str = "cyan") -> None:
        """Indented `Label: value` line of the status and config reports."""
        self.print(f"  {label}: [{style}]{value}[/{style}]")

    def warn(self, msg: str) -> None:
        self.print(f"[bold yellow]⚠️  {msg}[/bold yellow]")

    def fail(self, title: str, error: BaseException) -> None:
        """Red error line plus trailing blank line, printed right before exiting 1."""
        self.print(f"\n[bold red]❌ {title}:[/bold red] {error}")
        self.print("")
