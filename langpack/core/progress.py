# langpack/core/progress.py

"""
Progress and log sink.

Pipelines emit ProgressEvent values into a ProgressBus. The bus keeps an
owned DetailLog of every text line of the run and forwards each event,
in emission order and on the caller's thread, to its subscribers. The
terminal rendering (RichProgressView) is just one such subscriber.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from rich.panel import Panel
from rich.progress import (
    BarColumn,
    DownloadColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TransferSpeedColumn,
)
from rich.text import Text

from langpack.core.console import Console, ConsoleAware
from langpack.core.models import LogMessage, Phase, PhaseProgress, ProgressEvent

Subscriber = Callable[[ProgressEvent], None]

# ==============================================================
# DETAIL LOG
# ==============================================================

class DetailLog:
    """Ordered log lines of one run, with a visibility flag for the detail view."""

    def __init__(self, visible: bool = False):
        self.visible: bool = visible
        self._lines: List[str] = []

    def append(self, line: str) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def toggle(self) -> bool:
        self.visible = not self.visible
        return self.visible

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def render(self, title: str = "Details") -> Panel:
        return Panel(Text("\n".join(self._lines)), title=title, border_style="dim")

    def __len__(self) -> int:
        return len(self._lines)

# ==============================================================
# PROGRESS BUS
# ==============================================================

class ProgressBus:
    """Fan-out of progress events to subscribers."""

    def __init__(self, detail_log: Optional[DetailLog] = None):
        self.detail_log: DetailLog = detail_log if detail_log is not None else DetailLog()
        self._subscribers: List[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def emit(self, event: ProgressEvent) -> None:
        if isinstance(event, LogMessage):
            self.detail_log.append(event.message)
        for subscriber in self._subscribers:
            subscriber(event)

    def message(self, text: str) -> None:
        self.emit(LogMessage(text))

# ==============================================================
# RICH RENDERING
# ==============================================================

class RichProgressView(ConsoleAware):
    """
    Renders the event stream as a rich progress bar.

    One bar per download artifact (bytes) and a single bar for the
    extraction steps. Log lines are printed only while the detail view
    is visible; they are always kept in the DetailLog regardless.
    """

    def __init__(self, detail_log: DetailLog, console: Optional[Console] = None, verbose: bool = False):
        super().__init__(console, verbose)
        self.detail_log = detail_log
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            console=console, # type: ignore
            transient=False,
        )
        self._download_progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            console=console, # type: ignore
            transient=False,
        )
        self._tasks: Dict[str, TaskID] = {}
        self._extract_task: Optional[TaskID] = None

    def __enter__(self) -> "RichProgressView":
        self._download_progress.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self._download_progress.stop()
        self.progress.stop()

    def __call__(self, event: ProgressEvent) -> None:
        if isinstance(event, LogMessage):
            if self.detail_log.visible:
                self._active().console.log(f"[dim]{event.message}[/dim]")
            return

        if event.phase == Phase.DOWNLOAD:
            self._on_download(event)
        else:
            self._on_extract(event)

    def _active(self) -> Progress:
        return self.progress if self._extract_task is not None else self._download_progress

    def _on_download(self, event: PhaseProgress) -> None:
        task = self._tasks.get(event.unit_label)
        if task is None:
            task = self._download_progress.add_task(f"↓ {event.unit_label}", total=event.total)
            self._tasks[event.unit_label] = task
        self._download_progress.update(task, completed=event.completed, total=event.total)

    def _on_extract(self, event: PhaseProgress) -> None:
        if self._extract_task is None:
            self._download_progress.stop()
            self.progress.start()
            self._extract_task = self.progress.add_task("Extracting", total=event.total)

        if event.completed < event.total:
            description = f"Extracting [cyan]{event.unit_label}[/] ({event.completed + 1}/{event.total})"
        else:
            description = "[green]Extracted[/]"
        self.progress.update(
            self._extract_task,
            completed=event.completed,
            total=event.total,
            description=description,
        )
