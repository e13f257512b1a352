# tests/test_progress.py

"""Tests for the progress bus, the detail log and the rich progress view."""

import io
from typing import List

from rich.console import Console

from langpack.core.models import LogMessage, Phase, PhaseProgress, ProgressEvent
from langpack.core.progress import DetailLog, ProgressBus, RichProgressView


def test_detail_log_toggle_keeps_lines():
    log = DetailLog()
    log.append("first")
    log.append("second")

    assert not log.visible
    assert log.toggle() is True
    assert log.toggle() is False
    log.show()
    assert log.visible
    log.hide()
    assert log.lines == ["first", "second"]
    assert len(log) == 2


def test_detail_log_lines_is_a_copy():
    log = DetailLog()
    log.append("line")
    log.lines.append("tampered")
    assert log.lines == ["line"]


def test_bus_delivers_in_emission_order_to_every_subscriber():
    bus = ProgressBus()
    first: List[ProgressEvent] = []
    second: List[ProgressEvent] = []
    bus.subscribe(first.append)
    bus.subscribe(second.append)

    events = [
        LogMessage("Downloading a.zip (1/2)"),
        PhaseProgress(Phase.DOWNLOAD, "a.zip", 10, 20),
        PhaseProgress(Phase.DOWNLOAD, "a.zip", 20, 20),
        LogMessage("Downloaded a.zip (20 bytes)"),
    ]
    for event in events:
        bus.emit(event)

    assert first == events
    assert second == events
    assert bus.detail_log.lines == ["Downloading a.zip (1/2)", "Downloaded a.zip (20 bytes)"]


def test_bus_logs_even_without_subscribers():
    log = DetailLog()
    bus = ProgressBus(log)
    bus.message("hello")
    assert log.lines == ["hello"]


def _console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=120, log_path=False)


def test_view_prints_log_lines_only_when_details_are_visible():
    console = _console()
    log = DetailLog(visible=False)
    bus = ProgressBus(log)

    with RichProgressView(log, console=console) as view:
        bus.subscribe(view)
        bus.message("hidden line")
        log.show()
        bus.message("visible line")

    output = console.file.getvalue()
    assert "visible line" in output
    assert "hidden line" not in output
    assert log.lines == ["hidden line", "visible line"]


def test_view_switches_from_download_to_extract_bars():
    console = _console()
    log = DetailLog()

    with RichProgressView(log, console=console) as view:
        view(PhaseProgress(Phase.DOWNLOAD, "base.zip", 5, 10))
        view(PhaseProgress(Phase.DOWNLOAD, "base.zip", 10, 10))
        assert len(view._download_progress.tasks) == 1

        view(PhaseProgress(Phase.EXTRACT, "base", 0, 2))
        view(PhaseProgress(Phase.EXTRACT, "zh", 1, 2))
        view(PhaseProgress(Phase.EXTRACT, "zh", 2, 2))

    [task] = view.progress.tasks
    assert task.completed == 2
    assert task.total == 2
    assert task.finished
