# langpack/core/orchestrator.py

"""
Provisioning orchestrator.

A run moves through

    IDLE → SELECTING → DOWNLOADING → EXTRACTING → MANIFEST_WRITING → DONE

and may fall into FAILED from any state between SELECTING and
MANIFEST_WRITING. DONE and FAILED are terminal; there is no retry. When
the completion marker is already present the run goes SELECTING → DONE
without touching the network or the destination directory.

Everything runs on the caller's thread, one stage after the other.
"""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Union

import httpx

from langpack.core.artifacts import build_artifact_refs
from langpack.core.downloader import ArtifactDownloader
from langpack.core.exceptions import (
    InvalidStateTransitionError,
    LangPackError,
    ManifestWriteError,
    ProvisioningError,
)
from langpack.core.extractor import ArchiveExtractor, ExtractionPipeline
from langpack.core.guard import completion_marker, is_already_installed
from langpack.core.manifest import InstallManifest, manifest_ids
from langpack.core.models import ProvisioningResult, RunState
from langpack.core.progress import ProgressBus, Subscriber
from langpack.core.selection import Selection

# A base URL, or a callable producing one once the run knows it must download
BaseUrl = Union[str, Callable[[], str]]

_TRANSITIONS: Dict[RunState, FrozenSet[RunState]] = {
    RunState.IDLE: frozenset({RunState.SELECTING}),
    RunState.SELECTING: frozenset({RunState.DOWNLOADING, RunState.DONE, RunState.FAILED}),
    RunState.DOWNLOADING: frozenset({RunState.EXTRACTING, RunState.FAILED}),
    RunState.EXTRACTING: frozenset({RunState.MANIFEST_WRITING, RunState.FAILED}),
    RunState.MANIFEST_WRITING: frozenset({RunState.DONE, RunState.FAILED}),
    RunState.DONE: frozenset(),
    RunState.FAILED: frozenset(),
}

# ==============================================================
# PROVISIONING RUN
# ==============================================================

class ProvisioningRun:
    """
    One provisioning attempt against one destination directory.

    A run object is single use. Concurrent runs against the same
    destination are the caller's responsibility to avoid.

    Attributes:
        state: Current RunState
        failure: The error that moved the run to FAILED, if any
        bus: Progress bus observed by the subscribers
    """

    def __init__(self, destination_dir: Path, base_url: BaseUrl, platform: str,
                 bus: Optional[ProgressBus] = None,
                 client: Optional[httpx.Client] = None,
                 extractor: Optional[ArchiveExtractor] = None,
                 staging_dir: Optional[Path] = None):
        self.destination_dir: Path = Path(destination_dir)
        self._base_url: BaseUrl = base_url
        self.platform: str = platform
        self.bus: ProgressBus = bus if bus is not None else ProgressBus()
        self.client = client
        self.extractor = extractor
        self.staging_dir: Optional[Path] = Path(staging_dir) if staging_dir else None
        self.state: RunState = RunState.IDLE
        self.failure: Optional[LangPackError] = None

    def _transition(self, target: RunState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise InvalidStateTransitionError(self.state.value, target.value)
        self.state = target

    def _fail(self, error: LangPackError) -> None:
        self.failure = error
        self._transition(RunState.FAILED)
        self.bus.message(f"Failed: {error}")

    def run(self, selection: Selection) -> ProvisioningResult:
        """
        Drive the whole pipeline.

        Raises:
            EmptySelectionError, DownloadError, ExtractionError: after the run entered FAILED
            ProvisioningError: wrapping any other error, also after entering FAILED
            InvalidStateTransitionError: when the run object is reused
        """
        self._transition(RunState.SELECTING)
        try:
            components = selection.snapshot()
            if is_already_installed(self.destination_dir, self.platform):
                marker = completion_marker(self.destination_dir, self.platform)
                self.bus.message(f"Existing installation found ({marker}), skipping download and extraction")
                self._transition(RunState.DONE)
                return ProvisioningResult(state=self.state, skipped=True)

            base_url = self._base_url() if callable(self._base_url) else self._base_url
            installed_ids = manifest_ids(components)
            owns_staging = self.staging_dir is None
            staging_dir = Path(tempfile.mkdtemp(prefix="langpack-")) if owns_staging else self.staging_dir
            artifacts = build_artifact_refs(components, base_url, self.platform, staging_dir) # type: ignore
            self.bus.message(
                f"Provisioning {', '.join(installed_ids)} from {base_url} into {self.destination_dir}"
            )

            self._transition(RunState.DOWNLOADING)
            ArtifactDownloader(self.bus.emit, client=self.client).download(artifacts)

            self._transition(RunState.EXTRACTING)
            ExtractionPipeline(self.bus.emit, self.extractor).extract(artifacts, self.destination_dir)
            if owns_staging:
                shutil.rmtree(staging_dir, ignore_errors=True) # type: ignore

            self._transition(RunState.MANIFEST_WRITING)
        except InvalidStateTransitionError:
            raise
        except LangPackError as e:
            self._fail(e)
            raise
        except Exception as e:
            error = ProvisioningError(f"{self.state.value} failed: {type(e).__name__}: {e}")
            self._fail(error)
            raise error from e

        warning: Optional[ManifestWriteError] = None
        try:
            content = InstallManifest(self.destination_dir).write(installed_ids)
            self.bus.message(f"Wrote language manifest: {content}")
        except ManifestWriteError as e:
            warning = e
            self.bus.message(f"Warning: {e}")

        self._transition(RunState.DONE)
        return ProvisioningResult(state=self.state, installed_ids=installed_ids, warning=warning)


def run_provisioning(selection: Selection, destination_dir: Path, base_url: BaseUrl, platform: str,
                     subscribers: Iterable[Subscriber] = (),
                     bus: Optional[ProgressBus] = None,
                     client: Optional[httpx.Client] = None,
                     extractor: Optional[ArchiveExtractor] = None,
                     staging_dir: Optional[Path] = None) -> ProvisioningResult:
    """Create a fresh run, attach the subscribers and execute it."""
    bus = bus if bus is not None else ProgressBus()
    for subscriber in subscribers:
        bus.subscribe(subscriber)

    provisioning_run = ProvisioningRun(
        destination_dir, base_url, platform,
        bus=bus, client=client, extractor=extractor, staging_dir=staging_dir,
    )
    return provisioning_run.run(selection)
