# langpack/core/downloader.py

"""
Sequential artifact downloader.

Artifacts are fetched one at a time in the given order. The first
failure aborts the pipeline: later artifacts are not attempted and
nothing is retried. Files that were already staged stay on disk.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import httpx

from langpack import __version__
from langpack.core.constants import DOWNLOAD_CHUNK_SIZE, DOWNLOAD_TIMEOUT
from langpack.core.exceptions import DownloadError
from langpack.core.models import ArtifactRef, LogMessage, Phase, PhaseProgress, ProgressEvent

# ==============================================================
# DOWNLOADER CLASS
# ==============================================================

class ArtifactDownloader:
    """
    Fetches ArtifactRefs over HTTP into their staging paths.

    Attributes:
        emit: Progress sink callback
        client: httpx client; a private one is created when not given
        chunk_size: Read size used for the streamed body
    """

    def __init__(self, emit: Callable[[ProgressEvent], None],
                 client: Optional[httpx.Client] = None,
                 chunk_size: int = DOWNLOAD_CHUNK_SIZE):
        self.emit = emit
        self.client = client
        self.chunk_size = chunk_size

    def download(self, artifacts: Sequence[ArtifactRef]) -> None:
        """
        Download every artifact, in order.

        Raises:
            DownloadError: On transport errors, non-2xx status or write failures
        """
        if self.client is not None:
            self._download_all(self.client, artifacts)
            return

        with httpx.Client(
            follow_redirects=True,
            timeout=DOWNLOAD_TIMEOUT,
            headers={"User-Agent": f"langpack/{__version__}"},
        ) as client:
            self._download_all(client, artifacts)

    def _download_all(self, client: httpx.Client, artifacts: Sequence[ArtifactRef]) -> None:
        for index, artifact in enumerate(artifacts, start=1):
            self.emit(LogMessage(f"Downloading {artifact.filename} ({index}/{len(artifacts)})"))
            self._download_one(client, artifact)

    def _download_one(self, client: httpx.Client, artifact: ArtifactRef) -> None:
        try:
            artifact.staging_path.parent.mkdir(parents=True, exist_ok=True)
            with client.stream("GET", artifact.url) as response:
                response.raise_for_status()
                # decoded chunks cannot be measured against an encoded Content-Length
                total = None if response.headers.get("content-encoding") else self._content_length(response)
                if total is None:
                    self.emit(LogMessage(f"{artifact.filename}: size unknown, downloading..."))

                received = 0
                with open(artifact.staging_path, "wb") as f:
                    for chunk in response.iter_bytes(chunk_size=self.chunk_size):
                        if not chunk:
                            continue
                        f.write(chunk)
                        received += len(chunk)
                        if total is not None:
                            self.emit(PhaseProgress(Phase.DOWNLOAD, artifact.filename, received, total))

        except httpx.HTTPStatusError as e:
            raise DownloadError(
                artifact.component_id,
                f"HTTP {e.response.status_code} {e.response.reason_phrase} for {artifact.url}"
            )
        except httpx.HTTPError as e:
            raise DownloadError(artifact.component_id, f"{type(e).__name__}: {e}")
        except OSError as e:
            raise DownloadError(artifact.component_id, f"cannot write {artifact.staging_path}: {e}")

        self.emit(LogMessage(f"Downloaded {artifact.filename} ({received} bytes)"))

    @staticmethod
    def _content_length(response: httpx.Response) -> Optional[int]:
        value = response.headers.get("content-length")
        if value is None:
            return None
        try:
            total = int(value)
        except ValueError:
            return None
        return total if total > 0 else None
