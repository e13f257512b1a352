# langpack/core/extractor.py

"""
Sequential archive extraction.

The base bundle is always the first artifact and lands directly in the
destination directory; every language pack goes to the optional packages
subdirectory. Existing files are overwritten. Nothing is rolled back
when a later step fails.
"""

from __future__ import annotations

import os
import stat
import zipfile
import zlib
from pathlib import Path
from typing import Callable, Optional, Sequence

from langpack.core.constants import OPTIONAL_PACKAGES_DIR
from langpack.core.exceptions import ExtractionError
from langpack.core.models import ArtifactRef, LogMessage, Phase, PhaseProgress, ProgressEvent

# ==============================================================
# ARCHIVE EXTRACTOR
# ==============================================================

class ArchiveExtractor:
    """
    Expands one zip archive into a directory, overwriting existing files.

    Unix permission bits stored in the archive are restored, and symlink
    members (the macOS runtime links `bin/python3.12` to `bin/python3`)
    are recreated as symlinks instead of small text files.
    """

    def extract(self, archive: Path, target_dir: Path) -> int:
        """Extract `archive` into `target_dir` and return the number of members written."""
        count = 0
        with zipfile.ZipFile(archive) as zf:
            for info in zf.infolist():
                mode = info.external_attr >> 16
                if stat.S_ISLNK(mode):
                    self._extract_symlink(zf, info, Path(target_dir))
                else:
                    written = zf.extract(info, target_dir)
                    if mode & 0o777 and not info.is_dir():
                        os.chmod(written, mode & 0o777)
                count += 1
        return count

    @staticmethod
    def _extract_symlink(zf: zipfile.ZipFile, info: zipfile.ZipInfo, target_dir: Path) -> None:
        link_target = zf.read(info).decode("utf-8")
        root = Path(os.path.abspath(target_dir))
        link_path = Path(os.path.normpath(root / info.filename))
        resolved = Path(os.path.normpath(link_path.parent / link_target))
        for candidate in (link_path, resolved):
            if candidate != root and root not in candidate.parents:
                raise zipfile.BadZipFile(f"symlink {info.filename} -> {link_target} escapes {root}")

        link_path.parent.mkdir(parents=True, exist_ok=True)
        if link_path.is_symlink() or link_path.is_file():
            link_path.unlink()
        os.symlink(link_target, link_path)

# ==============================================================
# EXTRACTION PIPELINE
# ==============================================================

class ExtractionPipeline:
    """Runs the extraction steps and reports step-level progress."""

    def __init__(self, emit: Callable[[ProgressEvent], None], extractor: Optional[ArchiveExtractor] = None):
        self.emit = emit
        self.extractor = extractor if extractor is not None else ArchiveExtractor()

    def extract(self, artifacts: Sequence[ArtifactRef], destination_dir: Path) -> None:
        """
        Extract all artifacts in order.

        A progress event with completed = step - 1 is emitted before each
        step and one with completed = total after the last step.

        Raises:
            ExtractionError: On the first failing step
        """
        if not artifacts:
            return
        if not artifacts[0].is_base:
            raise ExtractionError(artifacts[0].component_id, "the base bundle must be extracted first")

        destination_dir = Path(destination_dir)
        packages_dir = destination_dir / OPTIONAL_PACKAGES_DIR
        total = len(artifacts)

        try:
            destination_dir.mkdir(parents=True, exist_ok=True)
            packages_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ExtractionError(artifacts[0].component_id, f"cannot create {packages_dir}: {e}")

        for step, artifact in enumerate(artifacts):
            target = destination_dir if artifact.is_base else packages_dir
            self.emit(PhaseProgress(Phase.EXTRACT, artifact.component_id, step, total))
            self.emit(LogMessage(f"Extracting {artifact.filename} → {target}"))
            try:
                count = self.extractor.extract(artifact.staging_path, target)
            except (zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error, EOFError, OSError, RuntimeError) as e:
                raise ExtractionError(artifact.component_id, f"{type(e).__name__}: {e}")
            self.emit(LogMessage(f"Extracted {count} file(s) from {artifact.filename}"))

        self.emit(PhaseProgress(Phase.EXTRACT, artifacts[-1].component_id, total, total))
