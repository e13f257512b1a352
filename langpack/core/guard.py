# langpack/core/guard.py

from pathlib import Path

from langpack.core.constants import COMPLETION_MARKERS, SUPPORTED_PLATFORMS
from langpack.core.exceptions import UnsupportedPlatformError


def completion_marker(destination_dir: Path, platform: str) -> Path:
    """Path of the runtime entry point whose presence marks a finished install."""
    marker = COMPLETION_MARKERS.get(platform)
    if marker is None:
        raise UnsupportedPlatformError(platform, list(SUPPORTED_PLATFORMS))
    return Path(destination_dir) / marker


def is_already_installed(destination_dir: Path, platform: str) -> bool:
    """
    Cheap existence check of the completion marker.

    This does not look at versions or at the manifest: a stale install
    that still has the marker counts as complete.
    """
    return completion_marker(destination_dir, platform).is_file()
