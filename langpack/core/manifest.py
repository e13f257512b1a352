# langpack/core/manifest.py

from typing import Iterable, List, Optional
from pathlib import Path

from langpack.core.constants import BASE_LANGUAGE, MANIFEST_FILE
from langpack.core.models import Component
from langpack.core.exceptions import ManifestWriteError

# ==============================================================
# INSTALLED LANGUAGES MANIFEST
# ==============================================================

def manifest_ids(components: Iterable[Component]) -> List[str]:
    """Base language first, then the selected components in the order given."""
    ids = [BASE_LANGUAGE]
    ids.extend(c.id for c in components if c.id != BASE_LANGUAGE)
    return ids


class InstallManifest:
    """
    Advisory record of installed languages, e.g. `en,id,zh,es`.

    The runtime reads it to decide which languages to load. It is not a
    completion marker: see guard.is_already_installed.
    """

    def __init__(self, destination_dir: str | Path):
        self.destination_dir: Path = Path(destination_dir)
        self.path: Path = self.destination_dir / MANIFEST_FILE

    def write(self, installed_ids: Iterable[str]) -> str:
        """Overwrite the manifest with `installed_ids` and return the written line."""
        content = ",".join(installed_ids)
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ManifestWriteError(str(self.path), str(e))
        return content

    def read(self) -> Optional[List[str]]:
        """Installed ids, or None when the manifest is missing, unreadable or blank."""
        try:
            content = self.path.read_text(encoding="utf-8").strip()
        except OSError:
            return None
        if not content:
            return None
        return [code.strip() for code in content.split(",") if code.strip()]


def read_manifest(destination_dir: str | Path) -> Optional[List[str]]:
    """Installed ids recorded under `destination_dir`, or None."""
    return InstallManifest(destination_dir).read()
