# langpack/core/artifacts.py

"""
Artifact naming on the release host.

    {base_url}/libretranslate-embedded-{platform}.zip
    {base_url}/argos-lang-en-{code}-{platform}.zip
"""

from pathlib import Path
from typing import Iterable, List

from langpack.core.constants import (
    BASE_ARTIFACT_ID,
    BASE_BUNDLE_NAME,
    LANG_PACK_PREFIX,
    SUPPORTED_PLATFORMS,
)
from langpack.core.models import ArtifactRef, Component
from langpack.core.exceptions import UnsupportedPlatformError


def base_bundle_filename(platform: str) -> str:
    return f"{BASE_BUNDLE_NAME}-{platform}.zip"


def lang_pack_filename(code: str, platform: str) -> str:
    return f"{LANG_PACK_PREFIX}-{code}-{platform}.zip"


def build_artifact_refs(
    components: Iterable[Component],
    base_url: str,
    platform: str,
    staging_dir: Path
) -> List[ArtifactRef]:
    """Base bundle first, then one pack per selected component in the given order."""
    if platform not in SUPPORTED_PLATFORMS:
        raise UnsupportedPlatformError(platform, list(SUPPORTED_PLATFORMS))

    base_url = base_url.rstrip("/")
    staging_dir = Path(staging_dir)

    names = [(BASE_ARTIFACT_ID, base_bundle_filename(platform))]
    names.extend((c.id, lang_pack_filename(c.id, platform)) for c in components)

    return [
        ArtifactRef(
            component_id=component_id,
            url=f"{base_url}/{filename}",
            staging_path=staging_dir / filename,
        )
        for component_id, filename in names
    ]
