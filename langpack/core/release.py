# langpack/core/release.py

"""
Release resolution: which version to provision and for which platform.
"""

import platform as _platform
import sys
from typing import Optional

import httpx
from packaging.version import InvalidVersion, Version

from langpack import __version__
from langpack.core.constants import (
    LATEST_RELEASE_API,
    PLATFORM_MACOS,
    PLATFORM_WINDOWS,
    SUPPORTED_PLATFORMS,
)
from langpack.core.exceptions import ReleaseLookupError, UnsupportedPlatformError


def parse_version(text: str) -> Version:
    """Parse `1.4.0` or `v1.4.0`."""
    cleaned = text.strip()
    if cleaned[:1] in ("v", "V"):
        cleaned = cleaned[1:]
    try:
        return Version(cleaned)
    except InvalidVersion:
        raise ReleaseLookupError(f"invalid release version '{text}'")


def versioned_base_url(release_host: str, version: str) -> str:
    """`{host}/v{version}`, the directory holding every artifact of one release."""
    return f"{release_host.rstrip('/')}/v{parse_version(version)}"


def fetch_latest_version(api_url: str = LATEST_RELEASE_API, client: Optional[httpx.Client] = None) -> str:
    """Ask the release API for the latest tag and return it without the `v` prefix."""
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": f"langpack/{__version__}",
    }
    try:
        if client is not None:
            response = client.get(api_url, headers=headers)
        else:
            response = httpx.get(api_url, headers=headers, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        raise ReleaseLookupError(f"HTTP {e.response.status_code} from {api_url}")
    except httpx.HTTPError as e:
        raise ReleaseLookupError(f"cannot reach {api_url}: {e}")
    except ValueError:
        raise ReleaseLookupError(f"invalid JSON from {api_url}")

    tag = data.get("tag_name") if isinstance(data, dict) else None
    if not tag:
        raise ReleaseLookupError("missing tag_name in release")
    return str(parse_version(tag))


def resolve_version(requested: str, client: Optional[httpx.Client] = None) -> str:
    """Turn `latest` into a concrete version; validate anything else."""
    if requested.strip().lower() == "latest":
        return fetch_latest_version(client=client)
    return str(parse_version(requested))


def detect_platform() -> str:
    machine = _platform.machine().lower()
    if sys.platform.startswith("win") and machine in ("amd64", "x86_64"):
        return PLATFORM_WINDOWS
    if sys.platform == "darwin" and machine in ("arm64", "aarch64"):
        return PLATFORM_MACOS
    raise UnsupportedPlatformError(f"{sys.platform}-{machine}", list(SUPPORTED_PLATFORMS))
