# ==============================================================
# CONSTANTS
# ==============================================================
from pathlib import Path


BASE_LANGUAGE = "en"
BASE_ARTIFACT_ID = "base"
BASE_BUNDLE_NAME = "libretranslate-embedded"
LANG_PACK_PREFIX = f"argos-lang-{BASE_LANGUAGE}"

OPTIONAL_PACKAGES_DIR = Path("argos-packages")
MANIFEST_FILE = Path("installed-languages.txt")

DEFAULT_RELEASE_HOST = "https://github.com/amaralkaff/screen-translate/releases/download"
LATEST_RELEASE_API = "https://api.github.com/repos/amaralkaff/screen-translate/releases/latest"

PLATFORM_WINDOWS = "windows-x64"
PLATFORM_MACOS = "macos-arm64"
SUPPORTED_PLATFORMS = (PLATFORM_WINDOWS, PLATFORM_MACOS)

# Entry point of the bundled runtime, relative to the destination dir
COMPLETION_MARKERS = {
    PLATFORM_WINDOWS: Path("python.exe"),
    PLATFORM_MACOS: Path("bin") / "python3",
}

DOWNLOAD_CHUNK_SIZE = 64 * 1024
DOWNLOAD_TIMEOUT = 600.0
