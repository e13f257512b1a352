# langpack/core/global_config.py

import os
import sys
from pathlib import Path
from typing import Optional, Any, List

import yaml

from langpack.core.constants import DEFAULT_RELEASE_HOST
from langpack.core.exceptions import ConfigError

DEFAULT_VERSION = "latest"
APP_DIR_NAME = "screen-translate"


def config_path() -> Path:
    return Path.home() / ".langpack" / "config.yaml"


def load_global_config() -> Optional[dict]:
    """Load config from ~/.langpack/config.yaml"""
    path = config_path()

    if not path.exists():
        return None

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(str(path), str(e))

    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigError(str(path), "top level must be a mapping")
    return data


def _section(name: str) -> dict:
    config = load_global_config() or {}
    section = config.get(name)
    return section if isinstance(section, dict) else {}


def set_global(key: str, value: Any):
    """Set a top-level section in ~/.langpack/config.yaml"""
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    config = load_global_config() or {}
    config[key] = value

    path.write_text(yaml.dump(config, default_flow_style=False, sort_keys=False), encoding="utf-8")


def get_release_host() -> str:
    """
    Get artifact host root from:
    1. Environment variable LANGPACK_RELEASE_HOST
    2. Global config ~/.langpack/config.yaml
    3. Default GitHub releases location
    """
    if env_host := os.getenv("LANGPACK_RELEASE_HOST"):
        return env_host

    return _section("release").get("host") or DEFAULT_RELEASE_HOST


def get_release_version() -> str:
    if env_version := os.getenv("LANGPACK_VERSION"):
        return env_version

    return str(_section("release").get("version") or DEFAULT_VERSION)


def app_dir() -> Path:
    """Per-user application directory of the desktop app."""
    if sys.platform.startswith("win"):
        appdata = os.getenv("APPDATA")
        return Path(appdata if appdata else ".") / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path.home() / ".local" / "share" / APP_DIR_NAME


def get_destination_dir() -> Path:
    if env_dest := os.getenv("LANGPACK_DESTINATION"):
        return Path(env_dest)

    configured = _section("defaults").get("destination")
    if configured:
        return Path(configured).expanduser()
    return app_dir() / "libretranslate"


def get_default_languages() -> Optional[List[str]]:
    """Configured default selection, or None to use the catalog defaults."""
    languages = _section("defaults").get("languages")
    if languages is None:
        return None
    if isinstance(languages, str):
        languages = languages.split(",")
    return [str(code).strip() for code in languages if str(code).strip()]


def get_catalog_file() -> Optional[Path]:
    catalog_file = _section("defaults").get("catalog-file")
    return Path(catalog_file).expanduser() if catalog_file else None


def get_global_default() -> dict:
    return _section("defaults")


def set_global_default(key: str, value: Any):
    defaults = get_global_default()
    defaults[key] = value
    set_global("defaults", defaults)


def set_global_release(host: Optional[str] = None, version: Optional[str] = None):
    release = _section("release")
    if host:
        release["host"] = host
    if version:
        release["version"] = version
    set_global("release", release)
