# tests/test_manifest_guard.py

"""Tests for the manifest writer/reader, the completion marker check and purge."""

from pathlib import Path

import pytest

from langpack.core.catalog import default_catalog
from langpack.core.exceptions import ManifestWriteError, ProvisioningError, UnsupportedPlatformError
from langpack.core.guard import completion_marker, is_already_installed
from langpack.core.manifest import InstallManifest, manifest_ids, read_manifest
from langpack.core.purge import purge_installation
from langpack.core.selection import Selection

# --------------------------------------------------------------------------- #
# Manifest
# --------------------------------------------------------------------------- #
def test_manifest_ids_base_first_in_catalog_order():
    selection = Selection(default_catalog(), defaults=False)
    selection.select(["es", "zh"])

    assert manifest_ids(selection.snapshot()) == ["en", "id", "zh", "es"]


def test_write_and_read_manifest(tmp_path: Path):
    manifest = InstallManifest(tmp_path)
    content = manifest.write(["en", "id", "zh", "es"])

    assert content == "en,id,zh,es"
    assert (tmp_path / "installed-languages.txt").read_text() == "en,id,zh,es"
    assert manifest.read() == ["en", "id", "zh", "es"]


def test_write_overwrites_previous_content(tmp_path: Path):
    (tmp_path / "installed-languages.txt").write_text("en,id,zh,ja,es,ar,ko")
    InstallManifest(tmp_path).write(["en", "id"])
    assert (tmp_path / "installed-languages.txt").read_text() == "en,id"


@pytest.mark.parametrize("content", [None, "", "  \n"])
def test_read_missing_or_blank_manifest(tmp_path: Path, content):
    if content is not None:
        (tmp_path / "installed-languages.txt").write_text(content)
    assert InstallManifest(tmp_path).read() is None


def test_read_trims_whitespace(tmp_path: Path):
    (tmp_path / "installed-languages.txt").write_text(" en, id ,zh\n")
    assert read_manifest(tmp_path) == ["en", "id", "zh"]


def test_write_failure(tmp_path: Path):
    (tmp_path / "installed-languages.txt").mkdir()
    with pytest.raises(ManifestWriteError) as exc:
        InstallManifest(tmp_path).write(["en", "id"])
    assert "installed-languages.txt" in exc.value.path

# --------------------------------------------------------------------------- #
# Completion marker
# --------------------------------------------------------------------------- #
def test_marker_presence_is_the_only_signal(tmp_path: Path):
    assert not is_already_installed(tmp_path, "windows-x64")

    # a manifest alone does not count
    (tmp_path / "installed-languages.txt").write_text("en,id")
    assert not is_already_installed(tmp_path, "windows-x64")

    (tmp_path / "python.exe").write_bytes(b"")
    assert is_already_installed(tmp_path, "windows-x64")
    assert not is_already_installed(tmp_path, "macos-arm64")

    # the macOS runtime entry point lives in bin/
    (tmp_path / "python3").write_bytes(b"")
    assert not is_already_installed(tmp_path, "macos-arm64")
    (tmp_path / "bin").mkdir()
    (tmp_path / "bin" / "python3").write_bytes(b"")
    assert is_already_installed(tmp_path, "macos-arm64")


def test_marker_per_platform(tmp_path: Path):
    assert completion_marker(tmp_path, "windows-x64") == tmp_path / "python.exe"
    assert completion_marker(tmp_path, "macos-arm64") == tmp_path / "bin" / "python3"
    with pytest.raises(UnsupportedPlatformError):
        completion_marker(tmp_path, "linux-riscv")

# --------------------------------------------------------------------------- #
# Purge
# --------------------------------------------------------------------------- #
def test_purge_removes_tree(tmp_path: Path):
    target = tmp_path / "libretranslate"
    (target / "argos-packages" / "translate-en_zh").mkdir(parents=True)
    (target / "python.exe").write_bytes(b"")

    assert purge_installation(target) is True
    assert not target.exists()


def test_purge_missing_directory(tmp_path: Path):
    assert purge_installation(tmp_path / "nothing-here") is False


def test_purge_refuses_home(isolated_home: Path):
    with pytest.raises(ProvisioningError):
        purge_installation(isolated_home)
    assert isolated_home.exists()


def test_purge_refuses_files(tmp_path: Path):
    target = tmp_path / "file.txt"
    target.write_text("x")
    with pytest.raises(ProvisioningError):
        purge_installation(target)
