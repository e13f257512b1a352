"""Pytest fixtures for langpack tests."""

import io
import struct
import zipfile
from pathlib import Path
from typing import Dict, List, Optional

import httpx
import pytest

from langpack.core.artifacts import base_bundle_filename, lang_pack_filename
from langpack.core.extractor import ArchiveExtractor

PLATFORM = "windows-x64"
BASE_URL = "https://example.test/releases/download/v1.4.0"


def make_zip(files: Dict[str, bytes], modes: Optional[Dict[str, int]] = None,
             compression: int = zipfile.ZIP_STORED) -> bytes:
    """Build an in-memory zip archive. `modes` maps member names to st_mode bits."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, data in files.items():
            info = zipfile.ZipInfo(name)
            info.compress_type = compression
            if modes and name in modes:
                info.external_attr = modes[name] << 16
            zf.writestr(info, data)
    return buffer.getvalue()


def corrupt_deflate_zip(files: Dict[str, bytes]) -> bytes:
    """Deflated archive whose first member has a broken compressed stream."""
    data = bytearray(make_zip(files, compression=zipfile.ZIP_DEFLATED))
    name_len, extra_len = struct.unpack("<HH", data[26:30])
    start = 30 + name_len + extra_len
    # BFINAL=1 with the reserved block type
    data[start:start + 4] = b"\xff\xff\xff\xff"
    return bytes(data)


class ArtifactHost:
    """Fake release host served through httpx.MockTransport."""

    def __init__(self):
        self.files: Dict[str, bytes] = {}
        self.status_overrides: Dict[str, int] = {}
        self.requests: List[str] = []
        self.omit_length: bool = False

    def publish_release(self, codes: List[str], platform: str = PLATFORM) -> None:
        self.files[base_bundle_filename(platform)] = make_zip({
            "python.exe": b"MZ-fake-runtime",
            "Lib/site-packages/libretranslate/__init__.py": b"",
        })
        for code in codes:
            self.files[lang_pack_filename(code, platform)] = make_zip({
                f"translate-en_{code}/metadata.json": f'{{"to_code": "{code}"}}'.encode(),
                f"translate-en_{code}/model/model.bin": b"\x00" * 256,
            })

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(str(request.url))
        name = request.url.path.rsplit("/", 1)[-1]
        if name in self.status_overrides:
            return httpx.Response(self.status_overrides[name])
        if name not in self.files:
            return httpx.Response(404)

        body = self.files[name]
        if self.omit_length:
            def chunks():
                yield body[: len(body) // 2]
                yield body[len(body) // 2:]
            return httpx.Response(200, content=chunks())
        return httpx.Response(200, content=body)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


class CountingExtractor(ArchiveExtractor):
    """Real extractor that records every call."""

    def __init__(self):
        self.calls: List[tuple[Path, Path]] = []

    def extract(self, archive: Path, target_dir: Path) -> int:
        self.calls.append((archive, target_dir))
        return super().extract(archive, target_dir)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep ~/.langpack and LANGPACK_* variables away from the real user."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    for var in ("LANGPACK_RELEASE_HOST", "LANGPACK_VERSION", "LANGPACK_DESTINATION"):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def host() -> ArtifactHost:
    h = ArtifactHost()
    h.publish_release(["id", "zh", "ja", "ko", "es", "fr", "de", "pt", "ru", "ar"])
    return h


@pytest.fixture
def extractor() -> CountingExtractor:
    return CountingExtractor()


@pytest.fixture
def dest(tmp_path: Path) -> Path:
    return tmp_path / "app" / "libretranslate"
