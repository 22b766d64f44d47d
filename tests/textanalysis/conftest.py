"""
Shared fixtures for textanalysis tests.
"""

import hashlib
import pathlib
import zipfile
from typing import Dict

import pytest
import requests

from textanalysis.package_models import Package
from textanalysis.textanalysis_config import DownloaderConfig
from textanalysis.textanalysis_logger import TextAnalysisLogger
from textanalysis.textanalysis_utils import FileUtils


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(self, body: bytes, status_code: int = 200):
        self.body = body
        self.status_code = status_code

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i : i + chunk_size]


def md5_of(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


def make_zip(path: pathlib.Path, entries: Dict[str, bytes]) -> pathlib.Path:
    """Write a zip archive holding the given entries."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return path


def read_tree(root: pathlib.Path) -> Dict[str, bytes]:
    """Map every file below root to its bytes, keyed by posix relative path."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def logger():
    return TextAnalysisLogger()


@pytest.fixture
def config(tmp_path):
    """Config whose cache and install roots live under tmp_path."""
    return DownloaderConfig(
        temp_dir=str(tmp_path / "tmp"),
        install_dir=str(tmp_path / "storage" / "corpora"),
    )


@pytest.fixture
def corpus_entries():
    return {
        "test/README": b"test corpus\n",
        "test/data/words.txt": b"alpha\nbeta\ngamma\n",
        "test/data/nested/bin.dat": bytes(range(256)),
    }


@pytest.fixture
def corpus_zip(tmp_path, corpus_entries):
    remote = tmp_path / "remote"
    remote.mkdir()
    return make_zip(remote / "test.zip", corpus_entries)


@pytest.fixture
def zip_package(corpus_zip):
    return Package(
        id="test-corpus",
        url=corpus_zip.as_uri(),
        subdir="test",
        checksum=md5_of(corpus_zip.read_bytes()),
        unzip=True,
    )


@pytest.fixture
def fetch_counter(monkeypatch):
    """Count calls to FileUtils.download_file while still performing them."""
    calls = []
    original = FileUtils.download_file

    def counting_download_file(logger, url, target_path, **kwargs):
        calls.append(url)
        return original(logger, url, target_path, **kwargs)

    monkeypatch.setattr(FileUtils, "download_file", staticmethod(counting_download_file))
    return calls
