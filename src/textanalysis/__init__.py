"""
textanalysis: downloads and installs corpus data packages, and provides
simple delimiter based tokenizers.
"""

from textanalysis.package_downloader import (
    InstallState,
    InstallStatus,
    PackageDownloader,
    PackageInstaller,
)
from textanalysis.package_models import Package
from textanalysis.textanalysis_config import DownloaderConfig
from textanalysis.textanalysis_exceptions import (
    ArchiveOpenError,
    ChecksumMismatchError,
    InstallIOError,
    NetworkError,
    TextAnalysisException,
)
from textanalysis.textanalysis_logger import TextAnalysisLogger
from textanalysis.tokenizers import tokenize, tokenize_sentences

__all__ = [
    "Package",
    "PackageDownloader",
    "PackageInstaller",
    "InstallState",
    "InstallStatus",
    "DownloaderConfig",
    "TextAnalysisLogger",
    "TextAnalysisException",
    "ChecksumMismatchError",
    "ArchiveOpenError",
    "InstallIOError",
    "NetworkError",
    "tokenize",
    "tokenize_sentences",
]
