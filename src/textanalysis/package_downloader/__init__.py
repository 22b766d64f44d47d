"""
Package downloader.

This package handles:
1. Laying out the download cache and install directories
2. Skipping packages whose cached artifact already matches its checksum
3. Downloading and verifying artifacts
4. Extracting archives or copying file trees into the install directory
"""

from .downloader import PackageDownloader, PackageInstaller
from .install_state import InstallState, InstallStatus

__all__ = ["PackageDownloader", "PackageInstaller", "InstallState", "InstallStatus"]
