"""
Package downloader implementation.

Handles downloading, verifying and installing data packages into a local
corpus directory.
"""

import contextlib
import logging
import os
from typing import Dict, Iterable, Iterator, List, Optional

from filelock import FileLock, Timeout

from textanalysis.package_downloader.install_state import InstallState, InstallStatus
from textanalysis.package_models import Package
from textanalysis.textanalysis_config import DownloaderConfig
from textanalysis.textanalysis_exceptions import (
    ChecksumMismatchError,
    InstallIOError,
    TextAnalysisException,
)
from textanalysis.textanalysis_logger import TextAnalysisLogger
from textanalysis.textanalysis_utils import FileUtils


class PackageDownloader:
    """
    Downloads a single package and installs it into the install directory.

    The artifact is cached at <cache root>/<subdir>/<url basename>. A cached
    artifact whose checksum matches the package is reused without touching
    the network or the install directory.
    """

    def __init__(
        self,
        package: Package,
        config: Optional[DownloaderConfig] = None,
        logger: Optional[TextAnalysisLogger] = None,
    ):
        """
        Initialize the package downloader.

        Args:
            package: The package descriptor to install
            config: Downloader configuration, defaults are used when omitted
            logger: Logger for progress and error messages
        """
        self.package = package
        self.config = config or DownloaderConfig()
        self.logger = logger or TextAnalysisLogger()

    @classmethod
    def download(
        cls,
        package: Package,
        config: Optional[DownloaderConfig] = None,
        logger: Optional[TextAnalysisLogger] = None,
    ) -> "PackageDownloader":
        """
        Install the package and return the downloader that did it.

        Raises:
            TextAnalysisException: If any step of the installation fails
        """
        downloader = cls(package, config, logger)
        downloader.install()
        return downloader

    @property
    def download_full_path(self) -> str:
        """Path where the downloaded artifact is cached."""
        return os.path.join(
            self.config.get_cache_root(), self.package.subdir, self.package.filename
        )

    @property
    def install_dir(self) -> str:
        """Directory the package contents are installed into."""
        return self.config.install_dir

    def initialize(self) -> None:
        """
        Create the cache and install directories if they are missing.
        """
        for directory in (os.path.dirname(self.download_full_path), self.install_dir):
            try:
                os.makedirs(directory, mode=0o755, exist_ok=True)
            except OSError as e:
                raise InstallIOError(directory, "create directory", str(e)) from e

    def compute_checksum(self) -> str:
        """Digest of the cached artifact."""
        return FileUtils.compute_checksum(
            self.download_full_path,
            self.config.checksum_algorithm,
            self.config.chunk_size,
        )

    def verify_checksum(self) -> bool:
        """
        Check the cached artifact against the package checksum.

        Returns:
            True if the digests are equal, False otherwise
        """
        return self.compute_checksum() == self.package.checksum.lower()

    def is_cached(self) -> bool:
        """Check if a verified copy of the artifact is already cached."""
        return os.path.exists(self.download_full_path) and self.verify_checksum()

    def download_remote_file(self) -> None:
        """Fetch the package artifact into the cache, replacing stale content."""
        FileUtils.download_file(
            self.logger,
            self.package.url,
            self.download_full_path,
            timeout=self.config.timeout,
            chunk_size=self.config.chunk_size,
        )

    def unpack_package(self) -> List[str]:
        """
        Extract the cached archive into the install directory, or copy the
        cached files there when the package is not zipped.

        Returns:
            Relative paths of the installed files
        """
        if self.package.unzip:
            return FileUtils.extract_zip(
                self.logger, self.download_full_path, self.install_dir
            )
        return FileUtils.copy_tree(self.download_full_path, self.install_dir)

    def install(self) -> str:
        """
        Install the package.

        Returns:
            InstallStatus.CACHED if a verified artifact was already cached,
            InstallStatus.INSTALLED after a fresh download and unpack

        Raises:
            ChecksumMismatchError: If the downloaded artifact fails verification
            ArchiveOpenError: If the artifact cannot be opened as a zip archive
            NetworkError: If the artifact cannot be fetched
            InstallIOError: If a filesystem operation fails
        """
        try:
            self.initialize()

            with self._locked():
                # latest package was already downloaded
                if self.is_cached():
                    self.logger.log(
                        f"Package {self.package.id} is already cached at {self.download_full_path}",
                        logging.INFO,
                    )
                    return InstallStatus.CACHED

                self.logger.log(
                    f"Downloading {self.package.id} from {self.package.url}",
                    logging.INFO,
                )
                self.download_remote_file()

                actual = self.compute_checksum()
                if actual != self.package.checksum.lower():
                    raise ChecksumMismatchError(
                        self.package.id, self.package.checksum, actual
                    )

                installed = self.unpack_package()

        except TextAnalysisException as e:
            self.logger.log(
                f"Failed to install {self.package.id}: {e.message}", logging.ERROR
            )
            raise

        self.logger.log(
            f"Installed {self.package.id} ({len(installed)} files) into {self.install_dir}",
            logging.INFO,
        )
        return InstallStatus.INSTALLED

    @contextlib.contextmanager
    def _locked(self) -> Iterator[None]:
        """Hold the per-package lock beside the cached artifact."""
        if not self.config.use_lock:
            yield
            return

        lock = FileLock(
            self.download_full_path + ".lock", timeout=self.config.lock_timeout
        )
        try:
            lock.acquire()
        except Timeout as e:
            raise InstallIOError(lock.lock_file, "lock", str(e)) from e

        try:
            yield
        finally:
            lock.release()


class PackageInstaller:
    """
    Installs a sequence of packages and keeps track of each outcome.
    """

    def __init__(
        self,
        config: Optional[DownloaderConfig] = None,
        logger: Optional[TextAnalysisLogger] = None,
    ):
        """
        Initialize the package installer.

        Args:
            config: Downloader configuration shared by every installation
            logger: Logger for progress and error messages
        """
        self.config = config or DownloaderConfig()
        self.logger = logger or TextAnalysisLogger()
        self.install_states: Dict[str, InstallState] = {}

    def install(self, package: Package) -> InstallState:
        """
        Install one package and record its state.

        Raises:
            TextAnalysisException: If the installation fails
        """
        downloader = PackageDownloader(package, self.config, self.logger)
        try:
            status = downloader.install()
        except TextAnalysisException as e:
            self.install_states[package.id] = InstallState(
                package_id=package.id,
                status=InstallStatus.FAILED,
                error_message=e.message,
            )
            raise

        state = InstallState(
            package_id=package.id,
            status=status,
            install_path=downloader.install_dir,
        )
        self.install_states[package.id] = state
        return state

    def install_all(self, packages: Iterable[Package]) -> bool:
        """
        Install every package, continuing past failures.

        Returns:
            True if all installations succeeded, False if any failed
        """
        packages = list(packages)
        if not packages:
            self.logger.log("No packages to install", logging.INFO)
            return True

        self.logger.log(f"Installing {len(packages)} packages", logging.INFO)

        all_succeeded = True
        for package in packages:
            try:
                self.install(package)
            except TextAnalysisException:
                all_succeeded = False

        return all_succeeded

    def get_install_state(self, package_id: str) -> Optional[InstallState]:
        """
        Get the recorded state of a package.

        Returns:
            InstallState or None if the package was never installed
        """
        return self.install_states.get(package_id)

    def get_installed_packages(self) -> Dict[str, InstallState]:
        """Packages that are available, whether freshly installed or cached."""
        return {
            key: state
            for key, state in self.install_states.items()
            if state.is_installed()
        }

    def get_failed_packages(self) -> Dict[str, InstallState]:
        """Packages whose installation failed."""
        return {
            key: state
            for key, state in self.install_states.items()
            if state.status == InstallStatus.FAILED
        }

    def get_install_summary(self) -> dict:
        """
        Get a summary of installation results.

        Returns:
            Dictionary with counts of cached, installed and failed packages
        """
        states = self.install_states.values()
        cached = sum(1 for state in states if state.status == InstallStatus.CACHED)
        installed = sum(
            1 for state in states if state.status == InstallStatus.INSTALLED
        )
        failed = sum(1 for state in states if state.status == InstallStatus.FAILED)

        return {
            "cached": cached,
            "installed": installed,
            "failed": failed,
            "total": cached + installed + failed,
        }
