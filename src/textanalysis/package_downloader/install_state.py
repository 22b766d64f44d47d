"""
Installation status tracking for packages.
"""

from typing import Optional


class InstallStatus:
    """Enumeration of installation statuses."""

    CACHED = "cached"
    INSTALLED = "installed"
    FAILED = "failed"


class InstallState:
    """
    Outcome of installing one package.

    Tracks whether the package was installed (or already cached) and where
    its files were placed.
    """

    def __init__(
        self,
        package_id: str,
        status: str,
        install_path: Optional[str] = None,
        error_message: Optional[str] = None,
    ):
        """
        Initialize install state.

        Args:
            package_id: Identifier of the package
            status: One of the InstallStatus values
            install_path: Directory the package was installed into
            error_message: Error message if the installation failed
        """
        self.package_id = package_id
        self.status = status
        self.install_path = install_path
        self.error_message = error_message

    def is_installed(self) -> bool:
        """Check if the package is available in the install directory."""
        return self.status in (InstallStatus.CACHED, InstallStatus.INSTALLED)

    def __repr__(self) -> str:
        return (
            f"InstallState(id={self.package_id}, "
            f"status={self.status}, path={self.install_path})"
        )
