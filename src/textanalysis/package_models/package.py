"""
Pydantic data model for a downloadable package descriptor.

A descriptor identifies a remote artifact, where it is cached and installed,
the checksum it must match and whether it is a zip archive to extract or a
plain file tree to copy.
"""

import posixpath
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field


class Package(BaseModel):
    """
    A downloadable package descriptor.

    The checksum is accepted either as ``checksum`` or under the catalog's
    native ``md5`` key. Any additional catalog metadata (name, size,
    unzipped_size, ...) is preserved as extra fields.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1, description="Package identifier")
    url: str = Field(..., min_length=1, description="URL to download from")
    subdir: str = Field(..., description="Subdirectory used for the cache layout")
    checksum: str = Field(..., alias="md5", description="Hex digest of the artifact")
    unzip: bool = Field(False, description="Whether the artifact is a zip archive")
    name: Optional[str] = Field(None, description="Human readable name")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Package":
        """
        Create a Package from a catalog entry.

        Args:
            data: Dictionary with at least id, url, subdir and checksum (or md5)

        Returns:
            Package instance
        """
        return cls(**data)

    @property
    def filename(self) -> str:
        """Basename of the URL path, used as the cached artifact's file name."""
        path = urlparse(self.url).path or self.url
        return posixpath.basename(path.rstrip("/"))

    def __str__(self) -> str:
        return f"Package(id={self.id}, url={self.url})"
