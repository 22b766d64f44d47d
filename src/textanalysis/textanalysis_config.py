"""
Configuration parameters for the package downloader.
"""

import inspect
import os
import tempfile
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class DownloaderConfig:
    """
    Configuration parameters
    """

    cache_namespace: str = "nltk-downloads"
    temp_dir: Optional[str] = None
    install_dir: str = os.path.join("storage", "corpora")
    timeout: float = 60
    chunk_size: int = 8192
    checksum_algorithm: str = "md5"
    use_lock: bool = True
    lock_timeout: float = -1

    @classmethod
    def from_dict(cls, env: Dict[str, Any]) -> "DownloaderConfig":
        """
        Create a DownloaderConfig instance from a dictionary. Unknown keys are ignored.
        """
        return cls(
            **{k: v for k, v in env.items() if k in inspect.signature(cls).parameters}
        )

    def get_cache_root(self) -> str:
        """
        Directory under which downloaded artifacts are cached.
        """
        return os.path.join(self.temp_dir or tempfile.gettempdir(), self.cache_namespace)
