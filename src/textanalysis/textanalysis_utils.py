"""
This file contains various utility functions like I/O operations, handling paths, etc.
"""

import hashlib
import logging
import os
import shutil
import urllib.request
import zipfile
from typing import Callable, List
from urllib.parse import urlparse

import requests

from textanalysis.textanalysis_exceptions import (
    ArchiveOpenError,
    InstallIOError,
    NetworkError,
)
from textanalysis.textanalysis_logger import TextAnalysisLogger


class FileUtils:
    """
    Utility functions for file operations.
    """

    @staticmethod
    def compute_checksum(
        path: str, algorithm: str = "md5", chunk_size: int = 8192
    ) -> str:
        """
        Compute the hex digest of the file at path.

        For a directory the digest covers every file below it: the relative
        path of each file followed by its bytes, walked in sorted order so the
        result is stable across platforms.
        """
        try:
            digest = hashlib.new(algorithm)
        except ValueError as e:
            raise InstallIOError(path, "checksum", f"unknown algorithm {algorithm}") from e

        try:
            if os.path.isdir(path):
                for root, dirs, files in os.walk(path):
                    dirs.sort()
                    for name in sorted(files):
                        full = os.path.join(root, name)
                        rel = os.path.relpath(full, path).replace(os.sep, "/")
                        digest.update(rel.encode("utf-8"))
                        FileUtils._update_digest(digest, full, chunk_size)
            else:
                FileUtils._update_digest(digest, path, chunk_size)
        except OSError as e:
            raise InstallIOError(path, "read", str(e)) from e

        return digest.hexdigest()

    @staticmethod
    def _update_digest(digest, path: str, chunk_size: int) -> None:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                digest.update(chunk)

    @staticmethod
    def remove_path(path: str) -> None:
        """
        Remove a file or directory tree at path, if anything is there.
        """
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            elif os.path.lexists(path):
                os.remove(path)
        except OSError as e:
            raise InstallIOError(path, "remove", str(e)) from e

    @staticmethod
    def download_file(
        logger: TextAnalysisLogger,
        url: str,
        target_path: str,
        timeout: float = 60,
        chunk_size: int = 8192,
    ) -> None:
        """
        Stream the resource at url into target_path, replacing whatever is there.

        http and https go through requests. Other schemes (ftp, file) are opened
        with urllib. A file:// URL naming a local directory is copied as a tree.
        """
        logger.log(f"Downloading {url} to {target_path}", logging.DEBUG)
        FileUtils.remove_path(target_path)

        parsed = urlparse(url)
        scheme = parsed.scheme.lower()

        if scheme in ("http", "https"):
            try:
                with requests.get(url, stream=True, timeout=timeout) as response:
                    response.raise_for_status()
                    chunks = response.iter_content(chunk_size=chunk_size)
                    FileUtils._write_stream(url, target_path, lambda: next(chunks, b""))
            except requests.RequestException as e:
                raise NetworkError(url, str(e)) from e
            return

        if scheme == "file":
            local_path = urllib.request.url2pathname(parsed.path)
            if os.path.isdir(local_path):
                FileUtils.copy_tree(local_path, target_path)
                return

        try:
            response = urllib.request.urlopen(url, timeout=timeout)
        except (OSError, ValueError) as e:
            raise NetworkError(url, str(e)) from e

        with response:
            FileUtils._write_stream(url, target_path, lambda: response.read(chunk_size))

    @staticmethod
    def _write_stream(url: str, target_path: str, read: Callable[[], bytes]) -> None:
        try:
            f = open(target_path, "wb")
        except OSError as e:
            raise InstallIOError(target_path, "open for writing", str(e)) from e

        with f:
            while True:
                try:
                    chunk = read()
                except OSError as e:
                    raise NetworkError(url, str(e)) from e
                if not chunk:
                    break
                try:
                    f.write(chunk)
                except OSError as e:
                    raise InstallIOError(target_path, "write", str(e)) from e

    @staticmethod
    def extract_zip(
        logger: TextAnalysisLogger, archive_path: str, dest_dir: str
    ) -> List[str]:
        """
        Extract every entry of the zip archive into dest_dir.

        Entry paths are kept relative to dest_dir. Entries that would land
        outside dest_dir are skipped.

        Returns:
            The relative paths of the extracted files
        """
        try:
            zf = zipfile.ZipFile(archive_path, "r")
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveOpenError(archive_path, str(e)) from e

        dest_dir = os.path.abspath(dest_dir)
        extracted: List[str] = []

        with zf:
            for member in zf.infolist():
                name = member.filename.replace("\\", "/")
                if not name:
                    continue

                target = os.path.abspath(os.path.join(dest_dir, name))
                if os.path.isabs(name) or not (
                    target == dest_dir or target.startswith(dest_dir + os.sep)
                ):
                    logger.log(
                        f"Skipping archive entry outside of {dest_dir}: {member.filename}",
                        logging.WARNING,
                    )
                    continue
                if target == dest_dir:
                    continue

                try:
                    if member.is_dir():
                        os.makedirs(target, exist_ok=True)
                        continue
                    os.makedirs(os.path.dirname(target), exist_ok=True)
                    with zf.open(member) as src, open(target, "wb") as dst:
                        shutil.copyfileobj(src, dst)
                except zipfile.BadZipFile as e:
                    raise ArchiveOpenError(archive_path, str(e)) from e
                except OSError as e:
                    raise InstallIOError(target, "extract", str(e)) from e

                extracted.append(os.path.relpath(target, dest_dir).replace(os.sep, "/"))

        return extracted

    @staticmethod
    def copy_tree(src: str, dst: str) -> List[str]:
        """
        Copy every file and subdirectory of src into dst, creating directories
        as needed. If src is a single file it is copied into dst.

        Symlinked directories are recreated as links rather than descended
        into, the same rule compute_checksum walks by.

        Returns:
            The relative paths of the copied files
        """
        copied: List[str] = []

        if os.path.isfile(src):
            name = os.path.basename(src)
            try:
                os.makedirs(dst, exist_ok=True)
                shutil.copyfile(src, os.path.join(dst, name))
            except OSError as e:
                raise InstallIOError(src, "copy", str(e)) from e
            return [name]

        pending = [""]
        while pending:
            rel_dir = pending.pop()
            src_dir = os.path.join(src, rel_dir)
            dst_dir = os.path.join(dst, rel_dir)

            try:
                os.makedirs(dst_dir, exist_ok=True)
                with os.scandir(src_dir) as it:
                    entries = sorted(it, key=lambda entry: entry.name)
            except OSError as e:
                raise InstallIOError(src_dir, "copy", str(e)) from e

            for entry in entries:
                rel_path = os.path.join(rel_dir, entry.name) if rel_dir else entry.name
                target = os.path.join(dst, rel_path)
                try:
                    if entry.is_dir(follow_symlinks=False):
                        pending.append(rel_path)
                        continue
                    # directory links are recreated, not descended into
                    if entry.is_symlink() and os.path.isdir(entry.path):
                        if os.path.islink(target):
                            os.remove(target)
                        os.symlink(os.readlink(entry.path), target)
                    else:
                        shutil.copyfile(entry.path, target)
                except OSError as e:
                    raise InstallIOError(entry.path, "copy", str(e)) from e
                copied.append(rel_path.replace(os.sep, "/"))

        return copied
