"""Test utilities for code that drives the route compiler.

``MemoryFileSystem`` satisfies ``jamroutes.fs.FileSystem`` without touching
the disk and records every write, so tests can assert on placeholder
creation and idempotence::

    fs = MemoryFileSystem()
    fs.add_file("app/routes/page.tsx")
    routes = await jam_routes(fs=fs)
    assert fs.writes == ["app/.react-router/layouts/root.layout.tsx"]
"""

from __future__ import annotations

import errno
import os
from pathlib import PurePosixPath

from jamroutes.fs import DirEntry, StrPath

DEFAULT_COMPONENT = "export default function Component() {}"


def _key(path: StrPath) -> str:
    return str(PurePosixPath(os.fspath(path).replace("\\", "/")))


class MemoryFileSystem:
    """In-memory ``FileSystem``.

    Attributes:
        files: Mapping of normalised path to file content.
        directories: Set of normalised directory paths.
        writes: Every path passed to ``write_file``, in call order.
    """

    def __init__(self) -> None:
        self.files: dict[str, str] = {}
        self.directories: set[str] = {"."}
        self.writes: list[str] = []

    def add_file(self, path: StrPath, content: str = DEFAULT_COMPONENT) -> None:
        """Create a file, creating missing parent directories."""
        key = _key(path)
        self._add_parents(key)
        self.files[key] = content

    def add_directory(self, path: StrPath) -> None:
        key = _key(path)
        self._add_parents(key)
        self.directories.add(key)

    def _add_parents(self, key: str) -> None:
        for parent in PurePosixPath(key).parents:
            self.directories.add(str(parent))

    async def list_directory(self, path: StrPath) -> list[DirEntry]:
        key = _key(path)
        if key in self.files:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), key)
        if key not in self.directories:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), key)

        entries = [
            DirEntry(name=PurePosixPath(d).name, is_dir=True, is_file=False)
            for d in self.directories
            if d != key and str(PurePosixPath(d).parent) == key
        ]
        entries.extend(
            DirEntry(name=PurePosixPath(f).name, is_dir=False, is_file=True)
            for f in self.files
            if str(PurePosixPath(f).parent) == key
        )
        entries.sort(key=lambda entry: entry.name)
        return entries

    async def exists(self, path: StrPath) -> bool:
        key = _key(path)
        return key in self.files or key in self.directories

    async def write_file(self, path: StrPath, content: str) -> None:
        key = _key(path)
        parent = str(PurePosixPath(key).parent)
        if parent not in self.directories:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), key)
        self.writes.append(key)
        self.files[key] = content

    async def make_directory(self, path: StrPath, *, recursive: bool = False) -> None:
        key = _key(path)
        if key in self.directories:
            if recursive:
                return
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), key)
        if not recursive and str(PurePosixPath(key).parent) not in self.directories:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), key)
        self._add_parents(key)
        self.directories.add(key)
