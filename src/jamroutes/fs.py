"""Filesystem access for the route compiler.

The builder only needs four operations, expressed by the ``FileSystem``
protocol.  ``LocalFileSystem`` implements them on top of ``anyio.Path`` so
directory listings and placeholder writes never block the event loop.
``jamroutes.testing.MemoryFileSystem`` is an in-memory implementation for
tests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Protocol

import anyio

StrPath = str | os.PathLike[str]


@dataclass(frozen=True, slots=True)
class DirEntry:
    """One entry of a directory listing."""

    name: str
    is_dir: bool
    is_file: bool


class FileSystem(Protocol):
    """The filesystem operations the compiler depends on."""

    async def list_directory(self, path: StrPath) -> list[DirEntry]: ...

    async def exists(self, path: StrPath) -> bool: ...

    async def write_file(self, path: StrPath, content: str) -> None: ...

    async def make_directory(self, path: StrPath, *, recursive: bool = False) -> None: ...


class LocalFileSystem:
    """``FileSystem`` backed by the real disk.

    Listings are sorted by name: ``os.scandir`` order differs between
    platforms, and sibling order feeds into route precedence.
    """

    async def list_directory(self, path: StrPath) -> list[DirEntry]:
        entries: list[DirEntry] = []
        async for child in anyio.Path(path).iterdir():
            entries.append(
                DirEntry(
                    name=child.name,
                    is_dir=await child.is_dir(),
                    is_file=await child.is_file(),
                )
            )
        entries.sort(key=lambda entry: entry.name)
        return entries

    async def exists(self, path: StrPath) -> bool:
        return await anyio.Path(path).exists()

    async def write_file(self, path: StrPath, content: str) -> None:
        await anyio.Path(path).write_text(content, encoding="utf-8")

    async def make_directory(self, path: StrPath, *, recursive: bool = False) -> None:
        await anyio.Path(path).mkdir(parents=recursive, exist_ok=recursive)
