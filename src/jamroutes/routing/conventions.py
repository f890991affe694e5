"""File and folder naming conventions.

==================  =====================  ================
Name                Meaning                Segment
==================  =====================  ================
``page.tsx``        index page             ``""``
``layout.tsx``      directory layout       ``""``
``not-found.tsx``   not-found handler      ``"*"``
``[id]``            parameter segment      ``":id"``
``[...slug]``       catch-all segment      ``"*slug"``
``_name``           private file / group   (none)
anything else       static segment         the name
==================  =====================  ================

Extensions are configurable; the defaults are ``.tsx .ts .jsx .js``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePosixPath

from jamroutes.config import DEFAULT_EXTENSIONS

PAGE_NAME = "page"
LAYOUT_NAME = "layout"
NOT_FOUND_NAME = "not-found"
NOT_FOUND_SEGMENT = "*"
ROOT_PLACEHOLDER = "root"


@dataclass(frozen=True, slots=True)
class ParsedSegment:
    """What a file or folder name contributes to the URL."""

    path: str
    is_dynamic: bool = False
    is_index: bool = False


def strip_extension(name: str, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> str:
    for ext in extensions:
        if name.endswith(ext) and len(name) > len(ext):
            return name[: -len(ext)]
    return name


def parse_segment(name: str, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> ParsedSegment:
    """Parse a file or folder name into its URL segment.

    ``[...x]`` is checked before ``[x]`` so catch-alls are not read as a
    parameter named ``...x``.
    """
    stem = strip_extension(name, extensions)

    if stem == PAGE_NAME:
        return ParsedSegment("", is_index=True)
    if stem == LAYOUT_NAME:
        return ParsedSegment("")

    if stem.startswith("[...") and stem.endswith("]"):
        return ParsedSegment(f"*{stem[4:-1]}", is_dynamic=True)
    if stem.startswith("[") and stem.endswith("]"):
        return ParsedSegment(f":{stem[1:-1]}", is_dynamic=True)

    return ParsedSegment(stem)


def _is_named(name: str, stem: str, extensions: Sequence[str]) -> bool:
    return any(name == f"{stem}{ext}" for ext in extensions)


def is_layout_file(name: str, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> bool:
    return _is_named(name, LAYOUT_NAME, extensions)


def is_page_file(name: str, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> bool:
    return _is_named(name, PAGE_NAME, extensions)


def is_not_found_file(name: str, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> bool:
    return _is_named(name, NOT_FOUND_NAME, extensions)


def is_private(name: str) -> bool:
    """Private files are skipped; private folders are route groups."""
    return name.startswith("_")


def placeholder_name(directory: str, routes_dir: str = "routes") -> str:
    """Deterministic cache name for a directory's synthesized layout.

    ``routes/_dashboard/account`` becomes ``_dashboard.account``; the
    routes directory itself becomes ``root``.
    """
    path = directory.replace("\\", "/")
    prefix = str(PurePosixPath(routes_dir))
    for candidate in (f"./{prefix}", prefix):
        if path == candidate:
            path = ""
            break
        if path.startswith(f"{candidate}/"):
            path = path[len(candidate) + 1 :]
            break
    return path.replace("/", ".").lstrip(".") or ROOT_PLACEHOLDER


def content_ref(relative_path: str) -> str:
    """Content reference for a file under the app root: ``./routes/...``."""
    normalized = relative_path.replace("\\", "/").removeprefix("./")
    return f"./{normalized}"
