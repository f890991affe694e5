"""Route configuration entries and their constructors.

The three constructors mirror the router's config helpers::

    index("./routes/page.tsx")
    layout("./routes/layout.tsx", [...])
    route("users", "./routes/users/layout.tsx", [...])

The converter only ever builds entries through a ``RouteFactory``; this
module is the default one.  Any object exposing ``index``, ``layout`` and
``route`` with the same signatures can be injected instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class RouteConfigEntry:
    """A compiled route entry.

    Attributes:
        file: Content reference, relative to the app root.
        path: URL path (segment or combined segments). ``None`` for
            index and layout entries.
        index: True for index entries.
        children: Nested entries, in matching order.
    """

    file: str
    path: str | None = None
    index: bool = False
    children: tuple[RouteConfigEntry, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form, in the router's JSON shape."""
        data: dict[str, Any] = {}
        if self.path is not None:
            data["path"] = self.path
        if self.index:
            data["index"] = True
        data["file"] = self.file
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


class RouteFactory(Protocol):
    """Constructors the converter builds entries with."""

    def index(self, file: str) -> Any: ...

    def layout(self, file: str, children: Sequence[Any]) -> Any: ...

    def route(self, path: str, file: str, children: Sequence[Any] = ()) -> Any: ...


def index(file: str) -> RouteConfigEntry:
    return RouteConfigEntry(file=file, index=True)


def layout(file: str, children: Sequence[RouteConfigEntry]) -> RouteConfigEntry:
    return RouteConfigEntry(file=file, children=tuple(children))


def route(
    path: str,
    file: str,
    children: Sequence[RouteConfigEntry] = (),
) -> RouteConfigEntry:
    return RouteConfigEntry(file=file, path=path, children=tuple(children))
