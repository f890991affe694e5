"""Intermediate route tree.

Frozen dataclasses built once by the tree builder and consumed by the
converter.  A node's children are a tuple, so a finished subtree cannot
be mutated by later siblings.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from jamroutes.routing.conventions import NOT_FOUND_SEGMENT


class NodeKind(Enum):
    PAGE = "page"
    LAYOUT = "layout"
    ROUTE = "route"
    NOT_FOUND = "not-found"


@dataclass(frozen=True, slots=True)
class RouteNode:
    """One contributing file or directory.

    Attributes:
        segment: URL segment this node contributes (``""`` for index
            pages and layouts, ``":id"`` / ``"*slug"`` for dynamic ones).
        file: Content reference of the backing file, or of a synthesized
            placeholder layout. Empty for directory nodes.
        kind: ``ROUTE`` for directories; the rest derive from files.
        children: Child nodes in precedence order.
        is_dynamic: True for ``[param]`` and ``[...param]`` segments.
        is_index: True only for pages built from an index-page file.
    """

    segment: str
    file: str
    kind: NodeKind
    children: tuple[RouteNode, ...] = ()
    is_dynamic: bool = False
    is_index: bool = False

    @classmethod
    def page(cls, file: str) -> RouteNode:
        return cls(segment="", file=file, kind=NodeKind.PAGE, is_index=True)

    @classmethod
    def layout(cls, file: str, children: Iterable[RouteNode]) -> RouteNode:
        return cls(segment="", file=file, kind=NodeKind.LAYOUT, children=tuple(children))

    @classmethod
    def not_found(cls, file: str) -> RouteNode:
        return cls(segment=NOT_FOUND_SEGMENT, file=file, kind=NodeKind.NOT_FOUND)

    @classmethod
    def directory(
        cls,
        segment: str,
        children: Iterable[RouteNode],
        *,
        is_dynamic: bool = False,
    ) -> RouteNode:
        return cls(
            segment=segment,
            file="",
            kind=NodeKind.ROUTE,
            children=tuple(children),
            is_dynamic=is_dynamic,
        )

    @property
    def is_catch_all(self) -> bool:
        return self.is_dynamic and self.segment.startswith("*")


@dataclass(frozen=True, slots=True)
class DirectoryParts:
    """A directory node's children split into four disjoint groups.

    ``other`` keeps the input order of everything that is not the
    layout, the index page, or a dynamic route.
    """

    layout: RouteNode | None
    index: RouteNode | None
    dynamic: tuple[RouteNode, ...]
    other: tuple[RouteNode, ...]

    @classmethod
    def partition(
        cls,
        children: Iterable[RouteNode],
        *,
        split_dynamic: bool = True,
    ) -> DirectoryParts:
        """Split ``children``; the first layout and first index page win.

        With ``split_dynamic=False`` dynamic routes stay in ``other``.
        """
        layout: RouteNode | None = None
        index: RouteNode | None = None
        dynamic: list[RouteNode] = []
        other: list[RouteNode] = []
        for child in children:
            if layout is None and child.kind is NodeKind.LAYOUT:
                layout = child
            elif index is None and child.kind is NodeKind.PAGE and child.is_index:
                index = child
            elif split_dynamic and child.kind is NodeKind.ROUTE and child.is_dynamic:
                dynamic.append(child)
            else:
                other.append(child)
        return cls(layout=layout, index=index, dynamic=tuple(dynamic), other=tuple(other))
