"""Route tree to route configuration.

Turns the builder's ``RouteNode`` tree into the router's nested entry
list.  For each directory node the children are partitioned into layout,
index page, dynamic routes and the rest:

- with a layout, the entry wraps the layout file and nests the layout's
  children plus the rest
- with only an index page, the page doubles as the wrapper for the rest
- with neither, the rest is spliced into the current level

Dynamic children are hoisted: each is emitted as a sibling of the
directory's entry at the combined path (``users/:id``), never nested
inside it.  Not-found entries always go last at their level so they
cannot shadow earlier matches.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import jamroutes.routes as default_factory
from jamroutes.routes import RouteFactory
from jamroutes.routing.types import DirectoryParts, NodeKind, RouteNode

logger = logging.getLogger("jamroutes.converter")


def join_path(parent: str, child: str) -> str:
    return f"{parent}/{child}" if parent else child


def convert(nodes: Iterable[RouteNode], factory: RouteFactory | None = None) -> list[Any]:
    """Convert one level of nodes into route config entries."""
    factory = factory or default_factory
    entries: list[Any] = []
    not_found: list[Any] = []

    for node in nodes:
        if node.kind is NodeKind.LAYOUT:
            entries.append(factory.layout(node.file, convert(node.children, factory)))
        elif node.kind is NodeKind.PAGE and node.is_index:
            entries.append(factory.index(node.file))
        elif node.kind is NodeKind.NOT_FOUND:
            not_found.append(factory.route(node.segment, node.file))
        elif node.kind is NodeKind.ROUTE:
            parts = DirectoryParts.partition(node.children)
            entries.extend(_resolve(node.segment, parts, factory))

            for child in parts.dynamic:
                child_parts = DirectoryParts.partition(child.children, split_dynamic=False)
                entries.extend(_resolve(join_path(node.segment, child.segment), child_parts, factory))

    entries.extend(not_found)
    return entries


def _resolve(path: str, parts: DirectoryParts, factory: RouteFactory) -> list[Any]:
    """Entries for one directory, excluding its hoisted dynamic children."""
    if parts.layout is not None:
        nested = convert((*parts.layout.children, *parts.other), factory)
        return [factory.route(path, parts.layout.file, nested)]

    if parts.index is not None:
        return [factory.route(path, parts.index.file, convert(parts.other, factory))]

    if path and parts.other:
        logger.warning(
            "Route %r has neither a layout nor an index page; "
            "its children are mounted without the %r segment",
            path,
            path,
        )
    return convert(parts.other, factory)
