"""Filesystem walk producing the intermediate route tree.

Walks the routes directory depth-first.  Each directory is handled in a
single pass over its listing:

1. entries matching the ignore predicate are skipped
2. a ``layout`` file is remembered as the directory's layout
3. other ``_``-prefixed files are skipped
4. subdirectories are built concurrently (anyio task group); ``_group``
   folders splice their nodes into this level, other folders become a
   ``ROUTE`` node
5. ``page`` files become index pages
6. ``not-found`` files become catch-all not-found nodes

Siblings are then ordered for matching precedence and wrapped in the
directory's layout, synthesizing a placeholder layout when none exists.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path, PurePosixPath

import anyio

from jamroutes.config import DEFAULT_EXTENSIONS, RoutesConfig
from jamroutes.errors import DuplicateLayoutError
from jamroutes.fs import DirEntry, FileSystem
from jamroutes.ignore import build_ignore
from jamroutes.routing.conventions import (
    content_ref,
    is_layout_file,
    is_not_found_file,
    is_page_file,
    is_private,
    parse_segment,
)
from jamroutes.routing.placeholders import PlaceholderLayouts
from jamroutes.routing.types import NodeKind, RouteNode

logger = logging.getLogger("jamroutes.builder")

LayoutProvider = Callable[[str], Awaitable[str]]


def order_siblings(nodes: Sequence[RouteNode]) -> list[RouteNode]:
    """Order one directory's nodes for router precedence.

    Directory routes come first: static before dynamic, each group sorted
    by segment.  Among dynamic routes, catch-alls (``*slug``) come before
    parameters (``:id``), matching plain segment order.  Everything else
    keeps its listing order after them.
    """
    routes = sorted(
        (node for node in nodes if node.kind is NodeKind.ROUTE),
        key=lambda node: (node.is_dynamic, not node.is_catch_all, node.segment),
    )
    rest = [node for node in nodes if node.kind is not NodeKind.ROUTE]
    return [*routes, *rest]


class RouteTreeBuilder:
    """Builds ``RouteNode`` trees from a directory on a ``FileSystem``.

    Args:
        fs: Filesystem to read from.
        root_directory: App root; content references and ignore
            patterns are relative to it.
        layouts: Maps a directory (relative to root) to the content
            reference of its synthesized layout.
        ignore: Predicate over root-relative ``/``-separated paths.
        extensions: Source extensions for convention files.
        strict_layouts: Raise on more than one layout file per directory.
    """

    def __init__(
        self,
        fs: FileSystem,
        root_directory: str | Path,
        *,
        layouts: LayoutProvider,
        ignore: Callable[[str], bool] | None = None,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        strict_layouts: bool = False,
    ) -> None:
        self._fs = fs
        self._root = Path(root_directory)
        self._layouts = layouts
        self._ignore = ignore or build_ignore(())
        self._extensions = tuple(extensions)
        self._strict_layouts = strict_layouts

    async def build(self, directory: str) -> list[RouteNode]:
        """Build the node list for ``directory`` (relative to the root)."""
        entries = await self._fs.list_directory(self._root / directory)

        # One slot per entry keeps listing order regardless of which
        # subdirectory finishes first.
        slots: list[list[RouteNode]] = [[] for _ in entries]
        subdirectories: list[tuple[int, DirEntry, str]] = []
        layout_file: str | None = None

        for position, entry in enumerate(entries):
            relative = str(PurePosixPath(directory, entry.name))
            if self._ignore(relative):
                continue

            if entry.is_file and is_layout_file(entry.name, self._extensions):
                if layout_file is not None:
                    self._duplicate_layout(directory, layout_file, relative)
                layout_file = relative
                continue

            if entry.is_dir:
                subdirectories.append((position, entry, relative))
            elif is_private(entry.name):
                continue
            elif entry.is_file and is_page_file(entry.name, self._extensions):
                slots[position] = [RouteNode.page(content_ref(relative))]
            elif entry.is_file and is_not_found_file(entry.name, self._extensions):
                slots[position] = [RouteNode.not_found(content_ref(relative))]

        if subdirectories:
            try:
                async with anyio.create_task_group() as tg:
                    for position, entry, relative in subdirectories:
                        tg.start_soon(self._build_subdirectory, slots, position, entry.name, relative)
            except BaseExceptionGroup as group:
                # Surface the first failure itself, not the task group wrapper
                cause = _root_cause(group)
                if isinstance(cause, Exception):
                    raise cause from None
                raise

        nodes = order_siblings([node for slot in slots for node in slot])

        if layout_file is not None:
            return [RouteNode.layout(content_ref(layout_file), nodes)]

        if nodes and not any(node.kind is NodeKind.LAYOUT for node in nodes):
            return [RouteNode.layout(await self._layouts(directory), nodes)]

        return nodes

    async def _build_subdirectory(
        self,
        slots: list[list[RouteNode]],
        position: int,
        name: str,
        relative: str,
    ) -> None:
        children = await self.build(relative)

        if is_private(name):
            # Route group: organizational only, no segment of its own
            slots[position] = children
            return

        parsed = parse_segment(name, self._extensions)
        slots[position] = [
            RouteNode.directory(parsed.path or name, children, is_dynamic=parsed.is_dynamic)
        ]

    def _duplicate_layout(self, directory: str, previous: str, current: str) -> None:
        if self._strict_layouts:
            raise DuplicateLayoutError(directory, (previous, current))
        logger.warning(
            "Multiple layout files in %s: using %s, ignoring %s",
            directory,
            current,
            previous,
        )


def _root_cause(exc: BaseException) -> BaseException:
    """Unwrap task-group exception groups down to the first real error."""
    while isinstance(exc, BaseExceptionGroup) and exc.exceptions:
        exc = exc.exceptions[0]
    return exc


async def build_route_tree(config: RoutesConfig, fs: FileSystem) -> list[RouteNode]:
    """Build the route tree described by ``config``.

    Raises:
        FileNotFoundError: The routes directory does not exist.
        DuplicateLayoutError: ``strict_layouts`` is set and a directory
            holds more than one layout file.
        OSError: Any listing or placeholder write failure.
    """
    routes_path = config.routes_path
    if not await fs.exists(routes_path):
        raise FileNotFoundError(f"Routes directory not found: {routes_path}")

    layouts = PlaceholderLayouts(
        fs,
        config.root_directory,
        layouts_dir=config.layouts_dir,
        routes_dir=config.routes_dir,
        extension=config.placeholder_extension,
        outlet_module=config.outlet_module,
    )
    builder = RouteTreeBuilder(
        fs,
        config.root_directory,
        layouts=layouts,
        ignore=build_ignore(config.ignored_file_patterns),
        extensions=config.extensions,
        strict_layouts=config.strict_layouts,
    )

    start = str(PurePosixPath(config.routes_dir.replace("\\", "/")))
    logger.debug("Building route tree from %s", routes_path)
    return await builder.build(start)
