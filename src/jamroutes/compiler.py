"""Top-level entry points: compile an app's routes directory."""

from __future__ import annotations

import functools
from typing import Any

import anyio

from jamroutes.config import RoutesConfig
from jamroutes.fs import FileSystem, LocalFileSystem
from jamroutes.routes import RouteFactory
from jamroutes.routing.builder import build_route_tree
from jamroutes.routing.converter import convert


async def jam_routes(
    config: RoutesConfig | None = None,
    *,
    fs: FileSystem | None = None,
    factory: RouteFactory | None = None,
) -> list[Any]:
    """Compile ``<root_directory>/<routes_dir>`` into route config entries.

    Args:
        config: Compiler options. Defaults to ``RoutesConfig()``
            (``./app/routes``, nothing ignored).
        fs: Filesystem to read from and write placeholders to.
        factory: Entry constructors. Defaults to ``jamroutes.routes``.

    Returns:
        The ordered top-level route configuration.
    """
    config = config or RoutesConfig()
    tree = await build_route_tree(config, fs or LocalFileSystem())
    return convert(tree, factory)


def compile_routes(
    config: RoutesConfig | None = None,
    *,
    fs: FileSystem | None = None,
    factory: RouteFactory | None = None,
) -> list[Any]:
    """Blocking wrapper around :func:`jam_routes` for scripts and the CLI."""
    return anyio.run(functools.partial(jam_routes, config, fs=fs, factory=factory))
