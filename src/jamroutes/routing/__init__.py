"""Directory tree to route configuration compiler.

Two layers, run in order::

    tree = await build_route_tree(config, fs)   # filesystem -> RouteNode tree
    entries = convert(tree)                     # RouteNode tree -> route config

Conventions (under ``app/routes/``)::

    routes/
      layout.tsx          # wraps everything below
      page.tsx            # index route
      not-found.tsx       # "*" route, always last
      users/
        page.tsx          # users
        [id]/page.tsx     # users/:id
      files/
        [...path]/        # files/*path
      _auth/              # route group, adds no segment
        login/page.tsx    # login
"""

from jamroutes.routing.builder import RouteTreeBuilder, build_route_tree, order_siblings
from jamroutes.routing.converter import convert
from jamroutes.routing.placeholders import PlaceholderLayouts
from jamroutes.routing.types import DirectoryParts, NodeKind, RouteNode

__all__ = [
    "DirectoryParts",
    "NodeKind",
    "PlaceholderLayouts",
    "RouteNode",
    "RouteTreeBuilder",
    "build_route_tree",
    "convert",
    "order_siblings",
]
