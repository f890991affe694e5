"""``jamroutes build`` — compile the routes directory and print it.

JSON output matches the router's config shape and can be loaded by a
``routes.ts`` module; the tree format is for reading.
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from jamroutes.compiler import compile_routes
from jamroutes.config import RoutesConfig
from jamroutes.errors import JamRoutesError
from jamroutes.routes import RouteConfigEntry


def format_tree(entries: Sequence[RouteConfigEntry], depth: int = 0) -> list[str]:
    """Render entries as indented lines: ``kind  path  file``."""
    lines: list[str] = []
    indent = "  " * depth
    for entry in entries:
        if entry.index:
            lines.append(f"{indent}index  {entry.file}")
        elif entry.path is None:
            lines.append(f"{indent}layout  {entry.file}")
        else:
            lines.append(f"{indent}route  {entry.path}  {entry.file}")
        lines.extend(format_tree(entry.children, depth + 1))
    return lines


def run_build(args: argparse.Namespace) -> None:
    """Compile routes from CLI arguments and write them to stdout."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = RoutesConfig(
            root_directory=args.root,
            routes_dir=args.routes_dir,
            ignored_file_patterns=tuple(args.ignore),
            strict_layouts=args.strict_layouts,
        )
        entries = compile_routes(config)
    except (OSError, JamRoutesError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.format == "tree":
        if not entries:
            print("No routes found.")
            return
        print("\n".join(format_tree(entries)))
    else:
        print(json.dumps([entry.to_dict() for entry in entries], indent=2))
