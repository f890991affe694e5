"""jamroutes CLI — compile and inspect a routes directory.

Entry point registered as ``jamroutes`` in ``pyproject.toml``::

    [project.scripts]
    jamroutes = "jamroutes.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``jamroutes`` command."""
    parser = argparse.ArgumentParser(
        prog="jamroutes",
        description="jamroutes — compile a routes directory into a router configuration.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- jamroutes build --------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Compile and print the route config")
    build_parser.add_argument(
        "--root",
        default="./app",
        help="App root directory (default: ./app)",
    )
    build_parser.add_argument(
        "--routes-dir",
        default="routes",
        help="Routes directory, relative to the root (default: routes)",
    )
    build_parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Glob pattern to ignore, relative to the root (repeatable)",
    )
    build_parser.add_argument(
        "--format",
        choices=("json", "tree"),
        default="json",
        help="Output format (default: json)",
    )
    build_parser.add_argument(
        "--strict-layouts",
        action="store_true",
        help="Fail when a directory holds more than one layout file",
    )
    build_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log placeholder writes and warnings",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "build":
        from jamroutes.cli._build import run_build

        run_build(args)
