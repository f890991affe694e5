"""Synthesized pass-through layouts.

A directory with routable content but no ``layout`` file still needs a
wrapping layout entry.  ``PlaceholderLayouts`` maps a directory to a
generated layout that only renders its outlet, written once into a cache
directory under the app root and reused on later runs.

Writes are guarded by an existence check, not a lock: concurrent first
writes to the same file produce identical content.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kida import Environment

from jamroutes.fs import FileSystem
from jamroutes.routing.conventions import placeholder_name

logger = logging.getLogger("jamroutes.placeholders")

LAYOUT_SOURCE = """\
import { Outlet } from "{{ outlet_module }}";
export default function Layout() {
	return <Outlet />;
}
"""


def render_layout_source(outlet_module: str = "react-router") -> str:
    """Render the placeholder component source."""
    env = Environment(autoescape=False)
    return env.from_string(LAYOUT_SOURCE).render({"outlet_module": outlet_module})


class PlaceholderLayouts:
    """Write-once store of placeholder layouts, keyed by directory path.

    Calling the instance with a directory (relative to the app root)
    returns the placeholder's content reference, creating the file first
    if it is missing::

        layouts = PlaceholderLayouts(fs, "./app")
        await layouts("routes/users")  # ".react-router/layouts/users.layout.tsx"
    """

    def __init__(
        self,
        fs: FileSystem,
        root_directory: str | Path,
        *,
        layouts_dir: str = ".react-router/layouts",
        routes_dir: str = "routes",
        extension: str = ".tsx",
        outlet_module: str = "react-router",
    ) -> None:
        self._fs = fs
        self._cache_dir = Path(root_directory) / layouts_dir
        self._layouts_dir = layouts_dir.replace("\\", "/").strip("/")
        self._routes_dir = routes_dir
        self._extension = extension
        self._outlet_module = outlet_module
        self._source: str | None = None

    @property
    def source(self) -> str:
        if self._source is None:
            self._source = render_layout_source(self._outlet_module)
        return self._source

    def file_name(self, directory: str) -> str:
        return f"{placeholder_name(directory, self._routes_dir)}.layout{self._extension}"

    async def __call__(self, directory: str) -> str:
        file_name = self.file_name(directory)

        if not await self._fs.exists(self._cache_dir):
            await self._fs.make_directory(self._cache_dir, recursive=True)

        target = self._cache_dir / file_name
        if not await self._fs.exists(target):
            await self._fs.write_file(target, self.source)
            logger.debug("Wrote placeholder layout %s for %s", target, directory)

        return f"{self._layouts_dir}/{file_name}"
