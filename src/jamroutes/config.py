"""Compiler configuration.

RoutesConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, validated once in ``__post_init__``.
"""

from dataclasses import dataclass
from pathlib import Path, PurePath

from jamroutes.errors import ConfigurationError

DEFAULT_EXTENSIONS = (".tsx", ".ts", ".jsx", ".js")


@dataclass(frozen=True, slots=True)
class RoutesConfig:
    """Route compiler configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RoutesConfig(
            root_directory="frontend/app",
            ignored_file_patterns=("**/components/**",),
        )
    """

    # Root of the app; every content reference is relative to it
    root_directory: str | Path = "./app"

    # Directory under root_directory holding the route tree
    routes_dir: str = "routes"

    # Glob patterns tested against paths relative to root_directory
    ignored_file_patterns: tuple[str, ...] = ()

    # Placeholder layout cache, relative to root_directory
    layouts_dir: str = ".react-router/layouts"

    # Source extensions recognised for page/layout/not-found files
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    # Module the generated placeholder layouts import ``Outlet`` from
    outlet_module: str = "react-router"

    # Raise DuplicateLayoutError instead of keeping the last layout file
    strict_layouts: bool = False

    def __post_init__(self) -> None:
        # Accept lists from callers; store tuples so the config stays hashable
        if not isinstance(self.ignored_file_patterns, tuple):
            object.__setattr__(self, "ignored_file_patterns", tuple(self.ignored_file_patterns))
        if not isinstance(self.extensions, tuple):
            object.__setattr__(self, "extensions", tuple(self.extensions))

        if not self.routes_dir:
            raise ConfigurationError("routes_dir must not be empty")
        for name in ("routes_dir", "layouts_dir"):
            value = getattr(self, name)
            if PurePath(value).is_absolute():
                raise ConfigurationError(
                    f"{name} must be relative to root_directory, got {value!r}"
                )
        if not self.layouts_dir:
            raise ConfigurationError("layouts_dir must not be empty")

        if not self.extensions:
            raise ConfigurationError("extensions must list at least one suffix")
        for ext in self.extensions:
            if not isinstance(ext, str) or not ext.startswith(".") or len(ext) < 2:
                raise ConfigurationError(f"Invalid extension {ext!r}: expected e.g. '.tsx'")

        for pattern in self.ignored_file_patterns:
            if not isinstance(pattern, str) or not pattern:
                raise ConfigurationError(f"Invalid ignore pattern {pattern!r}")

    @property
    def routes_path(self) -> Path:
        """Absolute-or-relative filesystem path of the routes directory."""
        return Path(self.root_directory) / self.routes_dir

    @property
    def placeholder_extension(self) -> str:
        """Suffix for generated layouts. ``.tsx`` when enabled, else the first extension."""
        if ".tsx" in self.extensions:
            return ".tsx"
        return self.extensions[0]
