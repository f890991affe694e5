"""jamroutes exception hierarchy.

Filesystem failures are not wrapped: ``FileNotFoundError``,
``PermissionError`` and other ``OSError`` subclasses reach the caller
unchanged.  These types cover the compiler's own failure modes.
"""


class JamRoutesError(Exception):
    """Base for all jamroutes-specific errors."""


class ConfigurationError(JamRoutesError):
    """Raised when ``RoutesConfig`` receives invalid values.

    Raised from ``RoutesConfig.__post_init__`` so a bad option fails
    before any directory is read.
    """


class DuplicateLayoutError(JamRoutesError):
    """A directory holds more than one layout file.

    Only raised when ``RoutesConfig.strict_layouts`` is enabled; otherwise
    the last layout file in listing order wins and a warning is logged.
    """

    def __init__(self, directory: str, files: tuple[str, ...]) -> None:
        self.directory = directory
        self.files = files
        listed = ", ".join(files)
        super().__init__(f"Multiple layout files in {directory!r}: {listed}")
