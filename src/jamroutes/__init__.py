"""jamroutes — compile a routes directory into a router configuration.

Folder and file names under ``app/routes/`` define the URL tree:
``page`` files are index routes, ``layout`` files wrap their directory,
``[id]`` and ``[...slug]`` folders are dynamic segments, ``_group``
folders organise files without adding a segment, and ``not-found``
files become trailing ``*`` routes.

Basic usage::

    from jamroutes import RoutesConfig, compile_routes

    routes = compile_routes(RoutesConfig(root_directory="./app"))

From async code::

    from jamroutes import jam_routes

    routes = await jam_routes(RoutesConfig(ignored_file_patterns=("**/components/**",)))
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateLayoutError",
    "JamRoutesError",
    "RouteConfigEntry",
    "RouteNode",
    "RoutesConfig",
    "compile_routes",
    "index",
    "jam_routes",
    "layout",
    "route",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "jamroutes.errors",
    "DuplicateLayoutError": "jamroutes.errors",
    "JamRoutesError": "jamroutes.errors",
    "RouteConfigEntry": "jamroutes.routes",
    "RouteNode": "jamroutes.routing.types",
    "RoutesConfig": "jamroutes.config",
    "compile_routes": "jamroutes.compiler",
    "index": "jamroutes.routes",
    "jam_routes": "jamroutes.compiler",
    "layout": "jamroutes.routes",
    "route": "jamroutes.routes",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import jamroutes`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    module = importlib.import_module(module_name)
    return getattr(module, name)
