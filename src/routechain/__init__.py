"""Routechain — route pattern matching and chaining for API dispatch.

Patterns like ``api/:api_type/products/:id`` capture path variables,
validate them against requirements, and fill in defaults. Routes compose
into chains, and ``TypedRoute`` falls back to a query parameter.

Basic usage::

    from routechain import Route

    route = Route("api/:api_type").chain(Route("products/:id", requirements={"id": r"\\d+"}))
    match = route.match("api/rest/products/123")
    match.params  # {"api_type": "rest", "id": "123"}
"""

__version__ = "0.1.0"
__all__ = [
    "API_TYPES",
    "Chain",
    "ConfigurationError",
    "PathRequest",
    "Pattern",
    "QueryParams",
    "Route",
    "RouteConfig",
    "RouteMatch",
    "RoutingError",
    "TypedRoute",
    "compile_pattern",
]


# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "API_TYPES": "routechain.routing.typed",
    "Chain": "routechain.routing.chain",
    "ConfigurationError": "routechain.errors",
    "PathRequest": "routechain.http.request",
    "Pattern": "routechain.routing.pattern",
    "QueryParams": "routechain.http.query",
    "Route": "routechain.routing.route",
    "RouteConfig": "routechain.config",
    "RouteMatch": "routechain.routing.route",
    "RoutingError": "routechain.errors",
    "TypedRoute": "routechain.routing.typed",
    "compile_pattern": "routechain.routing.pattern",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routechain`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
