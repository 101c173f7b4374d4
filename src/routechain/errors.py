"""Routechain exception hierarchy.

A routing miss is not an error: ``match`` returns ``None``. Exceptions are
reserved for broken route definitions, which should stop the process from
serving rather than quietly never matching.
"""


class RoutingError(Exception):
    """Base for all routechain-specific errors."""


class ConfigurationError(RoutingError):
    """Raised when a route definition is invalid.

    Covers malformed requirement regexes, duplicate or empty variable
    names, and route config mappings with missing or unknown keys.
    Raised when the route is constructed, never from ``match``.
    """
