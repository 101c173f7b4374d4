"""Route configuration.

RouteConfig is a frozen dataclass — one route definition as it appears in
static configuration, validated once and handed to ``Route.from_config``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from routechain.errors import ConfigurationError

# Keys understood in a route config mapping
PARAM_ROUTE = "route"
PARAM_DEFAULTS = "defaults"
PARAM_REQS = "reqs"

_KNOWN_KEYS = frozenset({PARAM_ROUTE, PARAM_DEFAULTS, PARAM_REQS})


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """A single route definition. Immutable after creation.

    Build it directly::

        config = RouteConfig("api/:api_type", defaults={"format": "json"})

    or from a plain mapping loaded from a config file::

        config = RouteConfig.from_mapping({"route": "api/:api_type", "reqs": {}})
    """

    route: str
    defaults: Mapping[str, str] = field(default_factory=dict)
    reqs: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RouteConfig:
        """Validate *data* and build a RouteConfig from it.

        Raises ``ConfigurationError`` if ``route`` is missing or not a
        string, or if *data* holds keys other than ``route``, ``defaults``
        and ``reqs``.
        """
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            msg = (
                f"Unknown route config key(s): {', '.join(sorted(unknown))}. "
                f"Expected {PARAM_ROUTE!r}, {PARAM_DEFAULTS!r}, {PARAM_REQS!r}."
            )
            raise ConfigurationError(msg)

        route = data.get(PARAM_ROUTE)
        if not isinstance(route, str):
            msg = f"Route config requires a string {PARAM_ROUTE!r}, got {route!r}."
            raise ConfigurationError(msg)

        defaults = data.get(PARAM_DEFAULTS) or {}
        reqs = data.get(PARAM_REQS) or {}
        for key, value in ((PARAM_DEFAULTS, defaults), (PARAM_REQS, reqs)):
            if not isinstance(value, Mapping):
                msg = f"Route config {key!r} must be a mapping, got {type(value).__name__}."
                raise ConfigurationError(msg)

        return cls(route=route, defaults=dict(defaults), reqs=dict(reqs))
