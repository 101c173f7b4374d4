"""TypedRoute — a route whose discriminator may also come from the query string.

``api/:api_type`` normally carries the API type in the path. When the path
does not match, the type is read from the ``type`` query parameter instead,
but only values from a closed set are accepted there: they never went
through the pattern.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from routechain.routing.pattern import Pattern
from routechain.routing.protocol import QueryLookup
from routechain.routing.route import Route, RouteMatch

logger = logging.getLogger("routechain.routing")

# API types accepted from the query string fallback
API_TYPE_REST = "rest"
API_TYPES: frozenset[str] = frozenset({API_TYPE_REST})


class TypedRoute(Route):
    """Route with a query-parameter fallback for one variable.

    Usage::

        route = TypedRoute("api/:api_type")
        route.match(PathRequest.from_url("/api/rest"))["api_type"]         # "rest"
        route.match(PathRequest.from_url("/other?type=rest"))["api_type"]  # "rest"
        route.match(PathRequest.from_url("/other?type=bogus"))             # None

    A path match always wins over the query parameter. Values taken from
    the path are only checked by an explicit requirement, if any.
    """

    __slots__ = ("_accepted", "_query_param", "_variable")

    def __init__(
        self,
        pattern: str | Pattern,
        defaults: Mapping[str, str] | None = None,
        requirements: Mapping[str, str] | None = None,
        *,
        variable: str = "api_type",
        query_param: str = "type",
        accepted: Iterable[str] = API_TYPES,
    ) -> None:
        super().__init__(pattern, defaults, requirements)
        self._variable = variable
        self._query_param = query_param
        self._accepted = frozenset(accepted)

    @property
    def variable(self) -> str:
        return self._variable

    @property
    def accepted(self) -> frozenset[str]:
        return self._accepted

    def match_path(
        self,
        path: str,
        partial: bool = False,
        query: QueryLookup | None = None,
    ) -> RouteMatch | None:
        result = super().match_path(path, partial, query)
        if result is not None or query is None:
            return result

        value = query(self._query_param)
        if value is None or value not in self._accepted:
            return None

        logger.debug("Resolved %s=%r from query parameter %r", self._variable, value, self._query_param)
        # Nothing was consumed from the path
        return RouteMatch(params={**self._defaults, self._variable: value}, matched_path="")
