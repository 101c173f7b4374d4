"""Minimal immutable request: a path plus query parameters.

Routes only need the path and, for ``TypedRoute``, a query lookup. Any
object with a ``path`` attribute and a ``get_query_param`` method works;
``PathRequest`` is the ready-made one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from routechain.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class PathRequest:
    """An immutable path + query pair.

    Usage::

        request = PathRequest.from_url("/api/rest/products/1?type=rest")
        request.path                    # "api/rest/products/1"
        request.get_query_param("type") # "rest"
    """

    path: str
    query: QueryParams = field(default_factory=QueryParams)

    @classmethod
    def from_url(cls, url: str) -> PathRequest:
        """Split a request target (path and optional query string).

        Scheme and host are ignored. Leading slashes are stripped from the
        path so matched paths read the same as route patterns.
        """
        parts = urlsplit(url)
        return cls(path=parts.path.lstrip("/"), query=QueryParams(parts.query))

    def get_query_param(self, name: str) -> str | None:
        """Return the first value of query parameter *name*, or None."""
        return self.query.get(name)
