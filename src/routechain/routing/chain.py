"""Chain — two matchables joined by a literal separator.

The left side always matches a prefix of the path; the right side matches
what follows the separator. Chains nest: either side may itself be a
Chain, so ``Route("api/:api_type").chain("v/:version").chain(":resource/:id")``
builds a left-leaning tree of three routes.
"""

from __future__ import annotations

from collections.abc import Iterator

from routechain.routing.protocol import Composable, Matchable, QueryLookup
from routechain.routing.route import RouteMatch


class Chain(Composable):
    """Match ``left``, then ``separator``, then ``right``.

    Params from both sides are merged; the right side wins on a name
    collision, for defaults as well as captured values.

    Usage::

        chain = Chain(Route("api/:api_type"), Route("products/:id"))
        chain.match("api/rest/products/123").params
        # {"api_type": "rest", "id": "123"}
    """

    __slots__ = ("left", "right", "separator")

    def __init__(self, left: Matchable, right: Matchable, separator: str = "/") -> None:
        self.left = left
        self.right = right
        self.separator = separator

    def __repr__(self) -> str:
        return f"Chain({self.left!r}, {self.right!r}, separator={self.separator!r})"

    @property
    def defaults(self) -> dict[str, str]:
        """Union of both sides' defaults, right side taking precedence."""
        return {**self.left.defaults, **self.right.defaults}

    def get_default(self, name: str, default: str | None = None) -> str | None:
        return self.defaults.get(name, default)

    def _split_points(self, path: str) -> Iterator[tuple[str, bool, str]]:
        """Yield ``(prefix, separator_used, remainder)`` candidates in order.

        Splits at each occurrence of the separator come first, or at every
        position when the separator is empty. The last candidate lets the
        left side consume nothing, with the separator omitted, so a query
        fallback on the left never beats a real path match.
        """
        sep = self.separator
        if sep:
            start = path.find(sep)
            while start != -1:
                yield path[:start], True, path[start + len(sep) :]
                start = path.find(sep, start + 1)
        else:
            for i in range(1, len(path) + 1):
                yield path[:i], True, path[i:]

        yield "", False, path

    def match_path(
        self,
        path: str,
        partial: bool = False,
        query: QueryLookup | None = None,
    ) -> RouteMatch | None:
        """Match *path* against left + separator + right.

        The left side is matched in partial mode against each candidate
        prefix and must consume that prefix exactly. The first candidate on
        which both sides match wins.
        """
        for prefix, separator_used, remainder in self._split_points(path):
            left = self.left.match_path(prefix, True, query)
            if left is None or left.matched_path != prefix:
                continue

            right = self.right.match_path(remainder, partial, query)
            if right is None:
                continue

            matched = right.matched_path
            if separator_used:
                matched = prefix + self.separator + matched
            return RouteMatch(params={**left.params, **right.params}, matched_path=matched)

        return None
