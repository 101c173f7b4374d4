"""Matchable and RequestLike protocols.

Route, Chain and TypedRoute share no base class with each other's
internals; a Chain only needs its two sides to have this shape. The
framework checks the shape, not the lineage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from routechain.routing.chain import Chain
    from routechain.routing.route import RouteMatch


# Looks up a query parameter by name; None when absent
type QueryLookup = Callable[[str], str | None]


@runtime_checkable
class RequestLike(Protocol):
    """Anything carrying a path and a query parameter lookup.

    ``routechain.http.request.PathRequest`` is the built-in implementation;
    framework request objects can be adapted with a thin wrapper.
    """

    @property
    def path(self) -> str: ...

    def get_query_param(self, name: str) -> str | None: ...


class Matchable(Protocol):
    """Something that can match a path: a Route, a Chain or a TypedRoute.

    ``match`` accepts a path string or a ``RequestLike``. ``match_path``
    is the primitive used when composing: the path is passed explicitly
    and the query lookup travels alongside it.
    """

    def match(self, subject: str | RequestLike, partial: bool = False) -> RouteMatch | None: ...

    def match_path(
        self,
        path: str,
        partial: bool = False,
        query: QueryLookup | None = None,
    ) -> RouteMatch | None: ...

    @property
    def defaults(self) -> Mapping[str, str]: ...

    def get_default(self, name: str, default: str | None = None) -> str | None: ...

    def chain(self, other: Matchable | str, separator: str = "/") -> Chain: ...


def split_subject(subject: str | RequestLike) -> tuple[str, QueryLookup | None]:
    """Return the path of *subject* and its query lookup (None for strings)."""
    if isinstance(subject, str):
        return subject, None
    return subject.path, subject.get_query_param


class Composable(ABC):
    """Shared ``match`` and ``chain`` for Route and Chain.

    Subclasses provide ``match_path``.
    """

    __slots__ = ()

    @abstractmethod
    def match_path(
        self,
        path: str,
        partial: bool = False,
        query: QueryLookup | None = None,
    ) -> RouteMatch | None: ...

    def match(self, subject: str | RequestLike, partial: bool = False) -> RouteMatch | None:
        """Match a path string or a request. Returns None on a miss."""
        path, query = split_subject(subject)
        return self.match_path(path, partial, query)

    def chain(self, other: Matchable | str, separator: str = "/") -> Chain:
        """Return a Chain matching this, then *separator*, then *other*.

        A string *other* is compiled into a plain ``Route``.
        """
        from routechain.routing.chain import Chain
        from routechain.routing.route import Route

        if isinstance(other, str):
            other = Route(other)
        return Chain(self, other, separator)
