"""Routing — route patterns, chains and typed routes.

Routes are built once from static configuration and matched per request.
A miss is ``None``; a hit is a ``RouteMatch``.
"""

from routechain.routing.chain import Chain
from routechain.routing.pattern import Pattern, Segment, compile_pattern
from routechain.routing.protocol import Matchable, RequestLike
from routechain.routing.route import Route, RouteMatch
from routechain.routing.typed import API_TYPES, TypedRoute

__all__ = [
    "API_TYPES",
    "Chain",
    "Matchable",
    "Pattern",
    "RequestLike",
    "Route",
    "RouteMatch",
    "Segment",
    "TypedRoute",
    "compile_pattern",
]
