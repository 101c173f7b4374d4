"""Tests for routechain.routing.typed — TypedRoute query fallback."""

import pytest

from routechain.config import RouteConfig
from routechain.http.request import PathRequest
from routechain.routing.route import Route
from routechain.routing.typed import API_TYPES, TypedRoute


def _request(url: str) -> PathRequest:
    return PathRequest.from_url(url)


@pytest.fixture
def route() -> TypedRoute:
    return TypedRoute("api/:api_type")


class TestPathMatching:
    def test_type_from_path(self, route: TypedRoute) -> None:
        assert route.match(_request("/api/rest"))["api_type"] == "rest"

    def test_other_type_from_path(self, route: TypedRoute) -> None:
        assert route.match(_request("/api/soap"))["api_type"] == "soap"

    def test_path_value_not_checked_against_accepted(self, route: TypedRoute) -> None:
        assert route.match(_request("/api/invalid_type"))["api_type"] == "invalid_type"

    def test_requirement_applies_to_path(self) -> None:
        route = TypedRoute("api/:api_type", requirements={"api_type": "rest|soap"})
        assert route.match(_request("/api/rest")) is not None
        assert route.match(_request("/api/soap")) is not None
        assert route.match(_request("/api/graphql")) is None

    def test_plain_string_has_no_fallback(self, route: TypedRoute) -> None:
        assert route.match("api/rest")["api_type"] == "rest"
        assert route.match("other/path") is None


class TestQueryFallback:
    def test_query_used_when_path_misses(self, route: TypedRoute) -> None:
        match = route.match(_request("/some/path?type=rest"))
        assert match["api_type"] == "rest"
        assert match.matched_path == ""

    def test_path_wins_over_query(self, route: TypedRoute) -> None:
        assert route.match(_request("/api/rest?type=soap"))["api_type"] == "rest"

    def test_invalid_query_value(self, route: TypedRoute) -> None:
        assert route.match(_request("/some/path?type=invalid")) is None

    def test_no_query_value(self, route: TypedRoute) -> None:
        assert route.match(_request("/other/path")) is None

    def test_query_merged_with_defaults(self) -> None:
        route = TypedRoute("api/:api_type", defaults={"format": "xml"})
        assert route.match(_request("/other/path?type=rest")).params == {
            "format": "xml",
            "api_type": "rest",
        }

    def test_custom_accepted_set(self) -> None:
        route = TypedRoute("api/:api_type", accepted={"rest", "graphql"})
        assert route.match(_request("/x?type=graphql"))["api_type"] == "graphql"
        assert route.match(_request("/x?type=soap")) is None

    def test_custom_variable_and_param(self) -> None:
        route = TypedRoute("fmt/:format", variable="format", query_param="f", accepted={"json"})
        assert route.match(_request("/x?f=json")).params == {"format": "json"}

    def test_builtin_accepted_set(self, route: TypedRoute) -> None:
        assert route.accepted == API_TYPES
        assert "rest" in API_TYPES
        assert route.variable == "api_type"


class TestPartialAndDefaults:
    def test_partial(self, route: TypedRoute) -> None:
        match = route.match(_request("/api/rest/extra/segments"), partial=True)
        assert match["api_type"] == "rest"
        assert match.matched_path == "api/rest"

    def test_defaults_applied(self) -> None:
        route = TypedRoute("api/:api_type", defaults={"format": "json", "version": "v1"})
        assert route.match(_request("/api/rest")).params == {
            "format": "json",
            "version": "v1",
            "api_type": "rest",
        }

    def test_from_config(self) -> None:
        route = TypedRoute.from_config({"route": "api/:api_type", "defaults": {}, "reqs": {}})
        assert isinstance(route, TypedRoute)
        assert route.match(_request("/x?type=rest"))["api_type"] == "rest"

    def test_from_config_with_options(self) -> None:
        route = TypedRoute.from_config(RouteConfig("api/:api_type"), accepted={"soap"})
        assert route.match(_request("/x?type=soap"))["api_type"] == "soap"


class TestChaining:
    def test_chain_with_route(self, route: TypedRoute) -> None:
        chain = route.chain(Route("products/:id"))
        assert chain.match(_request("/api/rest/products/123")).params == {"api_type": "rest", "id": "123"}

    def test_chain_with_string(self, route: TypedRoute) -> None:
        chain = route.chain("customers/:customer_id")
        match = chain.match(_request("/api/rest/customers/42"))
        assert match.params == {"api_type": "rest", "customer_id": "42"}

    def test_chain_multiple(self, route: TypedRoute) -> None:
        chain = route.chain(Route("v/:version")).chain(Route(":resource/:id"))
        assert chain.match(_request("/api/rest/v/2/products/456")).params == {
            "api_type": "rest",
            "version": "2",
            "resource": "products",
            "id": "456",
        }

    def test_endpoint_defaults(self) -> None:
        route = TypedRoute("api/:api_type", defaults={"module": "api", "controller": "index"})
        chain = route.chain(Route(":resource/:id", {"action": "view"}))
        assert chain.match(_request("/api/rest/orders/789")).params == {
            "module": "api",
            "controller": "index",
            "api_type": "rest",
            "resource": "orders",
            "id": "789",
            "action": "view",
        }

    def test_subresources(self, route: TypedRoute) -> None:
        chain = route.chain("customers/:customer_id/addresses/:address_id")
        match = chain.match(_request("/api/rest/customers/100/addresses/5"))
        assert match.params == {"api_type": "rest", "customer_id": "100", "address_id": "5"}

    def test_fallback_inside_chain_consumes_nothing(self, route: TypedRoute) -> None:
        chain = route.chain("products/:id")
        match = chain.match(_request("/products/7?type=rest"))
        assert match.params == {"api_type": "rest", "id": "7"}

    def test_fallback_does_not_skip_path_segments(self, route: TypedRoute) -> None:
        chain = route.chain("products/:id")
        assert chain.match(_request("/junk/products/7?type=rest")) is None

    def test_path_beats_query_in_chain(self, route: TypedRoute) -> None:
        chain = route.chain("products/:id")
        match = chain.match(_request("/api/soap/products/1?type=rest"))
        assert match.params == {"api_type": "soap", "id": "1"}

    def test_path_beats_query_in_partial_chain(self, route: TypedRoute) -> None:
        chain = route.chain(":resource")
        match = chain.match(_request("/api/soap/products?type=rest"), partial=True)
        assert match.params == {"api_type": "soap", "resource": "products"}
        assert match.matched_path == "api/soap/products"
