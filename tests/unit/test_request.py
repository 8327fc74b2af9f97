"""
Tests for the request contract.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from api_connector import BaseRequest, HttpMethod, Request

from ..fixtures.greatfood import GetMenuProductsRequest, GetTokenRequest, Product, UpdateProductRequest


@dataclass(frozen=True)
class GetUsersRequest(BaseRequest):
    def endpoint(self) -> str:
        return "/users"

    def method(self) -> HttpMethod:
        return HttpMethod.GET


class PlainRequest:
    """Satisfies the protocol without inheriting from BaseRequest."""

    def endpoint(self):
        return "/plain"

    def method(self):
        return "GET"

    def headers(self):
        return {}

    def body(self):
        return {}


class TestBaseRequest:
    def test_defaults_are_empty(self):
        request = GetUsersRequest()

        assert request.headers() == {}
        assert request.body() == {}

    def test_abstract_methods_required(self):
        class Incomplete(BaseRequest):
            def endpoint(self):
                return "/x"

        with pytest.raises(TypeError):
            Incomplete()

    def test_satisfies_protocol(self):
        assert isinstance(GetUsersRequest(), Request)

    def test_plain_object_satisfies_protocol(self):
        assert isinstance(PlainRequest(), Request)

    def test_object_missing_capability_does_not_satisfy_protocol(self):
        class NoBody:
            def endpoint(self):
                return "/x"

            def method(self):
                return "GET"

            def headers(self):
                return {}

        assert not isinstance(NoBody(), Request)


class TestConcreteRequests:
    def test_path_parameters_are_interpolated(self):
        assert GetMenuProductsRequest(3).endpoint() == "/menu/3/products"

    def test_update_request_body(self):
        request = UpdateProductRequest(7, 84, Product(id=84, name="Chips"))

        assert request.endpoint() == "/menu/7/product/84"
        assert request.method() is HttpMethod.PUT
        assert request.body() == {"id": 84, "name": "Chips"}

    def test_token_request(self):
        request = GetTokenRequest("1337", "s3cret")

        assert request.method() is HttpMethod.POST
        assert request.headers() == {"Content-Type": "application/x-www-form-urlencoded"}
        assert request.body() == {
            "client_id": "1337",
            "client_secret": "s3cret",
            "grant_type": "client_credentials",
        }

    def test_requests_are_immutable(self):
        request = GetMenuProductsRequest(3)

        with pytest.raises(FrozenInstanceError):
            request.menu_id = 4
