"""Tests for the httpx portal client (mocked with respx)."""

import json
import logging

import httpx
import respx

from adapters.portal_client import PortalClient
from core.domain.models import Cart
from core.domain.results import Failure, Success
from payloads import CART_ID, SERVER, edit_frame, graph, updated

LOGGER = logging.getLogger("tests.portal")


def _client(auth: str) -> PortalClient:
    return PortalClient(SERVER, auth, logger=LOGGER)


@respx.mock
async def test_search_ids_preserves_order(auth):
    route = respx.get(f"{SERVER}/search/").mock(return_value=httpx.Response(200, json=graph("/a/2", "/a/1")))

    async with _client(auth) as client:
        result = await client.search_ids("type=Experiment&status=released")

    assert result == Success(["/a/2", "/a/1"])
    request = route.calls.last.request
    assert request.url.params["type"] == "Experiment"
    assert request.url.params["status"] == "released"
    assert request.url.params["limit"] == "all"
    assert request.headers["Authorization"] == auth
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Content-Type"] == "application/json"


@respx.mock
async def test_search_ids_extracts_graph_ids(auth):
    respx.get(f"{SERVER}/search/").mock(
        return_value=httpx.Response(200, json={"@graph": [{"@id": "/a/1"}, {"@id": "/a/2"}]})
    )

    async with _client(auth) as client:
        result = await client.search_ids("type=Experiment")

    assert isinstance(result, Success)
    assert result.value == ["/a/1", "/a/2"]


@respx.mock
async def test_search_http_error_is_soft_failure(auth, caplog):
    respx.get(f"{SERVER}/search/").mock(return_value=httpx.Response(403, text="Forbidden"))

    with caplog.at_level(logging.ERROR, logger="tests.portal"):
        async with _client(auth) as client:
            result = await client.search_ids("type=Experiment")

    assert isinstance(result, Failure)
    assert result.operation == "search"
    assert result.status_code == 403
    assert "Forbidden" in result.message
    assert any("search" in record.getMessage() for record in caplog.records)


@respx.mock
async def test_search_transport_error(auth):
    respx.get(f"{SERVER}/search/").mock(side_effect=httpx.ConnectError("connection refused"))

    async with _client(auth) as client:
        result = await client.search_ids("type=Experiment")

    assert isinstance(result, Failure)
    assert result.status_code is None
    assert "connection refused" in result.message


@respx.mock
async def test_search_invalid_json(auth):
    respx.get(f"{SERVER}/search/").mock(return_value=httpx.Response(200, text="<html>oops</html>"))

    async with _client(auth) as client:
        result = await client.search_ids("type=Experiment")

    assert isinstance(result, Failure)
    assert "invalid JSON" in result.message


@respx.mock
async def test_search_without_graph(auth):
    respx.get(f"{SERVER}/search/").mock(return_value=httpx.Response(200, json={"notification": "Success"}))

    async with _client(auth) as client:
        result = await client.search_ids("type=Experiment")

    assert isinstance(result, Failure)
    assert "unexpected response" in result.message


@respx.mock
async def test_get_writeable_cart(auth):
    route = respx.get(f"{SERVER}{CART_ID}", params={"frame": "edit"}).mock(
        return_value=httpx.Response(200, json=edit_frame(["/old/1"]))
    )

    async with _client(auth) as client:
        result = await client.get_writeable_cart(CART_ID)

    assert route.called
    assert isinstance(result, Success)
    cart = result.value
    assert cart.identifier == "abc"
    assert cart.elements == ["/old/1"]
    assert cart.to_payload()["status"] == "current"


@respx.mock
async def test_get_writeable_cart_not_found(auth):
    respx.get(f"{SERVER}{CART_ID}").mock(return_value=httpx.Response(404, json={"status": "error"}))

    async with _client(auth) as client:
        result = await client.get_writeable_cart(CART_ID)

    assert isinstance(result, Failure)
    assert result.operation == "get_cart"
    assert result.status_code == 404


@respx.mock
async def test_write_cart_sends_full_cart(auth):
    route = respx.put(f"{SERVER}/carts/abc").mock(
        return_value=httpx.Response(200, json=updated(["/x/1", "/x/2"]))
    )
    cart = Cart.model_validate(edit_frame())
    cart.elements = ["/x/1", "/x/2"]

    async with _client(auth) as client:
        result = await client.write_cart(cart)

    assert result == Success(["/x/1", "/x/2"])
    body = json.loads(route.calls.last.request.content)
    assert body["elements"] == ["/x/1", "/x/2"]
    assert body["name"] == "Test cart"
    assert body["status"] == "current"


@respx.mock
async def test_write_cart_empty_graph(auth):
    respx.put(f"{SERVER}/carts/abc").mock(return_value=httpx.Response(200, json={"@graph": []}))

    async with _client(auth) as client:
        result = await client.write_cart(Cart.model_validate(edit_frame()))

    assert isinstance(result, Failure)
    assert result.operation == "write_cart"


@respx.mock
async def test_search_cart(auth):
    route = respx.get(f"{SERVER}/cart-search/").mock(return_value=httpx.Response(200, json=graph("/x/2", "/x/1")))

    async with _client(auth) as client:
        result = await client.search_cart(CART_ID)

    assert result == Success(["/x/2", "/x/1"])
    params = route.calls.last.request.url.params
    assert params["cart"] == CART_ID
    assert params["limit"] == "all"


@respx.mock
async def test_search_cart_server_error(auth):
    respx.get(f"{SERVER}/cart-search/").mock(return_value=httpx.Response(500, text="boom"))

    async with _client(auth) as client:
        result = await client.search_cart(CART_ID)

    assert isinstance(result, Failure)
    assert result.operation == "search_cart"
    assert str(result) == "search_cart: HTTP 500 boom"


@respx.mock
async def test_write_cart_without_elements(auth):
    respx.put(f"{SERVER}/carts/abc").mock(
        return_value=httpx.Response(200, json={"@graph": [{"@id": CART_ID}]})
    )

    async with _client(auth) as client:
        result = await client.write_cart(Cart.model_validate(edit_frame()))

    assert isinstance(result, Failure)
    assert result.operation == "write_cart"
    assert "unexpected response" in result.message


@respx.mock
async def test_get_writeable_cart_follows_redirect(auth):
    respx.get(f"{SERVER}/carts/abc", params={"frame": "edit"}).mock(
        return_value=httpx.Response(301, headers={"Location": f"{SERVER}{CART_ID}?frame=edit"})
    )
    target = respx.get(f"{SERVER}{CART_ID}", params={"frame": "edit"}).mock(
        return_value=httpx.Response(200, json=edit_frame(["/old/1"]))
    )

    async with _client(auth) as client:
        result = await client.get_writeable_cart("/carts/abc")

    assert target.called
    assert isinstance(result, Success)
    assert result.value.elements == ["/old/1"]
