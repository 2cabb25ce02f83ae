"""PeerClient — probe and create mapping over httpx.MockTransport."""

import httpx
import pytest

from deadmedia.core.errors import TransferFailedError
from deadmedia.infrastructure.peer_client import PeerClient

TARGET = "http://peer:3001/media"


def _client(handler):
    return PeerClient(timeout_seconds=1.0, transport=httpx.MockTransport(handler))


@pytest.mark.parametrize("status,expected", [(200, True), (204, True), (404, False), (500, False)])
async def test_exists_follows_status(status, expected):
    client = _client(lambda request: httpx.Response(status))
    assert await client.exists(TARGET) is expected
    await client.aclose()


async def test_exists_is_false_on_network_error():
    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    client = _client(refuse)
    assert await client.exists(TARGET) is False
    await client.aclose()


async def test_exists_is_false_on_timeout():
    def stall(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = _client(stall)
    assert await client.exists(TARGET) is False
    await client.aclose()


async def test_create_posts_json_and_returns_body():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["body"] = request.read()
        return httpx.Response(201, json={"id": "/media/0", "name": "Akira"})

    client = _client(handler)
    body = await client.create(TARGET, {"id": 1, "name": "Akira"})
    await client.aclose()

    assert seen["method"] == "POST"
    assert b'"name":"Akira"' in seen["body"].replace(b" ", b"")
    assert body == {"id": "/media/0", "name": "Akira"}


@pytest.mark.parametrize("response", [
    httpx.Response(400),
    httpx.Response(500),
    httpx.Response(201, content=b"not json"),
    httpx.Response(201, json=["not", "an", "object"]),
])
async def test_create_failures_raise_transfer_failed(response):
    client = _client(lambda request: response)
    with pytest.raises(TransferFailedError):
        await client.create(TARGET, {"name": "Akira"})
    await client.aclose()


async def test_create_network_error_raises_transfer_failed():
    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    client = _client(refuse)
    with pytest.raises(TransferFailedError):
        await client.create(TARGET, {"name": "Akira"})
    await client.aclose()


async def test_create_follows_slash_redirect():
    def handler(request):
        if request.url.path == "/media/":
            return httpx.Response(307, headers={"location": TARGET})
        return httpx.Response(201, json={"id": "/media/0"})

    client = _client(handler)
    assert await client.create(TARGET + "/", {"name": "Akira"}) == {"id": "/media/0"}
    await client.aclose()
