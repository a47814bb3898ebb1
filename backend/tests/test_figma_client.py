import asyncio

import httpx
import pytest

from backend.figma_client import (
    FigmaAuthError,
    FigmaClient,
    FigmaDecodeError,
    FigmaError,
    FigmaNetworkError,
    FigmaNotFoundError,
    FigmaProtocolError,
)
from backend.tests.utils.node_factories import figma_file, raw_node


def _client_for(handler) -> FigmaClient:
    return FigmaClient("secret-token", transport=httpx.MockTransport(handler))


def _fetch(client: FigmaClient, file_key: str = "abc123"):
    return asyncio.run(client.fetch_file(file_key))


def test_requires_token():
    with pytest.raises(ValueError, match="Personal Access Token"):
        FigmaClient("")


def test_requires_file_key():
    client = _client_for(lambda request: httpx.Response(200, json={}))
    with pytest.raises(ValueError, match="file key"):
        _fetch(client, "")


def test_fetch_file_sends_token_and_returns_payload():
    seen = {}
    body = figma_file(raw_node("b1", "Submit Button"))

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["token"] = request.headers.get("X-Figma-Token")
        return httpx.Response(200, json=body)

    assert _fetch(_client_for(handler)) == body
    assert seen["url"] == "https://api.figma.com/v1/files/abc123"
    assert seen["token"] == "secret-token"


@pytest.mark.parametrize(
    "status, error_type",
    [
        (401, FigmaAuthError),
        (403, FigmaAuthError),
        (404, FigmaNotFoundError),
        (429, FigmaProtocolError),
        (500, FigmaProtocolError),
    ],
)
def test_status_codes_map_to_error_kinds(status, error_type):
    client = _client_for(lambda request: httpx.Response(status, json={"err": "x"}))
    with pytest.raises(error_type) as excinfo:
        _fetch(client)
    assert isinstance(excinfo.value, FigmaError)


def test_protocol_error_keeps_status_code():
    client = _client_for(lambda request: httpx.Response(503))
    with pytest.raises(FigmaProtocolError) as excinfo:
        _fetch(client)
    assert excinfo.value.status_code == 503


def test_transport_failure_is_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FigmaNetworkError, match="Network error"):
        _fetch(_client_for(handler))


@pytest.mark.parametrize("content", [b"<html>not json</html>", b"[1, 2, 3]"])
def test_unparseable_body_is_decode_error(content):
    client = _client_for(lambda request: httpx.Response(200, content=content))
    with pytest.raises(FigmaDecodeError):
        _fetch(client)


def test_extract_nodes_reads_document_children():
    nodes = [raw_node("b1", "Submit Button")]
    assert FigmaClient.extract_nodes(figma_file(*nodes)) == nodes


@pytest.mark.parametrize(
    "file_data",
    [None, {}, {"document": None}, {"document": {}}, {"document": {"children": "x"}}],
)
def test_extract_nodes_defaults_to_empty(file_data):
    assert FigmaClient.extract_nodes(file_data) == []
