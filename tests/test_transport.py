"""Wire-level tests: RecoClient over HttpxTransportAdapter and httpx.MockTransport."""

import httpx
import pytest

from recosdk.adapters.transport.httpx_transport import HttpxTransportAdapter
from recosdk.client import RecoClient
from recosdk.config import resolve_connection

from tests.conftest import API_KEY, PROJECT_ENDPOINT, PROJECT_ID, WireRecorder


@pytest.fixture
async def wire_client(mock_transport: httpx.MockTransport):
    config = resolve_connection(API_KEY, project_id=PROJECT_ID)
    client = RecoClient(
        api_key=API_KEY,
        project_id=PROJECT_ID,
        transport=HttpxTransportAdapter(config, transport=mock_transport),
    )
    yield client
    await client.aclose()


@pytest.mark.asyncio
async def test_recommendations_request_on_the_wire(wire_client: RecoClient, wire: WireRecorder):
    payload = {"recommendations": [{"item_id": "item-1", "score": 0.5}], "recommendation_id": "rec-1"}
    wire.responses.append(httpx.Response(200, json=payload))

    result = await wire_client.get_recommendations({"user_id": "u1", "limit": 10})

    request = wire.requests[0]
    assert request.method == "POST"
    assert str(request.url) == f"{PROJECT_ENDPOINT}/recommendations"
    assert request.headers["x-api-key"] == API_KEY
    assert request.headers["content-type"] == "application/json"
    assert wire.body() == {"user_id": "u1", "limit": 10}
    assert result.model_dump(exclude_unset=True) == payload


@pytest.mark.asyncio
async def test_delete_carries_headers_without_body(wire_client: RecoClient, wire: WireRecorder):
    await wire_client.delete_user("user-456")

    request = wire.requests[0]
    assert request.method == "DELETE"
    assert request.url.path == "/api/v1/projects/test-project-id/users/user-456"
    assert request.headers["x-api-key"] == API_KEY
    assert request.headers["content-type"] == "application/json"
    assert wire.body() is None


@pytest.mark.asyncio
async def test_bulk_delete_body(wire_client: RecoClient, wire: WireRecorder):
    await wire_client.batch_delete_items(["item-1", "item-2"])
    assert wire.requests[0].url.path.endswith("/items/bulk-delete")
    assert wire.body() == {"item_ids": ["item-1", "item-2"]}


@pytest.mark.asyncio
async def test_custom_base_url_used_verbatim(mock_transport: httpx.MockTransport, wire: WireRecorder):
    config = resolve_connection(API_KEY, project_id=PROJECT_ID, base_url="http://localhost:3000/reco")
    transport = HttpxTransportAdapter(config, transport=mock_transport)
    async with RecoClient(api_key=API_KEY, base_url=config.base_url, transport=transport) as client:
        await client.upsert_item({"item_id": "item-1"})

    assert str(wire.requests[0].url) == "http://localhost:3000/reco/items"


@pytest.mark.asyncio
async def test_error_status_propagates(wire_client: RecoClient, wire: WireRecorder):
    wire.responses.append(httpx.Response(422, json={"detail": "bad item"}))

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await wire_client.upsert_item({"item_id": "item-1"})

    assert exc_info.value.response.status_code == 422
    assert exc_info.value.response.json() == {"detail": "bad item"}
    assert len(wire.requests) == 1


@pytest.mark.asyncio
async def test_timeout_propagates(wire_client: RecoClient, wire: WireRecorder):
    wire.responses.append(httpx.ReadTimeout("timeout of 10000ms exceeded"))

    with pytest.raises(httpx.ReadTimeout, match="timeout of 10000ms exceeded"):
        await wire_client.delete_item("item-123")
    assert len(wire.requests) == 1


@pytest.mark.asyncio
async def test_validation_failure_sends_nothing(wire_client: RecoClient, wire: WireRecorder):
    with pytest.raises(ValueError):
        await wire_client.track_interaction({"user_id": "u1", "item_id": "i1", "type": "impression", "value": 2})
    assert wire.requests == []


@pytest.mark.asyncio
async def test_adapter_returns_parsed_json_or_none(mock_transport: httpx.MockTransport, wire: WireRecorder):
    adapter = HttpxTransportAdapter(resolve_connection(API_KEY, project_id=PROJECT_ID), transport=mock_transport)
    wire.responses.extend([httpx.Response(200, json={"ok": True}), httpx.Response(204)])

    assert await adapter.request("POST", "/items", json={"item_id": "x"}) == {"ok": True}
    assert await adapter.request("DELETE", "/items/x") is None
    await adapter.aclose()


def test_adapter_applies_timeout():
    adapter = HttpxTransportAdapter(resolve_connection(API_KEY, project_id=PROJECT_ID, timeout=2500))
    assert adapter._client.timeout == httpx.Timeout(2.5)


@pytest.mark.asyncio
async def test_plain_text_success_body(wire_client: RecoClient, wire: WireRecorder):
    wire.responses.append(httpx.Response(200, text="OK"))
    assert await wire_client.upsert_item({"item_id": "i1"}) is None
    assert len(wire.requests) == 1


@pytest.mark.asyncio
async def test_plain_text_recommendations_body(wire_client: RecoClient, wire: WireRecorder):
    wire.responses.append(httpx.Response(200, text="OK"))
    result = await wire_client.get_recommendations({"user_id": "u1"})
    assert result.model_extra == {"body": "OK"}


@pytest.mark.asyncio
async def test_adapter_decodes_only_json_bodies(mock_transport: httpx.MockTransport, wire: WireRecorder):
    adapter = HttpxTransportAdapter(resolve_connection(API_KEY, project_id=PROJECT_ID), transport=mock_transport)
    wire.responses.extend(
        [
            httpx.Response(200, text="OK"),
            httpx.Response(200, content=b'{"ok": true}', headers={"content-type": "application/problem+json"}),
            httpx.Response(200, content=b'{"ok": true}', headers={"content-type": "application/json; charset=utf-8"}),
        ]
    )

    assert await adapter.request("POST", "/items", json={"item_id": "x"}) == "OK"
    assert await adapter.request("POST", "/items", json={"item_id": "x"}) == {"ok": True}
    assert await adapter.request("POST", "/items", json={"item_id": "x"}) == {"ok": True}
    await adapter.aclose()
