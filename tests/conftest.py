import json

import httpx
import pytest

from recosdk.adapters.transport.mock import MockTransportAdapter
from recosdk.client import RecoClient

API_KEY = "test-api-key"
PROJECT_ID = "test-project-id"
PROJECT_ENDPOINT = "https://reco-api.mioren.com/api/v1/projects/test-project-id"


@pytest.fixture
def transport() -> MockTransportAdapter:
    """Recording transport that answers every call with ``{}``."""
    return MockTransportAdapter(default_response={})


@pytest.fixture
def client(transport: MockTransportAdapter) -> RecoClient:
    return RecoClient(api_key=API_KEY, project_id=PROJECT_ID, transport=transport)


class WireRecorder:
    """``httpx.MockTransport`` handler that records requests and replies with queued responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response | Exception] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if self.responses else httpx.Response(204)
        if isinstance(response, Exception):
            raise response
        return response

    def body(self, index: int = -1):
        content = self.requests[index].content
        return json.loads(content) if content else None


@pytest.fixture
def wire() -> WireRecorder:
    return WireRecorder()


@pytest.fixture
def mock_transport(wire: WireRecorder) -> httpx.MockTransport:
    return httpx.MockTransport(wire)

