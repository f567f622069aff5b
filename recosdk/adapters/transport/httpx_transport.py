import logging
from typing import Any

import httpx

from recosdk.config import ConnectionConfig
from recosdk.ports.transport import TransportPort

logger = logging.getLogger(__name__)


class HttpxTransportAdapter(TransportPort):
    """
    Transport backed by one long-lived ``httpx.AsyncClient``.

    The client keeps connections alive between calls. Auth and content-type
    headers are set once on the client and sent with every request.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=config.headers,
            timeout=config.timeout,
            transport=transport,
        )

    async def request(
        self,
        method: str,
        path: str,
        json: Any | None = None,
    ) -> Any:
        """Send the request; JSON bodies are decoded, other bodies come back as text."""
        logger.debug("Reco request: %s %s", method, path)
        resp = await self._client.request(method, path, json=json)
        resp.raise_for_status()
        logger.debug("Reco response: %s %s -> %d", method, path, resp.status_code)
        if not resp.content:
            return None
        if _is_json(resp):
            return resp.json()
        return resp.text

    async def aclose(self) -> None:
        await self._client.aclose()


def _is_json(resp: httpx.Response) -> bool:
    content_type = resp.headers.get("content-type", "").split(";")[0].strip().lower()
    return content_type == "application/json" or content_type.endswith("+json")
