import asyncio
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any

from recosdk.ports.transport import TransportPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedRequest:
    method: str
    path: str
    json: Any | None = None


class MockTransportAdapter(TransportPort):
    """
    In-memory transport for tests and offline development.

    Records every request and answers with queued responses (or
    ``default_response`` once the queue is empty). A queued exception
    instance is raised instead of returned.
    """

    def __init__(self, default_response: Any = None, latency: float = 0.0) -> None:
        self.requests: list[RecordedRequest] = []
        self.default_response = default_response
        self._latency = latency
        self._queue: deque[Any] = deque()
        self.closed = False

    def queue(self, *responses: Any) -> None:
        """Queue responses (or exceptions) for the next calls, in order."""
        self._queue.extend(responses)

    async def request(
        self,
        method: str,
        path: str,
        json: Any | None = None,
    ) -> Any:
        self.requests.append(RecordedRequest(method, path, json))
        logger.info("MockTransport: %s %s", method, path)
        if self._latency:
            await asyncio.sleep(self._latency)
        response = self._queue.popleft() if self._queue else self.default_response
        if isinstance(response, BaseException):
            raise response
        return response

    async def aclose(self) -> None:
        self.closed = True
