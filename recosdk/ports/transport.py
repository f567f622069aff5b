"""Transport port: abstract interface for the HTTP collaborator."""

from abc import ABC, abstractmethod
from typing import Any


class TransportPort(ABC):
    """Sends one request to the API and returns the parsed JSON body."""

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        json: Any | None = None,
    ) -> Any:
        """
        Issue ``method path`` relative to the configured endpoint.

        Returns the decoded JSON body, the text of a non-JSON body, or
        ``None`` when the body is empty.
        Transport failures are raised as-is.
        """
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """Release connections held by the transport."""
        ...
