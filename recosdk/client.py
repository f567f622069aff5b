"""Async client for the Reco recommendation API."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from recosdk.adapters.transport.httpx_transport import HttpxTransportAdapter
from recosdk.config import ClientSettings, resolve_connection
from recosdk.domain.models import (
    Interaction,
    Item,
    RecommendationRequest,
    RecommendationResponse,
    User,
)
from recosdk.ports.transport import TransportPort
from recosdk.services.validation import (
    validate_batch,
    validate_id,
    validate_id_batch,
    validate_interaction,
    validate_item,
    validate_recommendation_request,
    validate_user,
)

logger = logging.getLogger(__name__)

ItemLike = Item | Mapping[str, Any]
UserLike = User | Mapping[str, Any]
InteractionLike = Interaction | Mapping[str, Any]
RequestLike = RecommendationRequest | Mapping[str, Any]


class RecoClient:
    """
    Typed gateway to the recommendation API.

    Each method validates its payload locally, then sends exactly one request.
    Validation errors are raised before anything is sent. Transport errors
    (HTTP status, timeouts, connection failures) propagate unchanged; nothing
    is retried.

    Usage::

        async with RecoClient(api_key="...", project_id="my-project") as reco:
            await reco.track_interaction(
                {"user_id": "u1", "item_id": "i1", "type": "click", "value": 1}
            )
            response = await reco.get_recommendations({"user_id": "u1", "limit": 10})
    """

    def __init__(
        self,
        api_key: str,
        project_id: str | None = None,
        base_url: str | None = None,
        timeout: int | float | None = None,
        transport: TransportPort | None = None,
    ) -> None:
        self._config = resolve_connection(
            api_key, project_id=project_id, base_url=base_url, timeout=timeout
        )
        self._transport = transport if transport is not None else HttpxTransportAdapter(self._config)
        logger.info(
            "RecoClient initialized: endpoint=%s, timeout=%sms",
            self._config.base_url,
            self._config.timeout_ms,
        )

    @classmethod
    def from_env(cls, transport: TransportPort | None = None, **overrides: Any) -> "RecoClient":
        """Build a client from ``RECO_*`` environment variables."""
        settings = ClientSettings(**overrides)
        return cls(
            api_key=settings.api_key,
            project_id=settings.project_id,
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def timeout_ms(self) -> int | float:
        return self._config.timeout_ms

    async def __aenter__(self) -> "RecoClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    # ── Recommendations ────────────────────────────

    async def get_recommendations(self, request: RequestLike) -> RecommendationResponse:
        """Fetch recommendations for a user."""
        payload = validate_recommendation_request(request)
        data = await self._transport.request("POST", "/recommendations", json=payload)
        return RecommendationResponse.from_body(data)

    # ── Interactions ───────────────────────────────

    async def track_interaction(self, interaction: InteractionLike) -> None:
        """Record a single interaction."""
        payload = validate_interaction(interaction)
        await self._transport.request("POST", "/interactions", json=payload)

    async def batch_track_interactions(self, interactions: Sequence[InteractionLike]) -> None:
        """Record many interactions in one request. Every entry is validated."""
        payloads = validate_batch("batch_track_interactions", interactions, validate_interaction)
        await self._transport.request("POST", "/interactions/bulk", json={"interactions": payloads})

    # ── Items ──────────────────────────────────────

    async def upsert_item(self, item: ItemLike) -> None:
        """Create or update an item."""
        payload = validate_item(item)
        await self._transport.request("POST", "/items", json=payload)

    async def batch_upsert_items(self, items: Sequence[ItemLike]) -> None:
        payloads = validate_batch("batch_upsert_items", items, validate_item)
        await self._transport.request("POST", "/items/bulk", json={"items": payloads})

    async def delete_item(self, item_id: str) -> None:
        validate_id(item_id, "item_id")
        await self._transport.request("DELETE", f"/items/{item_id}")

    async def batch_delete_items(self, item_ids: Sequence[str]) -> None:
        """Delete several items at once. ``item_ids`` must not be empty."""
        ids = validate_id_batch(item_ids, "item_ids")
        await self._transport.request("POST", "/items/bulk-delete", json={"item_ids": ids})

    # ── Users ──────────────────────────────────────

    async def upsert_user(self, user: UserLike) -> None:
        """Create or update a user."""
        payload = validate_user(user)
        await self._transport.request("POST", "/users", json=payload)

    async def batch_upsert_users(self, users: Sequence[UserLike]) -> None:
        payloads = validate_batch("batch_upsert_users", users, validate_user)
        await self._transport.request("POST", "/users/bulk", json={"users": payloads})

    async def delete_user(self, user_id: str) -> None:
        validate_id(user_id, "user_id")
        await self._transport.request("DELETE", f"/users/{user_id}")

    async def batch_delete_users(self, user_ids: Sequence[str]) -> None:
        """Delete several users at once. ``user_ids`` must not be empty."""
        ids = validate_id_batch(user_ids, "user_ids")
        await self._transport.request("POST", "/users/bulk-delete", json={"user_ids": ids})
