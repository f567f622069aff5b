"""Pydantic models for the payloads exchanged with the recommendation API."""

import logging
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, PositiveInt

logger = logging.getLogger(__name__)

Scalar = str | int | float | bool | None
AttributeValue = Scalar | list[Scalar]


class _Payload(BaseModel):
    """Request payload. Custom fields go in ``attributes`` or ``context``."""

    model_config = ConfigDict(extra="forbid")


class Item(_Payload):
    item_id: str
    attributes: dict[str, AttributeValue] = Field(default_factory=dict)
    available: bool | None = None
    created_at: str | None = None


class User(_Payload):
    user_id: str
    attributes: dict[str, AttributeValue] = Field(default_factory=dict)
    created_at: str | None = None


class Interaction(_Payload):
    """
    A user/item event.

    ``value`` is the magnitude of the event (rating, revenue, dwell count).
    Impressions must carry ``value=0``.
    """

    user_id: str
    item_id: str
    type: str
    value: float
    timestamp: str | None = None
    context: dict[str, AttributeValue] = Field(default_factory=dict)


class RecommendationRequest(_Payload):
    """Filters are forwarded to the server as given."""

    user_id: str
    limit: PositiveInt | None = None
    filters: dict[str, Any] | None = None
    filter_expressions: list[str] | None = None
    filter_variables: dict[str, Any] | None = None
    cursor: str | None = None


class RecommendedItem(BaseModel):
    """A recommended item as returned by the server; any extra keys are kept."""

    model_config = ConfigDict(extra="allow")

    item_id: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    available: bool | None = None
    created_at: str | None = None
    score: float | None = None


class RecommendationResponse(BaseModel):
    """Server response; unknown keys are kept as extra fields."""

    model_config = ConfigDict(extra="allow")

    recommendations: list[RecommendedItem] = Field(default_factory=list)
    recommendation_id: str | int | None = None
    next_cursor: str | None = None
    total_count: int | None = None

    @classmethod
    def from_body(cls, body: Any) -> "RecommendationResponse":
        """
        Wrap a decoded response body.

        Objects are read as-is. A bare list is taken as the recommendations.
        Anything else (plain text, scalars) is kept under ``body``. A body that
        does not fit the typed fields is kept unvalidated rather than rejected.
        """
        if body is None or body == "":
            return cls()
        if isinstance(body, dict):
            data = body
        elif isinstance(body, list):
            data = {"recommendations": body}
        else:
            data = {"body": body}

        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as exc:
            logger.warning("Unexpected recommendation response shape: %d errors", exc.error_count())
            return cls.model_construct(**data)
