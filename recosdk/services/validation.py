"""
Payload validation.

Every function here takes a model instance or a plain mapping,
checks it, and returns the dict that will be sent as the request body.
Failures raise ``ValidationError`` and no request is made.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from numbers import Real
from typing import Any

from pydantic import BaseModel

from recosdk.errors import ValidationError

logger = logging.getLogger(__name__)

IMPRESSION = "impression"
INTERACTION_KEYS = ("user_id", "item_id", "type")

Validator = Callable[[Any], dict[str, Any]]


def _fail(message: str, field: str | None = None) -> ValidationError:
    logger.warning("Validation failed: %s", message)
    return ValidationError(message, field=field)


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def as_payload(obj: Any) -> dict[str, Any]:
    """Turn a model or mapping into a request body."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", exclude_none=True)
    if isinstance(obj, Mapping):
        return dict(obj)
    raise _fail(f"Expected a mapping or model, got {type(obj).__name__}.")


def validate_item(item: Any) -> dict[str, Any]:
    payload = as_payload(item)
    if not _is_present(payload.get("item_id")):
        raise _fail("'item_id' is required for item operations.", field="item_id")
    return payload


def validate_user(user: Any) -> dict[str, Any]:
    payload = as_payload(user)
    if not _is_present(payload.get("user_id")):
        raise _fail("'user_id' is required for user operations.", field="user_id")
    return payload


def validate_interaction(interaction: Any) -> dict[str, Any]:
    """
    Check required fields and the impression rule.

    ``value`` may be zero for any type but must not be missing; impressions
    must have exactly ``value == 0``.
    """
    payload = as_payload(interaction)
    missing = [name for name in INTERACTION_KEYS if not _is_present(payload.get(name))]
    if payload.get("value") is None:
        missing.append("value")
    if missing:
        raise _fail(
            "Interaction must have user_id, item_id, type, and value. "
            f"Missing: {', '.join(missing)}.",
            field=missing[0] if len(missing) == 1 else None,
        )

    value = payload["value"]
    if isinstance(value, bool) or not isinstance(value, Real):
        raise _fail("Interaction value must be a number.", field="value")

    if payload["type"] == IMPRESSION and value != 0:
        raise _fail("Interaction type 'impression' must have value 0.", field="value")
    return payload


def validate_recommendation_request(request: Any) -> dict[str, Any]:
    payload = as_payload(request)
    if not _is_present(payload.get("user_id")):
        raise _fail("'user_id' is required for recommendations.", field="user_id")

    limit = payload.get("limit")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0):
        raise _fail("'limit' must be a positive integer.", field="limit")
    return payload


def validate_batch(name: str, values: Any, validator: Validator) -> list[dict[str, Any]]:
    """Validate every element of a batch; an empty batch is allowed."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise _fail(f"{name} expects an array.")

    payloads = []
    for index, value in enumerate(values):
        try:
            payloads.append(validator(value))
        except ValidationError as exc:
            raise _fail(f"{exc.message} (index {index})", field=exc.field) from exc
    return payloads


def validate_id(value: Any, field: str) -> str:
    if not _is_present(value):
        raise _fail(f"'{field}' is required.", field=field)
    return value


def validate_id_batch(values: Any, field: str) -> list[str]:
    """Delete batches must be a non-empty list of non-empty ids."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence) or not values:
        raise _fail(f"{field} array required.", field=field)
    if not all(_is_present(value) for value in values):
        raise _fail(f"{field} must contain only non-empty ids.", field=field)
    return list(values)
