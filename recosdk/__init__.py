"""Async Python client for the Reco recommendation API."""

from recosdk.client import RecoClient
from recosdk.config import ClientSettings, ConnectionConfig, resolve_connection
from recosdk.domain.models import (
    Interaction,
    Item,
    RecommendationRequest,
    RecommendationResponse,
    RecommendedItem,
    User,
)
from recosdk.errors import ConfigurationError, RecoSDKError, ValidationError
from recosdk.log import enable_debug_logging
from recosdk.ports.transport import TransportPort

__version__ = "1.0.0"

__all__ = [
    "ClientSettings",
    "ConfigurationError",
    "ConnectionConfig",
    "Interaction",
    "Item",
    "RecoClient",
    "RecoSDKError",
    "RecommendationRequest",
    "RecommendationResponse",
    "RecommendedItem",
    "TransportPort",
    "User",
    "ValidationError",
    "enable_debug_logging",
    "resolve_connection",
]
