"""
Connection configuration.

Options passed to the client are resolved once into an immutable
``ConnectionConfig``. ``ClientSettings`` reads the same options from the
environment (``RECO_API_KEY``, ``RECO_PROJECT_ID``, ``RECO_BASE_URL``,
``RECO_TIMEOUT``) or a ``.env`` file.
"""

from dataclasses import dataclass, field

from pydantic_settings import BaseSettings, SettingsConfigDict

from recosdk.errors import ConfigurationError

DEFAULT_HOST = "reco-api.mioren.com"
API_PREFIX = "/api/v1/projects"
DEFAULT_TIMEOUT_MS = 10_000


@dataclass(frozen=True)
class ConnectionConfig:
    """Resolved endpoint, credentials and timeout for one client instance."""

    base_url: str
    api_key: str = field(repr=False)
    timeout_ms: int | float = DEFAULT_TIMEOUT_MS

    @property
    def timeout(self) -> float:
        """Timeout in seconds, as httpx expects it."""
        return self.timeout_ms / 1000

    @property
    def headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "Content-Type": "application/json",
        }


def project_endpoint(project_id: str) -> str:
    """Canonical endpoint for a project on the hosted service."""
    return f"https://{DEFAULT_HOST}{API_PREFIX}/{project_id}"


def resolve_connection(
    api_key: str,
    project_id: str | None = None,
    base_url: str | None = None,
    timeout: int | float | None = None,
) -> ConnectionConfig:
    """
    Build a ``ConnectionConfig`` from caller options.

    ``base_url`` is used verbatim and takes precedence over ``project_id``.
    ``timeout`` is in milliseconds; missing or non-positive values fall back
    to ``DEFAULT_TIMEOUT_MS``.
    """
    if not api_key:
        raise ConfigurationError("'api_key' is required.")

    if base_url:
        endpoint = base_url
    elif project_id:
        endpoint = project_endpoint(project_id)
    else:
        raise ConfigurationError(
            "'project_id' is required in options unless 'base_url' is explicitly provided."
        )

    timeout_ms = timeout if timeout and timeout > 0 else DEFAULT_TIMEOUT_MS
    return ConnectionConfig(base_url=endpoint, api_key=api_key, timeout_ms=timeout_ms)


class ClientSettings(BaseSettings):
    """Client options read from ``RECO_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECO_",
        env_file=".env",
        extra="ignore",
    )

    api_key: str = ""
    project_id: str | None = None
    base_url: str | None = None
    timeout: int | None = None

