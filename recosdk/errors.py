"""Local error types raised by the SDK before any request is sent.

Transport failures are not represented here: whatever the HTTP layer raises
(``httpx.HTTPStatusError``, ``httpx.TimeoutException``, ...) reaches the
caller untouched.
"""


class RecoSDKError(Exception):
    """Base class for errors raised by the SDK itself."""

    prefix = "RecoSDK: "

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self.prefix}{message}")


class ConfigurationError(RecoSDKError):
    """The client options do not resolve to a usable connection."""


class ValidationError(RecoSDKError, ValueError):
    """A payload failed local validation and was never sent."""

    prefix = "RecoSDK: Validation Error - "

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
