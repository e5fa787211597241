from __future__ import annotations


class ProviderError(RuntimeError):
    """Base exception for data provider failures."""


class DataSourceError(ProviderError):
    """Static league data could not be loaded (missing, unreadable or malformed)."""


class ProviderRequestError(DataSourceError):
    """HTTP/network/transport layer failures (timeouts, connection errors, non-2xx, etc.)."""


class BackendUnavailableError(ProviderError):
    """The client library for a hosted backend is not installed."""


class ProviderCapabilityError(ProviderError):
    """No provider is registered for the requested key."""


class UnknownResultPathError(LookupError):
    """A result was submitted for a location/league/group that does not exist."""

    def __init__(self, message: str, path: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.message} | path={'/'.join(self.path)}"
