from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from .errors import ProviderRequestError


@dataclass
class BaseHttpClient:
    """
    Thin wrapper over a single httpx.Client.

    - Connection pooling across repeated reads of the same static resource.
    - Transport failures and non-2xx responses become ProviderRequestError.
    - Tests inject an httpx.MockTransport via `transport`.
    """

    timeout_s: float = 30.0
    connect_timeout_s: float = 10.0

    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.Client(
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            transport=self.transport,
            follow_redirects=True,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_json_value(self, url: str) -> Any:
        """
        GET `url` and return the decoded JSON value (any JSON type).
        Raises ProviderRequestError on transport issues, redirect loops, non-2xx or invalid JSON.
        """
        try:
            resp = self._client.get(url)
        except httpx.RequestError as e:
            raise ProviderRequestError(f"GET {url} failed: {e}") from e

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(f"HTTP {resp.status_code} for GET {resp.request.url}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise ProviderRequestError("Response was not valid JSON.") from e
