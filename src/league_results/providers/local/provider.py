from __future__ import annotations

import json
import logging
from pathlib import Path

from league_results.core.enums import DataProviderEnum
from league_results.providers.base.client import BaseHttpClient
from league_results.providers.base.errors import DataSourceError
from league_results.providers.base.types import LeagueData, ResultRecord

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class LocalProvider:
    """Read-only provider over the static league data JSON (file path or URL)."""

    provider_key = DataProviderEnum.LOCAL.value

    def __init__(
        self,
        *,
        source: str | Path,
        http: BaseHttpClient | None = None,
        timeout_s: float = 30.0,
    ) -> None:
        self.source = str(source)
        self._http = http
        self._owns_http = http is None
        self._timeout_s = timeout_s

    def _http_client(self) -> BaseHttpClient:
        if self._http is None:
            self._http = BaseHttpClient(timeout_s=self._timeout_s)
        return self._http

    def _load_path(self) -> object:
        path = Path(self.source)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise DataSourceError(f"Failed to load local data from {path}: {e}") from e
        try:
            # json.loads detects UTF-8/16/32; undecodable bytes surface as ValueError.
            return json.loads(raw)
        except ValueError as e:
            raise DataSourceError(f"League data at {path} is not valid JSON: {e}") from e

    def get_all_data(self) -> LeagueData:
        if _is_url(self.source):
            value = self._http_client().get_json_value(self.source)
        else:
            value = self._load_path()

        if not isinstance(value, dict):
            raise DataSourceError(f"Expected JSON object in {self.source}, got {type(value)}")
        return value

    def submit_result(
        self,
        location: str,
        league: str,
        group: str,
        week: str | int,
        result: ResultRecord,
    ) -> bool:
        logger.warning(
            "Local mode: results cannot be saved. Switch DATA_PROVIDER to "
            "document_store or table_store to enable writes."
        )
        return False

    def close(self) -> None:
        if self._http is not None and self._owns_http:
            self._http.close()
            self._http = None

    def __enter__(self) -> LocalProvider:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
