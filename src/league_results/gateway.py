"""Single entry point for league data, independent of where it is stored.

Usage:
    with DataGateway.from_settings() as gateway:
        data = gateway.get_all_data()
        gateway.submit_result("EU", "Premier", "A", "1", {"home": "X", "away": "Y", "score": "2-1"})

The backend is picked once from `DATA_PROVIDER`; callers never change when it is switched.
"""

from __future__ import annotations

from league_results.core.config import Settings, settings as default_settings
from league_results.providers.base.adapter import DataProvider
from league_results.providers.base.registry import ProviderRegistry
from league_results.providers.base.types import LeagueData, ResultRecord
from league_results.providers.default import build_default_registry


class DataGateway:
    def __init__(self, provider: DataProvider) -> None:
        self.provider = provider

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        registry: ProviderRegistry | None = None,
    ) -> DataGateway:
        cfg = settings or default_settings
        reg = registry or build_default_registry(cfg)
        return cls(reg.get(cfg.data_provider))

    @property
    def provider_key(self) -> str:
        return self.provider.provider_key

    def get_all_data(self) -> LeagueData:
        return self.provider.get_all_data()

    def submit_result(
        self,
        location: str,
        league: str,
        group: str,
        week: str | int,
        result: ResultRecord,
    ) -> bool:
        return self.provider.submit_result(location, league, group, week, result)

    def close(self) -> None:
        self.provider.close()

    def __enter__(self) -> DataGateway:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
