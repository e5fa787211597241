from __future__ import annotations

from league_results.core.config import Settings
from league_results.core.enums import DataProviderEnum
from league_results.providers.base.registry import ProviderRegistry
from league_results.providers.document_store.provider import DocumentStoreProvider
from league_results.providers.local.provider import LocalProvider
from league_results.providers.table_store.provider import TableStoreProvider


def register_default_providers(registry: ProviderRegistry, *, settings: Settings) -> None:
    def make_local() -> LocalProvider:
        return LocalProvider(source=settings.league_data_source, timeout_s=settings.http_timeout_s)

    registry.register(DataProviderEnum.LOCAL, factory=make_local)

    # Mutable backends seed themselves from the static data on first access.
    registry.register(
        DataProviderEnum.DOCUMENT_STORE,
        factory=lambda: DocumentStoreProvider(settings=settings, seed_source=make_local()),
    )
    registry.register(
        DataProviderEnum.TABLE_STORE,
        factory=lambda: TableStoreProvider(settings=settings, seed_source=make_local()),
    )


def build_default_registry(settings: Settings) -> ProviderRegistry:
    registry = ProviderRegistry()
    register_default_providers(registry, settings=settings)
    return registry
