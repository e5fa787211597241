from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from league_results.core.config import Settings
from league_results.core.enums import DataProviderEnum
from league_results.gateway import DataGateway
from league_results.providers.base.errors import ProviderCapabilityError
from league_results.providers.base.registry import ProviderRegistry
from league_results.providers.default import build_default_registry
from league_results.providers.document_store.provider import DocumentStoreProvider
from league_results.providers.local.provider import LocalProvider
from league_results.providers.table_store.provider import TableStoreProvider

if TYPE_CHECKING:
    from conftest import FakeMongoClient


class RecordingProvider:
    provider_key = "recording"

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.closed = False

    def get_all_data(self) -> dict[str, Any]:
        self.calls.append(("get_all_data",))
        return {"EU": {}}

    def submit_result(self, location, league, group, week, result) -> bool:
        self.calls.append(("submit_result", location, league, group, week, result))
        return True

    def close(self) -> None:
        self.closed = True


def test_default_provider_is_local(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATA_PROVIDER", raising=False)
    assert Settings(_env_file=None).data_provider == DataProviderEnum.LOCAL


def test_gateway_delegates_to_injected_provider() -> None:
    provider = RecordingProvider()

    with DataGateway(provider) as gateway:
        assert gateway.get_all_data() == {"EU": {}}
        assert gateway.submit_result("EU", "Premier", "A", "1", {"home": "X"}) is True
        assert gateway.provider_key == "recording"

    assert provider.calls == [
        ("get_all_data",),
        ("submit_result", "EU", "Premier", "A", "1", {"home": "X"}),
    ]
    assert provider.closed is True


def test_gateway_does_not_translate_provider_errors() -> None:
    class Failing(RecordingProvider):
        def get_all_data(self) -> dict[str, Any]:
            raise KeyError("boom")

    with pytest.raises(KeyError, match="boom"):
        DataGateway(Failing()).get_all_data()


@pytest.mark.parametrize(
    ("provider", "expected_type"),
    [
        (DataProviderEnum.LOCAL, LocalProvider),
        (DataProviderEnum.DOCUMENT_STORE, DocumentStoreProvider),
        (DataProviderEnum.TABLE_STORE, TableStoreProvider),
    ],
)
def test_from_settings_picks_configured_provider(
    settings: Settings, provider: DataProviderEnum, expected_type: type
) -> None:
    cfg = settings.model_copy(update={"data_provider": provider})

    gateway = DataGateway.from_settings(cfg)

    assert isinstance(gateway.provider, expected_type)
    assert gateway.provider_key == provider.value
    gateway.close()


def test_switching_provider_keeps_call_signatures(
    settings: Settings, mongo_client: FakeMongoClient, league_data: dict[str, Any]
) -> None:
    record = {"home": "X", "away": "Y", "score": "2-1"}

    local = DataGateway.from_settings(settings)
    assert local.get_all_data() == league_data
    assert local.submit_result("EU", "Premier", "A", "1", record) is False

    registry = ProviderRegistry()
    registry.register(
        DataProviderEnum.DOCUMENT_STORE,
        lambda: DocumentStoreProvider(
            settings=settings,
            seed_source=LocalProvider(source=settings.league_data_source),
            client=mongo_client,
        ),
    )
    doc_settings = settings.model_copy(update={"data_provider": DataProviderEnum.DOCUMENT_STORE})
    document = DataGateway.from_settings(doc_settings, registry=registry)

    assert document.submit_result("EU", "Premier", "A", "1", record) is True
    assert document.get_all_data()["EU"]["Premier"]["groups"]["A"]["results"]["1"] == [record]


def test_registry_rejects_duplicates_and_unknown_keys(settings: Settings) -> None:
    registry = build_default_registry(settings)

    assert registry.keys() == ["document_store", "local", "table_store"]
    with pytest.raises(ValueError, match="Duplicate"):
        registry.register(DataProviderEnum.LOCAL, lambda: LocalProvider(source="x.json"))
    with pytest.raises(ProviderCapabilityError, match="firebase"):
        registry.get("firebase")


def test_unknown_provider_setting_is_rejected() -> None:
    with pytest.raises(ValueError):
        Settings(_env_file=None, data_provider="firebase")
