from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from league_results.core.config import Settings
from league_results.core.enums import DataProviderEnum

LEAGUE_DATA: dict[str, Any] = {
    "EU": {
        "Premier": {
            "name": "Premier Division",
            "groups": {
                "A": {"name": "Group A", "teams": ["X", "Y"]},
                "B": {
                    "name": "Group B",
                    "results": {"1": [{"home": "P", "away": "Q", "score": "1-0"}]},
                },
            },
        }
    }
}


class FakeCollection:
    """Just enough of pymongo's Collection for whole-document reads and replaces."""

    def __init__(self) -> None:
        self.docs: dict[Any, dict[str, Any]] = {}
        self.replace_calls = 0

    def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        doc = self.docs.get(query["_id"])
        return copy.deepcopy(doc) if doc is not None else None

    def replace_one(self, flt: dict[str, Any], doc: dict[str, Any], upsert: bool = False) -> None:
        if flt["_id"] not in self.docs and not upsert:
            return
        self.replace_calls += 1
        self.docs[flt["_id"]] = copy.deepcopy(doc)


class FakeMongoClient:
    def __init__(self) -> None:
        self.collections: dict[tuple[str, str], FakeCollection] = {}
        self.closed = False

    def __getitem__(self, db_name: str) -> _FakeDatabase:
        return _FakeDatabase(self, db_name)

    def close(self) -> None:
        self.closed = True


class _FakeDatabase:
    def __init__(self, client: FakeMongoClient, name: str) -> None:
        self.client = client
        self.name = name

    def __getitem__(self, collection: str) -> FakeCollection:
        key = (self.name, collection)
        return self.client.collections.setdefault(key, FakeCollection())


@pytest.fixture
def league_data() -> dict[str, Any]:
    return copy.deepcopy(LEAGUE_DATA)


@pytest.fixture
def league_file(tmp_path: Path, league_data: dict[str, Any]) -> Path:
    path = tmp_path / "league-data.json"
    path.write_text(json.dumps(league_data), encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path: Path, league_file: Path) -> Settings:
    return Settings(
        _env_file=None,
        data_provider=DataProviderEnum.LOCAL,
        league_data_source=str(league_file),
        database_url=f"sqlite+pysqlite:///{tmp_path / 'league_results.db'}",
        mongodb_uri="mongodb://localhost:27017",
        mongodb_db_name="league_results_test",
    )


@pytest.fixture
def mongo_client() -> FakeMongoClient:
    return FakeMongoClient()
