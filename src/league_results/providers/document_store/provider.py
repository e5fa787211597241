from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from league_results.core.config import Settings
from league_results.core.enums import DataProviderEnum
from league_results.providers.base.adapter import DataProvider
from league_results.providers.base.errors import BackendUnavailableError
from league_results.providers.base.results import append_result
from league_results.providers.base.types import LeagueData, ResultRecord

if TYPE_CHECKING:
    from pymongo import MongoClient
    from pymongo.collection import Collection

logger = logging.getLogger(__name__)

DOCUMENT_ID = "data"


class DocumentStoreProvider:
    """
    League data kept as a single MongoDB document.

    The whole aggregate is replaced on every write; there is no optimistic
    concurrency check, so concurrent submitters race and the last write wins.
    """

    provider_key = DataProviderEnum.DOCUMENT_STORE.value

    def __init__(
        self,
        *,
        settings: Settings,
        seed_source: DataProvider,
        client: MongoClient | None = None,
        document_id: str = DOCUMENT_ID,
    ) -> None:
        self.settings = settings
        self.seed_source = seed_source
        self.document_id = document_id
        self._client = client
        self._owns_client = client is None

    def _connect(self) -> MongoClient:
        if self._client is None:
            try:
                from pymongo import MongoClient
            except ImportError as e:
                raise BackendUnavailableError(
                    "pymongo is not installed; it is required for DATA_PROVIDER=document_store."
                ) from e
            self._client = MongoClient(self.settings.require_mongodb_uri())
        return self._client

    def _collection(self) -> Collection:
        client = self._connect()
        return client[self.settings.mongodb_db_name][self.settings.mongodb_collection]

    def _save(self, collection: Collection, data: LeagueData) -> None:
        doc: dict[str, Any] = dict(data)
        doc["_id"] = self.document_id
        collection.replace_one({"_id": self.document_id}, doc, upsert=True)

    def _load_or_seed(self, collection: Collection) -> LeagueData:
        doc = collection.find_one({"_id": self.document_id})
        if doc is not None:
            doc.pop("_id", None)
            return doc

        # First run: copy the static data into the store.
        seed = self.seed_source.get_all_data()
        logger.info(
            "Seeding document %s.%s/%s from static league data",
            self.settings.mongodb_db_name,
            self.settings.mongodb_collection,
            self.document_id,
        )
        self._save(collection, seed)
        return seed

    def get_all_data(self) -> LeagueData:
        return self._load_or_seed(self._collection())

    def submit_result(
        self,
        location: str,
        league: str,
        group: str,
        week: str | int,
        result: ResultRecord,
    ) -> bool:
        collection = self._collection()
        data = self._load_or_seed(collection)
        append_result(data, location, league, group, week, result)
        self._save(collection, data)
        return True

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None
        self.seed_source.close()

    def __enter__(self) -> DocumentStoreProvider:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
