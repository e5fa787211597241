from __future__ import annotations

import logging

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from league_results.core.config import Settings
from league_results.core.enums import DataProviderEnum
from league_results.db import (
    Base,
    DatabaseConfig,
    create_db_engine,
    create_session_factory,
    session_scope,
)
from league_results.db.models.league_data import MAIN_ROW_ID
from league_results.db.repos.league_data_repo import LeagueDataRepository
from league_results.providers.base.adapter import DataProvider
from league_results.providers.base.results import append_result
from league_results.providers.base.types import LeagueData, ResultRecord

logger = logging.getLogger(__name__)


class TableStoreProvider:
    """
    League data kept in a single SQL row (`league_data`, id "main").

    Writes are a full read-modify-write round trip with no locking; concurrent
    submitters race and the last write wins. Database errors on write are
    logged and reported as False.
    """

    provider_key = DataProviderEnum.TABLE_STORE.value

    def __init__(
        self,
        *,
        settings: Settings,
        seed_source: DataProvider,
        engine: Engine | None = None,
        row_id: str = MAIN_ROW_ID,
    ) -> None:
        self.settings = settings
        self.seed_source = seed_source
        self.row_id = row_id
        self._engine = engine
        self._owns_engine = engine is None
        self._session_factory: sessionmaker[Session] | None = None

    def _get_engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_db_engine(DatabaseConfig.from_settings(self.settings))
        return self._engine

    def _sessions(self) -> sessionmaker[Session]:
        if self._session_factory is None:
            self._session_factory = create_session_factory(self._get_engine())
        return self._session_factory

    def create_schema(self) -> None:
        """Create the league_data table if missing (Alembic manages it in deployments)."""
        Base.metadata.create_all(self._get_engine())

    def _load_or_seed(self, repo: LeagueDataRepository) -> LeagueData:
        data = repo.get_data()
        if data is not None:
            return data

        # First run: copy the static data into the table.
        seed = self.seed_source.get_all_data()
        logger.info("Seeding table store row %r from static league data", self.row_id)
        repo.upsert(seed)
        return seed

    def get_all_data(self) -> LeagueData:
        with session_scope(self._sessions()) as session:
            return self._load_or_seed(LeagueDataRepository(session, row_id=self.row_id))

    def submit_result(
        self,
        location: str,
        league: str,
        group: str,
        week: str | int,
        result: ResultRecord,
    ) -> bool:
        try:
            with session_scope(self._sessions()) as session:
                repo = LeagueDataRepository(session, row_id=self.row_id)
                data = self._load_or_seed(repo)
                append_result(data, location, league, group, week, result)
                repo.upsert(data)
        except SQLAlchemyError:
            logger.exception("Table store write error")
            return False
        return True

    def close(self) -> None:
        if self._owns_engine and self._engine is not None:
            self._engine.dispose()
            self._engine = None
        self._session_factory = None
        self.seed_source.close()

    def __enter__(self) -> TableStoreProvider:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
