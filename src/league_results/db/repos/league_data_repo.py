from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from league_results.db.models.league_data import MAIN_ROW_ID, LeagueDataRow


class LeagueDataRepository:
    def __init__(self, session: Session, *, row_id: str = MAIN_ROW_ID) -> None:
        self.session = session
        self.row_id = row_id

    def get(self) -> LeagueDataRow | None:
        return self.session.get(LeagueDataRow, self.row_id)

    def get_data(self) -> dict[str, Any] | None:
        row = self.get()
        if row is None or not row.data:
            return None
        return row.data

    def upsert(self, data: dict[str, Any]) -> LeagueDataRow:
        """Replace the whole aggregate, creating the row if needed."""
        row = self.get()
        if row is None:
            row = LeagueDataRow(id=self.row_id, data=data)
            self.session.add(row)
        else:
            row.data = data
            # JSON columns are not mutation-tracked.
            flag_modified(row, "data")
        self.session.flush()
        return row
