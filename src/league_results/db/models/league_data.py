from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from league_results.db.base import Base, TimestampMixin

MAIN_ROW_ID = "main"


class LeagueDataRow(Base, TimestampMixin):
    """Single-row holder for the whole league aggregate."""

    __tablename__ = "league_data"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    data: Mapped[dict[str, Any]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"),
        nullable=False,
    )
