from __future__ import annotations

from typing import Protocol

from .types import LeagueData, ResultRecord


class DataProvider(Protocol):
    """
    The gateway depends on this, not on any backend client.

    Mutable providers rewrite the whole aggregate on every write; read-only
    providers report writes as unsupported by returning False.
    """

    provider_key: str

    def get_all_data(self) -> LeagueData:
        """Return the full league aggregate."""
        ...

    def submit_result(
        self,
        location: str,
        league: str,
        group: str,
        week: str | int,
        result: ResultRecord,
    ) -> bool:
        """Append one result record; True when it was persisted."""
        ...

    def close(self) -> None: ...
