from league_results.db.models.league_data import MAIN_ROW_ID, LeagueDataRow

__all__ = [
    "MAIN_ROW_ID",
    "LeagueDataRow",
]
