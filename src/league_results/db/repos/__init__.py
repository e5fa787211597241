from league_results.db.repos.league_data_repo import LeagueDataRepository

__all__ = ["LeagueDataRepository"]
