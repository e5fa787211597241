from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .errors import UnknownResultPathError
from .types import LeagueData, ResultRecord


def _child(node: Any, key: str, path: tuple[str, ...]) -> MutableMapping[str, Any]:
    if not isinstance(node, MutableMapping) or key not in node:
        raise UnknownResultPathError("No such entry in league data", path)
    child = node[key]
    if not isinstance(child, MutableMapping):
        raise UnknownResultPathError("League data entry is not an object", path)
    return child


def append_result(
    data: LeagueData,
    location: str,
    league: str,
    group: str,
    week: str | int,
    result: ResultRecord,
) -> LeagueData:
    """
    Append `result` to data[location][league]["groups"][group]["results"][week].

    `results` and the week list are created when missing; locations, leagues
    and groups are not. Mutates and returns `data`.
    """
    loc_node = _child(data, location, (location,))
    league_node = _child(loc_node, league, (location, league))
    groups = _child(league_node, "groups", (location, league, "groups"))
    group_node = _child(groups, group, (location, league, "groups", group))

    # JSON object keys are always strings; week 1 and "1" are the same list.
    week_key = str(week)

    results = group_node.get("results")
    if not isinstance(results, MutableMapping):
        results = {}
        group_node["results"] = results

    entries = results.get(week_key)
    if not isinstance(entries, list):
        entries = []
        results[week_key] = entries

    entries.append(dict(result))
    return data
