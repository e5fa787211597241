from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# location -> league -> {"groups": {group -> {..., "results": {week -> [record, ...]}}}}
LeagueData = dict[str, Any]

ResultRecord = Mapping[str, Any]
