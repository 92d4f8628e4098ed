from __future__ import annotations

import json
from typing import Dict, List, Optional

from quakelog.causes import CauseOfDeath

from .config import ReportSettings
from .models import MatchScoreboard

_CAUSE_ORDER = {cause: index for index, cause in enumerate(CauseOfDeath)}


def _cause_lines(counts: Dict[CauseOfDeath, int], indent: str) -> List[str]:
    return [f"{indent}- {cause.token}: {counts[cause]}" for cause in CauseOfDeath if cause in counts]


def format_text(scoreboard: MatchScoreboard, match_number: int, settings: Optional[ReportSettings] = None) -> str:
    settings = settings or ReportSettings()
    lines = [f"Match {match_number} ended with {scoreboard.total_kills} kills"]

    players = sorted(scoreboard.player_scores(), key=lambda item: (-item[1].score, item[0]))
    for name, player in players:
        lines.append(f"- {name} ({player.kills}/{player.deaths}):")
        lines.append("    Kills:")
        lines.extend(_cause_lines(player.kills_by_cause, " " * 8))
        lines.append("    Deaths:")
        lines.extend(_cause_lines(player.deaths_by_cause, " " * 8))
        if player.suicides > 0:
            lines.append(f"    Suicides: {player.suicides}")
        lines.append(f"    Final score: {player.score}")

    if settings.show_causes:
        lines.append("-> By cause of death:")
        totals = sorted(scoreboard.deaths_by_cause().items(), key=lambda item: (-item[1], _CAUSE_ORDER[item[0]]))
        for cause, count in totals:
            lines.append(f"    - {cause.token}: {count}")
    return "\n".join(lines)


def format_json(scoreboard: MatchScoreboard, match_number: int) -> str:
    return json.dumps({"match": match_number, **scoreboard.to_dict()})


def render(scoreboard: MatchScoreboard, match_number: int, settings: ReportSettings) -> str:
    if settings.output_format == "json":
        return format_json(scoreboard, match_number)
    return format_text(scoreboard, match_number, settings)
