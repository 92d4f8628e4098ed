from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple

from quakelog.causes import CauseOfDeath
from quakelog.models import KillEntry


def _counts_to_dict(counts: Dict[CauseOfDeath, int]) -> Dict[str, int]:
    return {cause.token: counts[cause] for cause in CauseOfDeath if cause in counts}


@dataclass
class PlayerScore:
    """Per-player statistics for a single match."""

    kills_by_cause: Dict[CauseOfDeath, int] = field(default_factory=dict)
    deaths_by_cause: Dict[CauseOfDeath, int] = field(default_factory=dict)
    kills: int = 0
    deaths: int = 0
    suicides: int = 0
    score: int = 0

    def record_kill(self, cause: CauseOfDeath, suicide: bool) -> None:
        self.kills_by_cause[cause] = self.kills_by_cause.get(cause, 0) + 1
        self.kills += 1
        if suicide:
            self.suicides += 1
        else:
            self.score += 1

    def record_death(self, cause: CauseOfDeath, penalize: bool) -> None:
        self.deaths_by_cause[cause] = self.deaths_by_cause.get(cause, 0) + 1
        self.deaths += 1
        if penalize:
            self.score -= 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kills": self.kills,
            "deaths": self.deaths,
            "suicides": self.suicides,
            "score": self.score,
            "kills_by_cause": _counts_to_dict(self.kills_by_cause),
            "deaths_by_cause": _counts_to_dict(self.deaths_by_cause),
        }


class MatchScoreboard:
    """
    Scoreboard for a single match. Only :meth:`record` mutates it.

    A player's score is ``kills - suicides - world_or_self_deaths``, where
    suicides count as kills but never add to the score.
    """

    def __init__(self) -> None:
        self._players: Dict[str, PlayerScore] = {}
        self._total_kills = 0

    def __len__(self) -> int:
        return len(self._players)

    @property
    def total_kills(self) -> int:
        """Every recorded kill, including suicides and ``<world>`` kills."""
        return self._total_kills

    def get(self, name: str) -> Optional[PlayerScore]:
        return self._players.get(name)

    def player_scores(self) -> Iterator[Tuple[str, PlayerScore]]:
        return iter(self._players.items())

    def _ensure_player(self, name: str) -> PlayerScore:
        if name not in self._players:
            self._players[name] = PlayerScore()
        return self._players[name]

    def record(self, kill: KillEntry) -> None:
        world_kill = kill.is_world_kill
        suicide = kill.is_suicide
        if not world_kill:
            self._ensure_player(kill.killer).record_kill(kill.cause, suicide)
        self._ensure_player(kill.victim).record_death(kill.cause, world_kill or suicide)
        self._total_kills += 1

    def deaths_by_cause(self) -> Dict[CauseOfDeath, int]:
        totals: Dict[CauseOfDeath, int] = {}
        for player in self._players.values():
            for cause, count in player.deaths_by_cause.items():
                totals[cause] = totals.get(cause, 0) + count
        return totals

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_kills": self._total_kills,
            "players": {name: player.to_dict() for name, player in self._players.items()},
            "deaths_by_cause": _counts_to_dict(self.deaths_by_cause()),
        }
