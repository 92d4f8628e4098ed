from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .causes import CauseOfDeath

# Killer name the game uses for deaths caused by the map itself.
WORLD = "<world>"


@dataclass(frozen=True)
class MatchStart:
    """An ``InitGame`` line; the server configuration dump is not kept."""


@dataclass(frozen=True)
class KillEntry:
    killer: str
    victim: str
    cause: CauseOfDeath

    @property
    def is_world_kill(self) -> bool:
        return self.killer == WORLD

    @property
    def is_suicide(self) -> bool:
        return self.killer == self.victim


LogEntry = Union[MatchStart, KillEntry]
