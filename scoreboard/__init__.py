"""Per-match scoreboards built from parsed kill entries."""

from .config import ReportSettings
from .models import MatchScoreboard, PlayerScore
from .session import MatchTracker, iter_matches

__all__ = [
    "MatchScoreboard",
    "MatchTracker",
    "PlayerScore",
    "ReportSettings",
    "iter_matches",
]
