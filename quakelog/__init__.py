"""Streaming reader for Quake 3 Arena server logs."""

from .causes import CauseOfDeath
from .errors import InvalidCauseOfDeath, LogError, LogReadError, NoMatchOpen
from .metrics import Metrics
from .models import WORLD, KillEntry, LogEntry, MatchStart
from .parser import iter_log_entries, read_log

__all__ = [
    "CauseOfDeath",
    "InvalidCauseOfDeath",
    "KillEntry",
    "LogEntry",
    "LogError",
    "LogReadError",
    "MatchStart",
    "Metrics",
    "NoMatchOpen",
    "WORLD",
    "iter_log_entries",
    "read_log",
]
