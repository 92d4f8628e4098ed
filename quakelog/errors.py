from __future__ import annotations

from typing import Optional


class LogError(Exception):
    """Base class for fatal conditions raised while processing a log."""


class InvalidCauseOfDeath(LogError):
    def __init__(self, token: str) -> None:
        super().__init__(f"'{token}' is not a valid cause of death")
        self.token = token


class NoMatchOpen(LogError):
    def __init__(self) -> None:
        super().__init__("found a kill entry but the match hasn't started yet")


class LogReadError(LogError):
    def __init__(self, path: Optional[str], reason: str) -> None:
        super().__init__(f"could not read {path or '<stream>'}: {reason}")
        self.path = path
        self.reason = reason
