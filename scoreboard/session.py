from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

from quakelog.errors import NoMatchOpen
from quakelog.models import LogEntry, MatchStart

from .models import MatchScoreboard

logger = logging.getLogger(__name__)


class MatchTracker:
    """
    Owns the scoreboard of the match currently being read.

    A new scoreboard replaces the old one on every ``InitGame``; nothing is
    carried over between matches.
    """

    def __init__(self) -> None:
        self.current: Optional[MatchScoreboard] = None
        self.match_number = 0

    def feed(self, entry: LogEntry) -> Optional[MatchScoreboard]:
        if isinstance(entry, MatchStart):
            finished = self.current
            self.current = MatchScoreboard()
            self.match_number += 1
            logger.info("match %d started", self.match_number)
            return finished
        if self.current is None:
            raise NoMatchOpen()
        self.current.record(entry)
        logger.debug("match %d: %s killed %s by %s", self.match_number, entry.killer, entry.victim, entry.cause.token)
        return None

    def finish(self) -> Optional[MatchScoreboard]:
        finished, self.current = self.current, None
        return finished


def iter_matches(
    entries: Iterable[LogEntry], tracker: Optional[MatchTracker] = None
) -> Iterator[Tuple[int, MatchScoreboard]]:
    """Yield ``(match_number, scoreboard)`` for each completed match in log order.

    Errors propagate as soon as they are raised; the match open at that point
    stays on ``tracker.current`` and is not yielded.
    """
    if tracker is None:
        tracker = MatchTracker()
    for entry in entries:
        finished = tracker.feed(entry)
        if finished is not None:
            yield tracker.match_number - 1, finished
    last = tracker.finish()
    if last is not None:
        yield tracker.match_number, last
