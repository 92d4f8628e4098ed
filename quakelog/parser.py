from __future__ import annotations

import logging
import os
import re
from typing import Iterable, Iterator, Optional, Union

from .causes import CauseOfDeath
from .errors import LogReadError
from .metrics import Metrics
from .models import KillEntry, LogEntry, MatchStart

logger = logging.getLogger(__name__)

# Every line starts with a "<min>:<ss>" game clock, optionally indented.
# Player names may contain whitespace, so both name groups are greedy and a
# name containing " killed " or " by " is split in the wrong place.
INIT_GAME_PATTERN = re.compile(r"^\s*\d+:\d+ InitGame:")
KILL_PATTERN = re.compile(r"^\s*\d+:\d+ Kill: \d+ \d+ \d+: (.+) killed (.+) by (\S+)")


def parse_line(line: str) -> Optional[LogEntry]:
    """Return the entry for a single line, or ``None`` when the line is not modelled."""
    if INIT_GAME_PATTERN.match(line):
        return MatchStart()
    match = KILL_PATTERN.match(line)
    if match is None:
        return None
    killer, victim, token = match.groups()
    return KillEntry(killer=killer, victim=victim, cause=CauseOfDeath.from_token(token))


def iter_log_entries(lines: Iterable[str], metrics: Optional[Metrics] = None) -> Iterator[LogEntry]:
    for line in lines:
        if metrics:
            metrics.increment("lines_read")
        entry = parse_line(line)
        if entry is None:
            if metrics:
                metrics.increment("lines_skipped")
            logger.debug("skipping line: %r", line)
            continue
        if metrics:
            metrics.increment("matches_started" if isinstance(entry, MatchStart) else "kills_parsed")
        yield entry


def _read_lines(path: Union[str, os.PathLike], encoding: str) -> Iterator[str]:
    try:
        with open(path, encoding=encoding) as handle:
            for line in handle:
                yield line
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise LogReadError(os.fspath(path), str(exc)) from exc


def read_log(
    path: Union[str, os.PathLike],
    encoding: str = "utf-8",
    metrics: Optional[Metrics] = None,
) -> Iterator[LogEntry]:
    """Stream entries from the log at ``path`` one line at a time.

    The file is opened on first iteration. Read failures surface as
    :class:`LogReadError` and end the stream, as does an unknown cause of death.
    """
    logger.info("reading log %s", path)
    return iter_log_entries(_read_lines(path, encoding), metrics=metrics)
