import pytest

from quakelog.causes import CauseOfDeath
from quakelog.errors import InvalidCauseOfDeath, NoMatchOpen
from quakelog.models import WORLD, KillEntry, MatchStart
from scoreboard.session import MatchTracker, iter_matches

ROCKET = KillEntry("Dono da Bola", "Zeh", CauseOfDeath.MOD_ROCKET)
FALL = KillEntry(WORLD, "Isgalamido", CauseOfDeath.MOD_FALLING)


def test_no_entries_no_matches():
    assert list(iter_matches([])) == []


def test_match_without_kills_is_reported():
    ((number, scoreboard),) = iter_matches([MatchStart()])

    assert number == 1
    assert scoreboard.total_kills == 0
    assert len(scoreboard) == 0


def test_each_match_gets_a_fresh_scoreboard():
    matches = list(iter_matches([MatchStart(), ROCKET, MatchStart(), FALL, FALL]))

    assert [number for number, _ in matches] == [1, 2]
    first, second = matches[0][1], matches[1][1]
    assert first.total_kills == 1
    assert second.total_kills == 2
    assert second.get("Zeh") is None
    assert first.get("Isgalamido") is None
    assert second.get("Isgalamido").score == -2


def test_kill_before_match_is_fatal():
    tracker = MatchTracker()
    collected = []

    with pytest.raises(NoMatchOpen):
        for item in iter_matches([ROCKET, MatchStart()], tracker):
            collected.append(item)

    assert collected == []
    assert tracker.current is None
    assert tracker.match_number == 0


def test_feed_returns_finished_match():
    tracker = MatchTracker()

    assert tracker.feed(MatchStart()) is None
    assert tracker.feed(ROCKET) is None
    first = tracker.current
    assert tracker.feed(MatchStart()) is first
    assert tracker.match_number == 2
    assert tracker.current is not first
    assert tracker.finish().total_kills == 0
    assert tracker.current is None


def test_error_leaves_open_match_on_tracker():
    def entries():
        yield MatchStart()
        yield ROCKET
        yield MatchStart()
        yield FALL
        raise InvalidCauseOfDeath("MOD_BANANA")

    tracker = MatchTracker()
    collected = []
    with pytest.raises(InvalidCauseOfDeath):
        for item in iter_matches(entries(), tracker):
            collected.append(item)

    assert [(number, scoreboard.total_kills) for number, scoreboard in collected] == [(1, 1)]
    assert tracker.match_number == 2
    assert tracker.current.total_kills == 1
