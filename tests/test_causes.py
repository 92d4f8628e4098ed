import pytest

from quakelog.causes import CauseOfDeath
from quakelog.errors import InvalidCauseOfDeath


def test_vocabulary_has_every_means_of_death():
    assert len(CauseOfDeath) == 29
    assert CauseOfDeath.MOD_ROCKET.token == "MOD_ROCKET"
    assert list(CauseOfDeath)[0] is CauseOfDeath.MOD_BFG_SPLASH
    assert list(CauseOfDeath)[-1] is CauseOfDeath.MOD_WATER


def test_tokens_round_trip():
    for cause in CauseOfDeath:
        assert CauseOfDeath.from_token(cause.token) is cause
        assert cause.token == cause.name


@pytest.mark.parametrize("token", ["", "ROCKET", "MOD_ROCKET ", "Mod_Rocket", "MOD_NUKE"])
def test_unknown_tokens_are_rejected(token):
    with pytest.raises(InvalidCauseOfDeath) as excinfo:
        CauseOfDeath.from_token(token)
    assert excinfo.value.token == token
