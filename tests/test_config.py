"""Test settings and request schema validation."""
import pytest
from pydantic import ValidationError

from api.config import Settings
from api.schemas import UnitStatsIn

GUARD = {"name": "Guard", "count": 5, "hp": 11, "ac": 16, "attack_bonus": 3,
         "damage_dice_avg": 4.5, "damage_mod": 1}


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("LANCHESTER_LOG_LEVEL", "DEBUG")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LANCHESTER_LOG_LEVEL", "VERBOSE")
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize("dice,mod", [(2.5, -3), (0, -1)])
def test_negative_hit_damage_is_rejected(dice, mod):
    with pytest.raises(ValidationError):
        UnitStatsIn(**{**GUARD, "damage_dice_avg": dice, "damage_mod": mod})


def test_penalty_down_to_zero_hit_damage_is_accepted():
    unit = UnitStatsIn(**{**GUARD, "damage_dice_avg": 2.5, "damage_mod": -2.5}).to_unit()
    assert unit.damage_dice_avg + unit.damage_mod == 0
