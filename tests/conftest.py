import pytest

from lanchester.model import UnitStats


def make_unit(name: str = "Guard", count: int = 5, hp: float = 11, ac: int = 16,
              attack_bonus: int = 3, damage_dice_avg: float = 4.5,
              damage_mod: float = 1) -> UnitStats:
    """Build a unit, defaulting to a 5e guard."""
    return UnitStats(name=name, count=count, hp=hp, ac=ac, attack_bonus=attack_bonus,
                     damage_dice_avg=damage_dice_avg, damage_mod=damage_mod)


@pytest.fixture
def guards() -> UnitStats:
    return make_unit()


@pytest.fixture
def commoners() -> UnitStats:
    return make_unit("Commoner", count=20, hp=4, ac=10, attack_bonus=2,
                     damage_dice_avg=2.5, damage_mod=0)


@pytest.fixture
def veterans() -> UnitStats:
    return make_unit("Veteran", count=3, hp=58, ac=17, attack_bonus=5,
                     damage_dice_avg=7, damage_mod=3)


@pytest.fixture
def goblins() -> UnitStats:
    return make_unit("Goblin", count=15, hp=7, ac=15, attack_bonus=4,
                     damage_dice_avg=3.5, damage_mod=2)


@pytest.fixture
def pacifists() -> UnitStats:
    return make_unit("Pacifist", count=10, damage_dice_avg=0, damage_mod=0)
