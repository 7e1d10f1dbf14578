from typing import Dict

from .model import UnitStats

# Stock 5e stat blocks, reduced to the attributes the model uses
UNIT_PRESETS: Dict[str, UnitStats] = {
    "COMMONER": UnitStats(
        name="Commoner",
        count=20,
        hp=4,
        ac=10,
        attack_bonus=2,
        damage_dice_avg=2.5,  # 1d4
        damage_mod=0,
    ),
    "GUARD": UnitStats(
        name="Guard",
        count=5,
        hp=11,
        ac=16,
        attack_bonus=3,
        damage_dice_avg=4.5,  # 1d8
        damage_mod=1,
    ),
    "VETERAN": UnitStats(
        name="Veteran",
        count=3,
        hp=58,
        ac=17,
        attack_bonus=5,
        damage_dice_avg=7,  # multiattack folded into one figure
        damage_mod=3,
    ),
    "GOBLIN": UnitStats(
        name="Goblin",
        count=15,
        hp=7,
        ac=15,
        attack_bonus=4,
        damage_dice_avg=3.5,  # 1d6
        damage_mod=2,
    ),
}

def get_preset(preset_id: str) -> UnitStats:
    """Look up a preset by id, case-insensitive. Raises KeyError if unknown."""
    return UNIT_PRESETS[preset_id.upper()]
