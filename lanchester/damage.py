import math

from .model import UnitStats

CRIT_CHANCE = 0.05
MIN_HIT_CHANCE = 0.05
MAX_HIT_CHANCE = 0.95

def hit_chance(attacker: UnitStats, defender: UnitStats) -> float:
    """d20 to-hit roll against AC, clamped so nothing is certain or impossible."""
    p = (21 + attacker.attack_bonus - defender.ac) / 20
    return max(MIN_HIT_CHANCE, min(MAX_HIT_CHANCE, p))

def effective_damage_per_round(attacker: UnitStats, defender: UnitStats) -> float:
    """Expected damage one attacker deals to one defender per round."""
    avg_hit_dmg = attacker.damage_dice_avg + attacker.damage_mod
    # Crits roll the dice again, modifier excluded
    crit_dmg = CRIT_CHANCE * attacker.damage_dice_avg
    return hit_chance(attacker, defender) * avg_hit_dmg + crit_dmg

def lethality_coefficient(attacker: UnitStats, target: UnitStats) -> float:
    """Fraction of one target's HP pool a single attacker removes per round.

    Not guarded against ``target.hp <= 0``: a zero pool gives inf (or nan for
    zero damage) instead of raising. Request validation rejects such units.
    """
    dpr = effective_damage_per_round(attacker, target)
    if target.hp == 0:
        return math.copysign(math.inf, dpr) if dpr else math.nan
    return dpr / target.hp
