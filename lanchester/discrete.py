import logging
import math
from typing import List

from .damage import effective_damage_per_round
from .model import AttritionLaw, DiscreteOutcome, DiscreteStep, UnitStats

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 20

def _kills(total_damage: float, target_hp: float) -> float:
    """Whole units destroyed, assuming damage is focused rather than spread."""
    if target_hp == 0:
        return math.inf if total_damage > 0 else 0
    kills = total_damage / target_hp
    return math.floor(kills) if math.isfinite(kills) else 0

def run_discrete(unit_a: UnitStats, unit_b: UnitStats, law: AttritionLaw,
                 max_rounds: int = DEFAULT_MAX_ROUNDS) -> DiscreteOutcome:
    """Round-by-round integer combat with simultaneous casualties.

    Both laws aggregate damage the same way here; every round is resolved
    as focus fire.
    """
    if not isinstance(law, AttritionLaw):
        raise ValueError(f"Unknown attrition law: {law!r}")

    count_a = unit_a.count
    count_b = unit_b.count
    steps: List[DiscreteStep] = [DiscreteStep(0, count_a, count_b, 0, 0)]

    # Stats do not change mid-combat
    dpr_a = effective_damage_per_round(unit_a, unit_b)
    dpr_b = effective_damage_per_round(unit_b, unit_a)

    rnd = 1
    while count_a > 0 and count_b > 0 and rnd <= max_rounds:
        total_dmg_a = count_a * dpr_a
        total_dmg_b = count_b * dpr_b

        # Both from pre-round counts, nobody shoots first
        kills_b = _kills(total_dmg_a, unit_b.hp)
        kills_a = _kills(total_dmg_b, unit_a.hp)

        prev_a, prev_b = count_a, count_b
        count_a = int(max(0, count_a - kills_a))
        count_b = int(max(0, count_b - kills_b))

        steps.append(DiscreteStep(rnd, count_a, count_b, prev_a - count_a, prev_b - count_b))
        rnd += 1

    logger.debug("discrete %s run ended after %d rounds at %d vs %d",
                 law.value, rnd - 1, count_a, count_b)
    return DiscreteOutcome(steps, rnd - 1)
