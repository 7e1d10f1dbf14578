"""Lanchester attrition models, continuous and turn-based."""

from .comparison import compare_models, max_abs_error
from .damage import effective_damage_per_round, lethality_coefficient
from .engine import run_simulation
from .model import (
    AttritionLaw,
    ComparisonRow,
    DiscreteStep,
    SimulationResult,
    SimulationStep,
    UnitStats,
)
from .presets import UNIT_PRESETS, get_preset

__all__ = [
    "AttritionLaw",
    "ComparisonRow",
    "DiscreteStep",
    "SimulationResult",
    "SimulationStep",
    "UNIT_PRESETS",
    "UnitStats",
    "compare_models",
    "effective_damage_per_round",
    "get_preset",
    "lethality_coefficient",
    "max_abs_error",
    "run_simulation",
]
