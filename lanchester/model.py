from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, List, Literal, Optional

Winner = Literal["A", "B", "Draw"]

class AttritionLaw(Enum):
    """Lanchester attrition law"""
    SQUARE = "SQUARE"  # Aimed fire - ranged/magic, every shooter engages
    LINEAR = "LINEAR"  # Unaimed fire - area effects, melee saturation

@dataclass(frozen=True)
class UnitStats:
    """Aggregate profile of one side's homogeneous unit"""
    name: str
    count: int
    hp: float
    ac: int
    attack_bonus: int
    damage_dice_avg: float  # e.g. 1d8 = 4.5
    damage_mod: float

    def to_dict(self) -> Dict:
        return asdict(self)

@dataclass(frozen=True)
class SimulationStep:
    time: float
    count_a: float
    count_b: float

@dataclass(frozen=True)
class DiscreteStep:
    round: int
    count_a: int
    count_b: int
    casualties_a: int
    casualties_b: int

@dataclass(frozen=True)
class ContinuousOutcome:
    steps: List[SimulationStep]
    duration: float
    winner: Winner

@dataclass(frozen=True)
class DiscreteOutcome:
    steps: List[DiscreteStep]
    duration: int

@dataclass(frozen=True)
class SimulationResult:
    """Continuous and discrete runs of the same engagement"""
    continuous_steps: List[SimulationStep]
    discrete_steps: List[DiscreteStep]
    winner: Winner
    duration: float  # continuous model end time
    discrete_duration: int  # rounds consumed by the discrete model
    alpha: float  # B's lethality against A
    beta: float  # A's lethality against B

    def to_dict(self) -> Dict:
        return asdict(self)

@dataclass(frozen=True)
class ComparisonRow:
    round: int
    discrete_a: int
    discrete_b: int
    continuous_a: Optional[float] = None
    continuous_b: Optional[float] = None
    error_a: Optional[float] = None
    error_b: Optional[float] = None
