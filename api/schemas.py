from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from lanchester.model import AttritionLaw, UnitStats

class UnitStatsIn(BaseModel):
    """Unit profile schema. Rejects stats the engine cannot handle."""
    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(min_length=1)
    count: int = Field(ge=1)
    hp: float = Field(gt=0)
    ac: int
    attack_bonus: int
    damage_dice_avg: float = Field(ge=0)
    damage_mod: float

    @model_validator(mode="after")
    def check_hit_damage(self) -> "UnitStatsIn":
        # A negative hit would heal the target
        if self.damage_dice_avg + self.damage_mod < 0:
            raise ValueError("damage_dice_avg + damage_mod must not be negative")
        return self

    def to_unit(self) -> UnitStats:
        return UnitStats(**self.model_dump())

class SimulateRequest(BaseModel):
    """Simulation request schema."""
    model_config = ConfigDict(allow_inf_nan=False)

    unit_a: UnitStatsIn
    unit_b: UnitStatsIn
    law: AttritionLaw = AttritionLaw.SQUARE
    max_time: Optional[float] = Field(default=None, gt=0, le=10_000)
    max_rounds: Optional[int] = Field(default=None, ge=1, le=1_000)

class SimulationResponse(BaseModel):
    """Simulation response schema."""
    continuous_steps: list[dict]
    discrete_steps: list[dict]
    winner: str
    duration: float
    discrete_duration: int
    alpha: float
    beta: float
    comparison: list[dict]
