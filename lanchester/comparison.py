from typing import List, Optional

from .model import ComparisonRow, SimulationResult, SimulationStep

ALIGN_TOLERANCE = 0.05

def _step_at(steps: List[SimulationStep], time: float) -> Optional[SimulationStep]:
    for step in steps:
        if abs(step.time - time) < ALIGN_TOLERANCE:
            return step
    return None

def compare_models(result: SimulationResult) -> List[ComparisonRow]:
    """Line up every discrete round with the continuous sample at the same time.

    Continuous values are None once the continuous run has already ended.
    """
    rows: List[ComparisonRow] = []
    for d in result.discrete_steps:
        c = _step_at(result.continuous_steps, d.round)
        if c is None:
            rows.append(ComparisonRow(d.round, d.count_a, d.count_b))
            continue
        rows.append(ComparisonRow(
            round=d.round,
            discrete_a=d.count_a,
            discrete_b=d.count_b,
            continuous_a=c.count_a,
            continuous_b=c.count_b,
            error_a=c.count_a - d.count_a,
            error_b=c.count_b - d.count_b,
        ))
    return rows

def max_abs_error(rows: List[ComparisonRow]) -> float:
    errors = [abs(e) for r in rows for e in (r.error_a, r.error_b) if e is not None]
    return max(errors, default=0.0)
