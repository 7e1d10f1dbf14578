import logging
import math
from typing import List

import numpy as np

from .model import AttritionLaw, ContinuousOutcome, SimulationStep, UnitStats, Winner

logger = logging.getLogger(__name__)

SQUARE_DT = 0.1  # plotting resolution only, the closed form is exact
LINEAR_DT = 0.05

def _t(t: float) -> float:
    return round(t, 2)

def _winner(a: float, b: float) -> Winner:
    # Equal survivors, including mutual annihilation, is a draw
    return "A" if a > b else ("B" if b > a else "Draw")

def _run_square(a0: float, b0: float, alpha: float, beta: float, max_time: float) -> ContinuousOutcome:
    """Aimed fire: dA/dt = -alpha*B, dB/dt = -beta*A, sampled from the hyperbolic solution."""
    with np.errstate(all="ignore"):
        k = float(np.sqrt(np.float64(alpha) * np.float64(beta)))
        if k == 0:
            # No mutual damage, the closed form would divide by zero
            return ContinuousOutcome([SimulationStep(0.0, a0, b0)], 0.0, "Draw")

        factor_a = np.sqrt(np.float64(alpha) / np.float64(beta))
        factor_b = np.sqrt(np.float64(beta) / np.float64(alpha))

        n = max(1, int(math.floor(max_time / SQUARE_DT + 1e-9)) + 1)
        times = np.arange(n) * SQUARE_DT
        cosh = np.cosh(k * times)
        sinh = np.sinh(k * times)
        at = a0 * cosh - b0 * factor_a * sinh
        bt = b0 * cosh - a0 * factor_b * sinh
        exhausted = np.flatnonzero((at <= 0) | (bt <= 0))
    end = int(exhausted[0]) if exhausted.size else n - 1

    steps: List[SimulationStep] = [
        SimulationStep(_t(float(times[i])), float(at[i]), float(bt[i])) for i in range(end)
    ]

    a_end = float(at[end])
    b_end = float(bt[end])
    if not exhausted.size:
        steps.append(SimulationStep(_t(float(times[end])), a_end, b_end))
        # Never reached zero within the horizon
        return ContinuousOutcome(steps, max_time, "Draw")

    a_end = 0.0 if a_end < 0 else a_end
    b_end = 0.0 if b_end < 0 else b_end
    duration = _t(float(times[end]))
    steps.append(SimulationStep(duration, a_end, b_end))
    winner = _winner(a_end, b_end)
    return ContinuousOutcome(steps, duration, winner)

def _run_linear(a0: float, b0: float, alpha: float, beta: float, max_time: float) -> ContinuousOutcome:
    """Unaimed fire: dA/dt = -alpha*A*B, dB/dt = -beta*A*B, forward Euler."""
    a, b, t = a0, b0, 0.0
    dt = LINEAR_DT
    steps: List[SimulationStep] = [SimulationStep(0.0, a, b)]

    while a > 0 and b > 0 and t < max_time:
        d_a = -alpha * a * b * dt
        d_b = -beta * a * b * dt
        a += d_a
        b += d_b
        t += dt

        if a < 0:
            a = 0.0
        if b < 0:
            b = 0.0

        steps.append(SimulationStep(_t(t), a, b))

    return ContinuousOutcome(steps, _t(t), _winner(a, b))

def run_continuous(unit_a: UnitStats, unit_b: UnitStats, law: AttritionLaw,
                   alpha: float, beta: float, max_time: float) -> ContinuousOutcome:
    """Fractional force sizes over time under the given law.

    alpha is B's lethality against A and beta is A's lethality against B.
    The run ends when either side is exhausted or at max_time.
    """
    a0 = float(unit_a.count)
    b0 = float(unit_b.count)

    if law is AttritionLaw.SQUARE:
        outcome = _run_square(a0, b0, alpha, beta, max_time)
    elif law is AttritionLaw.LINEAR:
        outcome = _run_linear(a0, b0, alpha, beta, max_time)
    else:
        raise ValueError(f"Unknown attrition law: {law!r}")

    logger.debug("continuous %s run ended at t=%s, winner=%s (%d steps)",
                 law.value, outcome.duration, outcome.winner, len(outcome.steps))
    return outcome
