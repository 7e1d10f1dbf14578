import logging

from .continuous import run_continuous
from .damage import lethality_coefficient
from .discrete import DEFAULT_MAX_ROUNDS, run_discrete
from .model import AttritionLaw, SimulationResult, UnitStats

logger = logging.getLogger(__name__)

DEFAULT_MAX_TIME = 100.0

def run_simulation(unit_a: UnitStats, unit_b: UnitStats, law: AttritionLaw,
                   max_time: float = DEFAULT_MAX_TIME,
                   max_rounds: int = DEFAULT_MAX_ROUNDS) -> SimulationResult:
    """Run the continuous and discrete models on one engagement.

    Pure function of its arguments: each call builds a fresh result and
    shares no state with other calls.
    """
    alpha = lethality_coefficient(unit_b, unit_a)  # B against A
    beta = lethality_coefficient(unit_a, unit_b)  # A against B

    continuous = run_continuous(unit_a, unit_b, law, alpha, beta, max_time)
    discrete = run_discrete(unit_a, unit_b, law, max_rounds)

    logger.debug("%s vs %s (%s): alpha=%.4f beta=%.4f winner=%s",
                 unit_a.name, unit_b.name, law.value, alpha, beta, continuous.winner)

    return SimulationResult(
        continuous_steps=continuous.steps,
        discrete_steps=discrete.steps,
        winner=continuous.winner,
        duration=continuous.duration,
        discrete_duration=discrete.duration,
        alpha=alpha,
        beta=beta,
    )
