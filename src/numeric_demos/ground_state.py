# src/numeric_demos/ground_state.py

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from .errors import ConvergenceFailure, InvalidArgument
from .logging_config import get_logger
from .numerov import Energy, WaveFunctionValue, estimate

logger = get_logger(__name__)

IterationCallback = Callable[[int, WaveFunctionValue, Energy], None]

DEFAULT_INITIAL_ENERGY_MEV = 1.0
DEFAULT_INITIAL_STEP_MEV = 0.1
DEFAULT_STEP_REDUCTION_FACTOR = 10.0
DEFAULT_TOLERANCE = 1e-9
DEFAULT_NUMEROV_ITERATIONS = 200
DEFAULT_MAX_ITERATIONS = 10_000

# Negative so the first pass always steps upward.
INITIAL_PSI: WaveFunctionValue = -1.0


class StepDirection(Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"


@dataclass(frozen=True)
class SearchConfig:
    initial_energy_mev: float = DEFAULT_INITIAL_ENERGY_MEV
    initial_step_mev: float = DEFAULT_INITIAL_STEP_MEV
    step_reduction_factor: float = DEFAULT_STEP_REDUCTION_FACTOR
    tolerance: float = DEFAULT_TOLERANCE
    numerov_iterations: int = DEFAULT_NUMEROV_ITERATIONS
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if self.initial_step_mev <= 0:
            raise InvalidArgument("initial_step_mev must be > 0")
        if self.step_reduction_factor <= 1:
            raise InvalidArgument("step_reduction_factor must be > 1")
        if self.tolerance <= 0:
            raise InvalidArgument("tolerance must be > 0")
        # one interval never runs the recurrence and just returns the seed
        if self.numerov_iterations < 2:
            raise InvalidArgument("numerov_iterations must be >= 2")
        if self.max_iterations <= 0:
            raise InvalidArgument("max_iterations must be > 0")


@dataclass
class SearchState:
    direction: StepDirection
    step_mev: float
    ground_state_mev: float
    psi: WaveFunctionValue
    iteration: int = 0

    @property
    def ground_state(self) -> Energy:
        return Energy(self.ground_state_mev)


class GroundStateSearch:
    """
    Walks the trial energy until the Numerov boundary value changes sign,
    then turns back with a smaller step.

    Each advance() looks at the sign of the current boundary value psi:

      - psi > 0: the energy is too high. Coming off an upward step means we
        overshot, so the step shrinks by step_reduction_factor. Step down.
      - psi <= 0: the energy is too low. Coming off a downward step shrinks
        the step the same way. Step up.

    psi is then recomputed from scratch at the new energy. The search stops
    once |psi| <= tolerance.

    Nothing guarantees termination for arbitrary starting values; it relies
    on psi(E) being smooth and single-signed on either side of the root
    near the starting energy, which holds for the harmonic oscillator.
    run() gives up with ConvergenceFailure after max_iterations.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        on_iteration: Optional[IterationCallback] = None,
    ):
        self.config = config if config is not None else SearchConfig()
        self.on_iteration = on_iteration
        self.state = SearchState(
            direction=StepDirection.INCREASING,
            step_mev=self.config.initial_step_mev,
            ground_state_mev=float(self.config.initial_energy_mev),
            psi=INITIAL_PSI,
        )

    @property
    def converged(self) -> bool:
        return abs(self.state.psi) <= self.config.tolerance

    def advance(self) -> SearchState:
        """
        Apply one transition and return a snapshot of the updated state.
        """
        s = self.state
        factor = self.config.step_reduction_factor

        if s.psi > 0:
            if s.direction is StepDirection.INCREASING:
                s.step_mev /= factor
                logger.debug("refining - (step=%g MeV)", s.step_mev)
            s.direction = StepDirection.DECREASING
            s.ground_state_mev -= s.step_mev
        else:
            if s.direction is StepDirection.DECREASING:
                s.step_mev /= factor
                logger.debug("refining + (step=%g MeV)", s.step_mev)
            s.direction = StepDirection.INCREASING
            s.ground_state_mev += s.step_mev

        s.psi = estimate(self.config.numerov_iterations, s.ground_state_mev)
        s.iteration += 1

        logger.debug(
            "iteration %d: psi%d=%r E=%r MeV",
            s.iteration,
            self.config.numerov_iterations,
            s.psi,
            s.ground_state_mev,
        )
        if self.on_iteration is not None:
            self.on_iteration(s.iteration, s.psi, s.ground_state)

        return replace(s)

    def run(self) -> Energy:
        while not self.converged:
            if self.state.iteration >= self.config.max_iterations:
                raise ConvergenceFailure(
                    f"no ground state within {self.config.max_iterations} iterations "
                    f"(last E={self.state.ground_state_mev!r} MeV, psi={self.state.psi!r})",
                    state=replace(self.state),
                )
            self.advance()

        result = self.state.ground_state
        logger.info(
            "ground state energy: %s after %d iterations", result, self.state.iteration
        )
        return result


def calculate_ground_state(
    config: Optional[SearchConfig] = None,
    on_iteration: Optional[IterationCallback] = None,
) -> Energy:
    """
    Search for the harmonic oscillator ground state energy, by default from
    1 MeV in 0.1 MeV steps until |psi| <= 1e-9 at the far wall.

    `on_iteration(iteration, psi, energy)` is called after every step.
    """
    return GroundStateSearch(config, on_iteration=on_iteration).run()
