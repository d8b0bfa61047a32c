# simulations/run.py

from __future__ import annotations

from typing import Optional

from numeric_demos.bean_machine import CoinFn, run_bean_machine_simulation
from numeric_demos.ground_state import GroundStateSearch, IterationCallback, SearchConfig

from .common import BeanMachineResult, BeanMachineSpec, GroundStateResult, Timer


def run_bean_machine(
    size: int,
    depth: int,
    trials: int,
    seed: Optional[int] = 42,
    coin: Optional[CoinFn] = None,
) -> BeanMachineResult:
    """
    Run one timed bean machine experiment.

    Parameters
    ----------
    size:
        Number of bins; balls start in bin size // 2.
    depth:
        Number of peg rows. Use an even depth.
    trials:
        Number of balls to drop.
    seed:
        RNG seed (None for a fresh, unseeded generator).
    coin:
        Optional replacement for the coin flip.

    Returns
    -------
    BeanMachineResult
    """
    spec = BeanMachineSpec(size=size, depth=depth, trials=trials)

    with Timer() as t:
        counts = run_bean_machine_simulation(
            spec.size, spec.depth, spec.trials, seed=seed, coin=coin
        )

    return BeanMachineResult(
        spec=spec,
        counts=counts,
        runtime_s=t.elapsed_s,
        meta={"seed": seed, "start_position": spec.start_position},
    )


def run_ground_state(
    config: Optional[SearchConfig] = None,
    on_iteration: Optional[IterationCallback] = None,
) -> GroundStateResult:
    """
    Run the ground state search to convergence and time it.
    Raises ConvergenceFailure when it runs out of iterations.
    """
    search = GroundStateSearch(config, on_iteration=on_iteration)

    with Timer() as t:
        energy = search.run()

    return GroundStateResult(
        energy=energy,
        psi=search.state.psi,
        iterations=search.state.iteration,
        runtime_s=t.elapsed_s,
        meta={
            "numerov_iterations": search.config.numerov_iterations,
            "tolerance": search.config.tolerance,
            "final_step_mev": search.state.step_mev,
        },
    )
