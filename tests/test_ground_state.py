import math

import pytest

from numeric_demos.errors import ConvergenceFailure, InvalidArgument
from numeric_demos.ground_state import (
    GroundStateSearch,
    SearchConfig,
    StepDirection,
    calculate_ground_state,
)
from numeric_demos.numerov import Energy, estimate

# Converged value of the default search, captured from a known-good run.
GOLDEN_GROUND_STATE_MEV = 1.5006671000000011
GOLDEN_ITERATIONS = 32


def test_default_search_converges_to_golden_energy():
    energy = calculate_ground_state()
    assert isinstance(energy, Energy)
    assert energy.mev == pytest.approx(GOLDEN_GROUND_STATE_MEV, abs=1e-12)


def test_result_zeroes_boundary_value():
    energy = calculate_ground_state()
    assert abs(estimate(200, energy)) <= 1e-9


def test_result_close_to_analytic_ground_state():
    # psi'' = (5.63e-3 x^2 - 0.05 E) psi  =>  E0 = sqrt(5.63e-3) / 0.05
    analytic = math.sqrt(5.63e-3) / 0.05
    assert calculate_ground_state().mev == pytest.approx(analytic, abs=1e-3)


def test_callback_sees_every_iteration():
    seen = []
    energy = calculate_ground_state(on_iteration=lambda i, psi, e: seen.append((i, psi, e)))
    assert [i for i, _, _ in seen] == list(range(1, GOLDEN_ITERATIONS + 1))
    assert seen[-1][2] == energy
    assert abs(seen[-1][1]) <= 1e-9
    assert all(abs(psi) > 1e-9 for _, psi, _ in seen[:-1])


def test_initial_state():
    search = GroundStateSearch()
    assert search.state.direction is StepDirection.INCREASING
    assert search.state.step_mev == 0.1
    assert search.state.ground_state_mev == 1.0
    assert search.state.psi == -1.0
    assert search.state.iteration == 0
    assert not search.converged


def test_first_step_goes_up():
    search = GroundStateSearch()
    state = search.advance()
    assert state.direction is StepDirection.INCREASING
    assert state.ground_state_mev == pytest.approx(1.1)
    assert state.step_mev == 0.1
    assert state.psi == estimate(200, state.ground_state_mev)
    assert state.iteration == 1


def test_overshoot_shrinks_step_and_turns_back():
    search = GroundStateSearch()
    for _ in range(6):
        search.advance()
    # 1.6 MeV is past the root
    assert search.state.ground_state_mev == pytest.approx(1.6)
    assert search.state.psi > 0

    state = search.advance()
    assert state.direction is StepDirection.DECREASING
    assert state.step_mev == pytest.approx(0.01)
    assert state.ground_state_mev == pytest.approx(1.59)


def test_no_shrink_while_direction_unchanged():
    search = GroundStateSearch()
    for _ in range(7):
        search.advance()
    state = search.advance()
    assert state.direction is StepDirection.DECREASING
    assert state.step_mev == pytest.approx(0.01)
    assert state.ground_state_mev == pytest.approx(1.58)


def test_search_from_above_turns_back():
    config = SearchConfig(initial_energy_mev=2.0)
    energy = calculate_ground_state(config)
    assert energy.mev == pytest.approx(GOLDEN_GROUND_STATE_MEV, abs=1e-6)
    assert abs(estimate(200, energy)) <= config.tolerance


def test_looser_tolerance_stops_earlier():
    strict = GroundStateSearch()
    strict.run()
    loose = GroundStateSearch(SearchConfig(tolerance=1e-6))
    loose.run()
    assert loose.state.iteration < strict.state.iteration
    assert abs(loose.state.psi) <= 1e-6


def test_iteration_cap_raises_convergence_failure():
    search = GroundStateSearch(SearchConfig(max_iterations=3))
    with pytest.raises(ConvergenceFailure) as excinfo:
        search.run()
    assert excinfo.value.state == search.state
    assert excinfo.value.state is not search.state
    assert excinfo.value.state.iteration == 3


def test_convergence_failure_is_runtime_error():
    with pytest.raises(RuntimeError):
        calculate_ground_state(SearchConfig(max_iterations=1))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"initial_step_mev": 0.0},
        {"step_reduction_factor": 1.0},
        {"tolerance": 0.0},
        {"numerov_iterations": 0},
        {"numerov_iterations": 1},
        {"max_iterations": 0},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(InvalidArgument):
        SearchConfig(**kwargs)


def test_debug_trace_logged(caplog):
    with caplog.at_level("DEBUG", logger="numeric_demos.ground_state"):
        calculate_ground_state()
    assert "refining -" in caplog.text
    assert "refining +" in caplog.text
    assert "iteration 1:" in caplog.text
    assert "ground state energy" in caplog.text


def test_advance_returns_a_snapshot():
    search = GroundStateSearch()
    first = search.advance()
    second = search.advance()
    assert first.iteration == 1
    assert first.ground_state_mev == pytest.approx(1.1)
    assert second.iteration == 2
    assert second is not search.state
    assert second == search.state


def test_integer_initial_energy():
    search = GroundStateSearch(SearchConfig(initial_energy_mev=2))
    assert float(search.state.ground_state) == 2.0
    assert str(search.state.ground_state) == "2.0 MeV"
    state = search.advance()
    assert state.ground_state_mev == pytest.approx(2.1)
