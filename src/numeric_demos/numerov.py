# src/numeric_demos/numerov.py
"""
Numerov integration of the harmonic oscillator Schrodinger equation.

The equation is written as

    psi''(x) = -k^2(x) psi(x),   k^2(x) = 0.05 E - 5.63e-3 x^2

on x in [-15, 15], with E in MeV. The grid has `iterations` intervals of
width h = 30 / iterations, so grid index n sits at x = h n - 15.

Starting from psi_0 = 0 and psi_1 = -1e-9 the three point recurrence

    psi_{n+1} = [2 (1 - 5 h^2 k_n^2 / 12) psi_n - (1 + h^2 k_{n-1}^2 / 12) psi_{n-1}]
                / (1 + h^2 k_{n+1}^2 / 12)

is marched to the far wall. For an eigenvalue E the solution dies away
there, so the value at the last grid point is a zero-crossing test for E.

Everything here is plain IEEE double arithmetic in a fixed operation order,
so results are reproducible bit for bit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from .errors import InvalidArgument

# Scalar wave function amplitude; |psi|^2 is a probability per unit length.
WaveFunctionValue = float

DOMAIN_WIDTH: float = 30.0
DOMAIN_HALF_WIDTH: float = 15.0
ENERGY_COUPLING: float = 0.05
POTENTIAL_COUPLING: float = 5.63e-3

# psi_0, psi_1: any non-zero psi_1 avoids the trivial solution.
PSI_SEED: Tuple[float, float] = (0.0, -1e-9)


@dataclass(frozen=True)
class Energy:
    """An energy in MeV."""
    mev: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "mev", float(self.mev))

    def __float__(self) -> float:
        return self.mev

    def __str__(self) -> str:
        return f"{self.mev} MeV"


EnergyLike = Union[Energy, float]


def grid_spacing(iterations: int) -> float:
    if iterations <= 0:
        raise InvalidArgument("iterations must be > 0")
    return DOMAIN_WIDTH / iterations


def k_squared(n: int, h: float, energy_mev: float) -> float:
    x = h * n - DOMAIN_HALF_WIDTH
    return (ENERGY_COUPLING * energy_mev) - ((x * x) * POTENTIAL_COUPLING)


def next_psi(
    n: int,
    psi_prev: float,
    psi: float,
    energy_mev: float,
    h: float,
) -> WaveFunctionValue:
    """One Numerov step: psi_{n+1} from psi_{n-1} and psi_n."""
    k_sq_prev = k_squared(n - 1, h, energy_mev)
    k_sq = k_squared(n, h, energy_mev)
    k_sq_next = k_squared(n + 1, h, energy_mev)

    h_sq = h * h

    result = 2 * (1 - (5 * h_sq * k_sq / 12)) * psi
    result -= (1 + (h_sq * k_sq_prev / 12)) * psi_prev
    result /= 1 + (h_sq * k_sq_next / 12)
    return result


def estimate(iterations: int, energy: EnergyLike) -> WaveFunctionValue:
    """
    Wave function value at the far boundary for a trial energy.

    Only the last two values are kept while marching; use
    wavefunction_profile() for the whole solution.
    """
    h = grid_spacing(iterations)
    e = float(energy)

    psi_prev, psi = PSI_SEED
    for n in range(1, iterations):
        psi_prev, psi = psi, next_psi(n, psi_prev, psi, e, h)
    return psi


def wavefunction_profile(iterations: int, energy: EnergyLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    March the recurrence across the whole domain and keep every value.

    Returns
    -------
    x : np.ndarray, shape (iterations + 1,)
        Grid points h n - 15.
    psi : np.ndarray, shape (iterations + 1,)
        Unnormalised solution. psi[-1] equals estimate(iterations, energy)
        exactly.
    """
    h = grid_spacing(iterations)
    e = float(energy)

    psi = np.zeros(iterations + 1, dtype=float)
    psi[0], psi[1] = PSI_SEED
    for n in range(1, iterations):
        psi[n + 1] = next_psi(n, float(psi[n - 1]), float(psi[n]), e, h)

    x = h * np.arange(iterations + 1, dtype=float) - DOMAIN_HALF_WIDTH
    return x, psi
