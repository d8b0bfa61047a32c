# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import math
import time

from numeric_demos.errors import InvalidArgument
from numeric_demos.numerov import Energy, WaveFunctionValue


@dataclass(frozen=True)
class BeanMachineSpec:
    """
    Board and run parameters for one bean machine experiment.
    """
    size: int
    depth: int
    trials: int

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise InvalidArgument("size must be > 0")
        if self.depth < 0:
            raise InvalidArgument("depth must be >= 0")
        if self.trials < 0:
            raise InvalidArgument("trials must be >= 0")

    @property
    def start_position(self) -> int:
        return self.size // 2


@dataclass(frozen=True)
class SummaryStats:
    """
    Summary of where the balls ended up. min/max are the outermost
    occupied bins.
    """
    min: int
    max: int
    mean: float
    std: float  # population stddev


def summarize_positions(counts: List[int]) -> SummaryStats:
    """
    Treat counts as a frequency table (index = position) and compute
    min/max/mean/std of the positions (population stddev, two passes).
    """
    if not counts:
        raise ValueError("counts must be non-empty")

    occupied = [p for p, c in enumerate(counts) if c > 0]
    if not occupied:
        raise ValueError("counts must contain at least one trial")

    n = 0
    total = 0
    for p, c in enumerate(counts):
        n += c
        total += p * c
    mean = total / n

    var_acc = 0.0
    for p, c in enumerate(counts):
        d = p - mean
        var_acc += c * d * d
    std = math.sqrt(var_acc / n)

    return SummaryStats(min=occupied[0], max=occupied[-1], mean=mean, std=std)


@dataclass
class BeanMachineResult:
    spec: BeanMachineSpec
    counts: List[int]

    stats: Optional[SummaryStats] = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.counts) != self.spec.size:
            raise ValueError(
                f"counts length mismatch: expected {self.spec.size}, got {len(self.counts)}"
            )

        # Sanity: counts should sum to trials
        actual = sum(self.counts)
        if actual != self.spec.trials:
            raise ValueError(
                f"counts sum mismatch: expected {self.spec.trials}, got {actual}"
            )

        self.stats = summarize_positions(self.counts) if self.spec.trials else None


@dataclass
class GroundStateResult:
    energy: Energy
    psi: WaveFunctionValue
    iterations: int
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)


class Timer:
    """
    Tiny timing helper.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def _runtime_suffix(runtime_s: Optional[float]) -> str:
    return f", runtime={runtime_s:.3f}s" if runtime_s is not None else ""


def format_stats_line(r: BeanMachineResult) -> str:
    """
    Human-friendly one-liner for the CLI.
    """
    head = f"bean machine (size={r.spec.size}, depth={r.spec.depth}, trials={r.spec.trials})"
    if r.stats is None:
        return head + ": no trials" + _runtime_suffix(r.runtime_s)
    s = r.stats
    return (
        f"{head}: min={s.min}, max={s.max}, mean={s.mean:.3f}, std={s.std:.3f}"
        + _runtime_suffix(r.runtime_s)
    )


def format_ground_state_line(r: GroundStateResult) -> str:
    return (
        f"ground state: E={r.energy}, psi={r.psi:.3e}, iterations={r.iterations}"
        + _runtime_suffix(r.runtime_s)
    )
