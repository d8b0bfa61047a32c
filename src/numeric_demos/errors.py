# src/numeric_demos/errors.py

from __future__ import annotations

from typing import Any, Optional


class NumericDemosError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgument(NumericDemosError, ValueError):
    """An input that cannot be clamped into something meaningful."""


class ConvergenceFailure(NumericDemosError, RuntimeError):
    """
    Raised when an iterative search runs out of iterations before reaching
    its terminal condition. `state` holds the last state seen, if any.
    """

    def __init__(self, message: str, state: Optional[Any] = None):
        super().__init__(message)
        self.state = state
