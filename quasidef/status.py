"""Solver status codes and solution records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SolverStatus(Enum):
    """Termination status of a solve."""

    Unsolved = 0
    Solved = 1
    PrimalInfeasible = 2
    DualInfeasible = 3
    AlmostSolved = 4
    AlmostPrimalInfeasible = 5
    AlmostDualInfeasible = 6
    MaxIterations = 7
    MaxTime = 8
    NumericalError = 9
    InsufficientProgress = 10

    def __repr__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return self.value


@dataclass
class DefaultSolution:
    """Primal and dual variables and summary data from a solve."""

    x: list[float] = field(default_factory=list)
    s: list[float] = field(default_factory=list)
    z: list[float] = field(default_factory=list)
    status: SolverStatus = SolverStatus.Unsolved
    obj_val: float = 0.0
    solve_time: float = 0.0
    iterations: int = 0
    r_prim: float = 0.0
    r_dual: float = 0.0

    def __repr__(self) -> str:
        return "Solver solution object"