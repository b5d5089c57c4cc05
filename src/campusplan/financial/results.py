# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Solver result types.

``CircularSolver.solve`` never raises for bad inputs or non-convergence; it
returns one of two tagged results. Check ``result.success`` (or use
``isinstance``) before reading the projection.

Failure codes by kind:
    VALIDATION: INVALID_PARAMS, OPENING_BALANCE_MISMATCH
    NON_CONVERGENCE: NOT_CONVERGED
    COMPUTATION: SOLVER_ERROR, BALANCE_SHEET_IMBALANCE
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Literal, Optional, Union

from ..core.primitives import SolverErrorKind
from .convergence import ConvergenceCheck
from .projection import YearProjection

INVALID_PARAMS = "INVALID_PARAMS"
OPENING_BALANCE_MISMATCH = "OPENING_BALANCE_MISMATCH"
NOT_CONVERGED = "NOT_CONVERGED"
SOLVER_ERROR = "SOLVER_ERROR"
BALANCE_SHEET_IMBALANCE = "BALANCE_SHEET_IMBALANCE"


@dataclass(frozen=True)
class SolveSuccess:
    """
    Converged, balanced projection.

    Attributes:
        projection: One YearProjection per year, in year order
        iterations: Number of passes computed (including the converging one)
        max_error: Largest per-year error of the final convergence check
        duration_ms: Wall-clock solve time in milliseconds
        convergence: Full result of the final convergence check
    """

    projection: List[YearProjection]
    iterations: int
    max_error: Decimal
    duration_ms: float
    convergence: ConvergenceCheck

    success: Literal[True] = True

    @property
    def years(self) -> List[int]:
        return [year.year for year in self.projection]


@dataclass(frozen=True)
class SolveFailure:
    """
    Solve that did not produce a usable projection.

    Non-convergence and balance failures carry the last computed projection
    for diagnosis; validation failures never have one.
    """

    kind: SolverErrorKind
    code: str
    message: str
    projection: Optional[List[YearProjection]] = None
    iterations: Optional[int] = None
    max_error: Optional[Decimal] = None
    year: Optional[int] = None
    duration_ms: Optional[float] = None

    success: Literal[False] = False


SolverResult = Union[SolveSuccess, SolveFailure]
