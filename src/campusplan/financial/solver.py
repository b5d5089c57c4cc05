# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Circular financial solver.

Interest expense depends on debt, debt depends on cash, cash depends on net
result, and net result depends on interest. The solver resolves the loop by
fixed-point iteration:

    1. First pass with zero interest.
    2. Each later pass recomputes every year, taking interest from the
       previous pass's cash and debt for the same year.
    3. Stop when every year's net result moves by less than the convergence
       threshold, or report non-convergence at the iteration cap.

The converged projection is then checked against Assets = Liabilities +
Equity. Results are tagged (:class:`SolveSuccess` / :class:`SolveFailure`)
rather than raised, so callers can surface the failure kind directly.

Example:
    >>> solver = CircularSolver()
    >>> result = solver.solve(params)
    >>> if result.success:
    ...     cash_2052 = result.projection[-1].cash
"""

from __future__ import annotations

import logging
import time
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..core.primitives import (
    ConvergenceSettings,
    FinancialSettings,
    SolverErrorKind,
)
from ..utils.decimal import financial_precision, format_money
from .balance import check_balance_sheet
from .convergence import ConvergenceCheck, check_convergence
from .params import SolverParams
from .projection import YearProjection, calculate_projection
from .results import (
    BALANCE_SHEET_IMBALANCE,
    INVALID_PARAMS,
    NOT_CONVERGED,
    OPENING_BALANCE_MISMATCH,
    SOLVER_ERROR,
    SolveFailure,
    SolverResult,
    SolveSuccess,
)
from .settings_source import SettingsSource

logger = logging.getLogger(__name__)

SLOW_SOLVE_MS = 100.0


class CircularSolver:
    """
    Iterative solver for the interest / cash / net-result loop.

    The solver holds only configuration; every :meth:`solve` call allocates
    its own projections, so one instance can serve concurrent requests.

    Args:
        settings_source: Supplies financial settings. When omitted, or when
            loading fails, :class:`FinancialSettings` defaults are used.
        convergence: Iteration cap and thresholds.
    """

    def __init__(
        self,
        settings_source: Optional[SettingsSource] = None,
        convergence: Optional[ConvergenceSettings] = None,
    ):
        self.settings_source = settings_source
        self.convergence = convergence or ConvergenceSettings()

    def load_settings(self) -> FinancialSettings:
        """Settings from the injected source, falling back to defaults."""
        if self.settings_source is None:
            return FinancialSettings()
        try:
            return self.settings_source.load_financial_settings()
        except Exception as e:
            logger.warning(f"Could not load financial settings, using defaults: {e}")
            return FinancialSettings()

    def solve(self, params: Union[SolverParams, Mapping[str, Any]]) -> SolverResult:
        """
        Run the circular solve.

        Args:
            params: Validated :class:`SolverParams`, or a raw mapping that is
                validated here

        Returns:
            SolverResult: :class:`SolveSuccess` with the converged projection,
            or :class:`SolveFailure` describing why there is none
        """
        start = time.perf_counter()

        if not isinstance(params, SolverParams):
            try:
                params = SolverParams.model_validate(params)
            except ValidationError as e:
                logger.warning(f"Rejected solver inputs: {e.error_count()} validation error(s)")
                return SolveFailure(
                    kind=SolverErrorKind.VALIDATION,
                    code=INVALID_PARAMS,
                    message=str(e),
                    duration_ms=_elapsed_ms(start),
                )

        settings = params.resolve_settings(self.load_settings())
        context = f"[{params.version_id}] " if params.version_id else ""

        with financial_precision():
            opening_gap = params.starting_cash + params.fixed_assets_opening - params.opening_equity
        if abs(opening_gap) >= self.convergence.balance_tolerance:
            message = (
                f"Opening balance sheet does not balance: starting cash + fixed assets "
                f"- opening equity = {format_money(opening_gap)}"
            )
            logger.warning(f"{context}{message}")
            return SolveFailure(
                kind=SolverErrorKind.VALIDATION,
                code=OPENING_BALANCE_MISMATCH,
                message=message,
                duration_ms=_elapsed_ms(start),
            )

        logger.debug(
            f"{context}Solving {params.n_years} years "
            f"({params.years[0]}-{params.years[-1]}), "
            f"max {self.convergence.max_iterations} iterations"
        )

        try:
            result = self._iterate(params, settings, start, context)
        except Exception as e:
            logger.exception(f"{context}Circular solve failed")
            return SolveFailure(
                kind=SolverErrorKind.COMPUTATION,
                code=SOLVER_ERROR,
                message=f"{type(e).__name__}: {e}",
                duration_ms=_elapsed_ms(start),
            )

        if result.duration_ms is not None and result.duration_ms > SLOW_SOLVE_MS:
            logger.warning(
                f"{context}Circular solve took {result.duration_ms:.1f}ms "
                f"(target {SLOW_SOLVE_MS:.0f}ms)"
            )
        return result

    def _iterate(
        self,
        params: SolverParams,
        settings: FinancialSettings,
        start: float,
        context: str,
    ) -> SolverResult:
        previous: Optional[List[YearProjection]] = None
        current: List[YearProjection] = []
        check: Optional[ConvergenceCheck] = None

        for iteration in range(1, self.convergence.max_iterations + 1):
            current = calculate_projection(params, settings, previous)
            check = check_convergence(previous, current, self.convergence)
            logger.debug(
                f"{context}Iteration {iteration}: max error {check.max_error} "
                f"({check.error_type.value}) in {check.year_with_max_error}"
            )

            if check.converged:
                return self._finish(current, iteration, check, start, context)
            previous = current

        duration_ms = _elapsed_ms(start)
        if check.year_with_max_error is None:
            # A single pass has nothing to compare against
            detail = "no previous iteration to compare against"
        else:
            detail = f"max error {check.max_error} in {check.year_with_max_error}"
        message = (
            f"Solver did not converge within {self.convergence.max_iterations} "
            f"iterations ({detail})"
        )
        logger.warning(f"{context}{message}")
        return SolveFailure(
            kind=SolverErrorKind.NON_CONVERGENCE,
            code=NOT_CONVERGED,
            message=message,
            projection=current,
            iterations=self.convergence.max_iterations,
            max_error=check.max_error,
            year=check.year_with_max_error,
            duration_ms=duration_ms,
        )

    def _finish(
        self,
        projection: List[YearProjection],
        iterations: int,
        check: ConvergenceCheck,
        start: float,
        context: str,
    ) -> SolverResult:
        balance = check_balance_sheet(projection, self.convergence.balance_tolerance)
        duration_ms = _elapsed_ms(start)

        if not balance.balanced:
            message = (
                f"Balance sheet does not balance in {len(balance.unbalanced_years)} "
                f"year(s); largest gap {balance.max_gap} in {balance.year_with_max_gap}"
            )
            logger.error(f"{context}{message}")
            return SolveFailure(
                kind=SolverErrorKind.COMPUTATION,
                code=BALANCE_SHEET_IMBALANCE,
                message=message,
                projection=projection,
                iterations=iterations,
                max_error=check.max_error,
                year=balance.year_with_max_gap,
                duration_ms=duration_ms,
            )

        logger.info(
            f"{context}Converged in {iterations} iterations "
            f"(max error {check.max_error}, {duration_ms:.1f}ms)"
        )
        return SolveSuccess(
            projection=projection,
            iterations=iterations,
            max_error=check.max_error,
            duration_ms=duration_ms,
            convergence=check,
        )


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def solve(
    params: Union[SolverParams, Mapping[str, Any]],
    settings_source: Optional[SettingsSource] = None,
    convergence: Optional[ConvergenceSettings] = None,
) -> SolverResult:
    """
    Solve with a one-off :class:`CircularSolver`.

    Example:
        >>> result = solve(params)
        >>> result.iterations
        4
    """
    return CircularSolver(settings_source, convergence).solve(params)
