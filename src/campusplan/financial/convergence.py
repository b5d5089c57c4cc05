# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Convergence test between two solver iterations.

Compares ``net_result`` year by year. Small previous values use absolute
error (relative error blows up near zero); everything else uses relative
error. Every year must be under the threshold for the projection to count
as converged.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from ..core.primitives import ConvergenceSettings, ErrorTypeEnum
from ..utils.decimal import financial_precision
from .projection import YearProjection

_NOT_CONVERGED_ERROR = Decimal("Infinity")


@dataclass(frozen=True)
class ConvergenceCheck:
    """
    Outcome of comparing two iterations.

    Attributes:
        converged: True only if every year is under the threshold
        max_error: Largest per-year error (``Infinity`` with no previous pass)
        year_with_max_error: Year of the largest error, None with no previous pass
        error_type: Regime used for the max-error year
    """

    converged: bool
    max_error: Decimal
    year_with_max_error: Optional[int]
    error_type: ErrorTypeEnum


def check_convergence(
    previous: Optional[Sequence[YearProjection]],
    current: Sequence[YearProjection],
    settings: Optional[ConvergenceSettings] = None,
) -> ConvergenceCheck:
    """
    Check whether ``current`` has converged against ``previous``.

    Args:
        previous: Projection from the previous iteration, or None
        current: Projection from this iteration
        settings: Thresholds; defaults to :class:`ConvergenceSettings`

    Returns:
        ConvergenceCheck

    Raises:
        ValueError: If both projections are given with different lengths

    Example:
        >>> check_convergence(None, current).converged
        False
    """
    if previous is None:
        return ConvergenceCheck(
            converged=False,
            max_error=_NOT_CONVERGED_ERROR,
            year_with_max_error=None,
            error_type=ErrorTypeEnum.ABSOLUTE,
        )

    if len(previous) != len(current):
        raise ValueError(
            f"Projection lengths differ: previous={len(previous)}, current={len(current)}"
        )

    settings = settings or ConvergenceSettings()

    all_converged = True
    max_error = Decimal(-1)
    year_with_max_error: Optional[int] = None
    max_error_type = ErrorTypeEnum.ABSOLUTE

    with financial_precision():
        for prev_year, cur_year in zip(previous, current):
            prev_value = prev_year.net_result
            cur_value = cur_year.net_result

            if abs(prev_value) < settings.absolute_error_threshold:
                error = abs(cur_value - prev_value)
                error_type = ErrorTypeEnum.ABSOLUTE
            else:
                error = abs(cur_value - prev_value) / abs(prev_value)
                error_type = ErrorTypeEnum.RELATIVE

            if error > max_error:
                max_error = error
                year_with_max_error = cur_year.year
                max_error_type = error_type

            if error >= settings.convergence_threshold:
                all_converged = False

    if year_with_max_error is None:
        # Empty projections: nothing left to disagree on
        max_error = Decimal(0)

    return ConvergenceCheck(
        converged=all_converged,
        max_error=max_error,
        year_with_max_error=year_with_max_error,
        error_type=max_error_type,
    )
