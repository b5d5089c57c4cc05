# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Balance-sheet identity check: Assets = Liabilities + Equity."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

from ..utils.decimal import ZERO, DecimalLike, to_decimal
from .projection import YearProjection

DEFAULT_BALANCE_TOLERANCE = Decimal("0.01")


@dataclass(frozen=True)
class BalanceCheck:
    balanced: bool
    max_gap: Decimal
    year_with_max_gap: Optional[int]
    unbalanced_years: List[int] = field(default_factory=list)


def check_balance_sheet(
    projection: Sequence[YearProjection],
    tolerance: DecimalLike = DEFAULT_BALANCE_TOLERANCE,
) -> BalanceCheck:
    """
    Verify ``|assets - liabilities - equity| < tolerance`` for every year.

    Reports the gap, it never adjusts any balance.

    Raises:
        ValueError: If the tolerance is negative
    """
    tol = to_decimal(tolerance)
    if tol < ZERO:
        raise ValueError("Balance tolerance cannot be negative")

    max_gap = ZERO
    year_with_max_gap: Optional[int] = None
    unbalanced: List[int] = []

    for year in projection:
        gap = abs(year.balance_gap)
        if year_with_max_gap is None or gap > max_gap:
            max_gap = gap
            year_with_max_gap = year.year
        if gap >= tol:
            unbalanced.append(year.year)

    return BalanceCheck(
        balanced=not unbalanced,
        max_gap=max_gap,
        year_with_max_gap=year_with_max_gap,
        unbalanced_years=unbalanced,
    )
