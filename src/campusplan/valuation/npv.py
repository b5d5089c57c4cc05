# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Net present value of per-year amounts.

    NPV = sum(amount[t] / (1 + rate) ** (t - base_year))

With the default base year (one before the first discounted year) the first
year is discounted by one full period: for a 2028-2052 window the base year
is 2027 and 2028 is period 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Mapping, Optional, Sequence, Union

import pandas as pd

from ..financial.projection import YearProjection
from ..utils.decimal import (
    ONE,
    ZERO,
    DecimalLike,
    financial_precision,
    sum_decimals,
    to_decimal,
)

logger = logging.getLogger(__name__)

AmountsByYear = Union[Mapping[int, DecimalLike], pd.Series]


@dataclass(frozen=True)
class PresentValue:
    year: int
    amount: Decimal
    discount_factor: Decimal
    present_value: Decimal


@dataclass(frozen=True)
class NPVResult:
    """
    Discounting breakdown.

    Attributes:
        npv: Sum of present values
        present_values: Per-year breakdown, in year order
        discount_rate: Rate used
    """

    npv: Decimal
    discount_rate: Decimal
    present_values: List[PresentValue]

    @property
    def total_years(self) -> int:
        return len(self.present_values)

    def to_dataframe(self) -> pd.DataFrame:
        """Per-year breakdown indexed by year."""
        df = pd.DataFrame(
            [
                {
                    "Amount": pv.amount,
                    "Discount Factor": pv.discount_factor,
                    "Present Value": pv.present_value,
                }
                for pv in self.present_values
            ],
            index=pd.Index([pv.year for pv in self.present_values], name="Year"),
        )
        return df


def _validated_rate(discount_rate: DecimalLike) -> Decimal:
    rate = to_decimal(discount_rate)
    if rate < ZERO or rate > ONE:
        raise ValueError("Discount rate must be between 0 and 1 (0% to 100%)")
    return rate


def calculate_npv(
    amounts_by_year: AmountsByYear,
    discount_rate: DecimalLike,
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
    base_year: Optional[int] = None,
) -> NPVResult:
    """
    Discount per-year amounts back to ``base_year``.

    Years inside ``[start_year, end_year]`` with no amount are skipped.

    Args:
        amounts_by_year: Mapping (or Series indexed by year) of year -> amount
        discount_rate: Rate as a fraction in [0, 1]
        start_year: First year to include (default: earliest year given)
        end_year: Last year to include (default: latest year given)
        base_year: Year with discount factor 1 (default: ``start_year - 1``)

    Returns:
        NPVResult

    Raises:
        ValueError: For an empty input, a bad rate, ``start_year > end_year``,
            ``start_year < base_year`` or a window containing no data

    Example:
        >>> result = calculate_npv({2028: 5_000_000, 2029: 6_000_000}, 0.08)
        >>> round(result.npv)
        9773663
    """
    amounts = {int(year): to_decimal(amount) for year, amount in amounts_by_year.items()}
    if not amounts:
        raise ValueError("At least one year of data is required")

    rate = _validated_rate(discount_rate)
    start = min(amounts) if start_year is None else start_year
    end = max(amounts) if end_year is None else end_year
    base = start - 1 if base_year is None else base_year

    if start > end:
        raise ValueError("Start year must be <= end year")
    if start < base:
        raise ValueError("Start year must be >= base year")

    present_values: List[PresentValue] = []
    with financial_precision():
        for year in range(start, end + 1):
            amount = amounts.get(year)
            if amount is None:
                continue
            factor = (ONE + rate) ** (year - base)
            pv = amount / factor
            present_values.append(PresentValue(year, amount, factor, pv))
        npv = sum_decimals(pv.present_value for pv in present_values)

    if not present_values:
        raise ValueError(f"No data found for years {start}-{end}")

    logger.debug(
        f"NPV over {len(present_values)} years at {rate:.2%} (base {base}): {npv:,.2f}"
    )
    return NPVResult(npv=npv, discount_rate=rate, present_values=present_values)


def projection_npv(
    projection: Sequence[YearProjection],
    discount_rate: DecimalLike,
    field: str = "net_cash_flow",
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
    base_year: Optional[int] = None,
) -> NPVResult:
    """
    NPV of one :class:`YearProjection` field across a projection.

    Example:
        >>> projection_npv(result.projection, "0.08", start_year=2028).npv
    """
    if field not in YearProjection.__dataclass_fields__ or field == "year":
        raise ValueError(f"Unknown projection field: {field!r}")
    amounts = {year.year: getattr(year, field) for year in projection}
    return calculate_npv(
        amounts,
        discount_rate,
        start_year=start_year,
        end_year=end_year,
        base_year=base_year,
    )
