# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Solver input parameters."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import model_validator

from ..core.primitives import (
    DecimalBetween0And1,
    FinancialSettings,
    FiniteDecimal,
    Model,
    PositiveDecimal,
    ProjectionYear,
    WorkingCapitalSettings,
    ZakatRate,
)

DEFAULT_START_YEAR = 2023
DEFAULT_PROJECTION_YEARS = 30  # 2023-2052


class SolverParams(Model):
    """
    Inputs for one circular solve.

    The per-year series come from the projection assembler (revenue and EBITDA
    from curriculum and rent models, capex from the capex plan, staff costs from
    the staffing plan). They must be equal length and cover a contiguous range
    of years starting at ``start_year``.

    Rate and threshold fields are optional overrides. Anything left as None is
    taken from the settings source the solver was built with, and failing that
    from :class:`FinancialSettings` defaults.

    Attributes:
        revenue: Revenue per year
        ebitda: EBITDA per year (may be negative)
        capex: Capital expenditure per year
        staff_costs: Staff costs per year (drive payables and accruals)
        start_year: Calendar year of the first entry
        fixed_assets_opening: Net book value of fixed assets at period start
        depreciation_rate: Annual rate applied to the opening fixed-asset balance
        starting_cash: Cash at the end of year 0
        opening_equity: Equity at the end of year 0
        version_id: Scenario version identifier, used for log context only

    Example:
        >>> params = SolverParams(
        ...     revenue=[Decimal("100000000")] * 30,
        ...     ebitda=[Decimal("15000000")] * 30,
        ...     capex=[Decimal("5000000")] * 30,
        ...     staff_costs=[Decimal("30000000")] * 30,
        ...     fixed_assets_opening=Decimal("50000000"),
        ...     starting_cash=Decimal("5000000"),
        ...     opening_equity=Decimal("55000000"),
        ... )
        >>> params.years[0], params.years[-1]
        (2023, 2052)
    """

    revenue: List[PositiveDecimal]
    ebitda: List[FiniteDecimal]
    capex: List[PositiveDecimal]
    staff_costs: List[PositiveDecimal]

    start_year: ProjectionYear = DEFAULT_START_YEAR
    fixed_assets_opening: PositiveDecimal
    depreciation_rate: DecimalBetween0And1 = Decimal("0.10")
    starting_cash: FiniteDecimal
    opening_equity: FiniteDecimal

    # Overrides for values normally sourced from admin settings
    zakat_rate: Optional[ZakatRate] = None
    debt_interest_rate: Optional[DecimalBetween0And1] = None
    deposit_interest_rate: Optional[DecimalBetween0And1] = None
    minimum_cash_balance: Optional[PositiveDecimal] = None
    working_capital: Optional[WorkingCapitalSettings] = None

    version_id: Optional[str] = None

    @model_validator(mode="after")
    def check_series_shape(self) -> "SolverParams":
        """Ensure all per-year series are non-empty and equal length."""
        lengths: Dict[str, int] = {
            "revenue": len(self.revenue),
            "ebitda": len(self.ebitda),
            "capex": len(self.capex),
            "staff_costs": len(self.staff_costs),
        }
        if lengths["revenue"] == 0:
            raise ValueError("Per-year series must contain at least one year")
        mismatched = {
            name: n for name, n in lengths.items() if n != lengths["revenue"]
        }
        if mismatched:
            detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
            raise ValueError(
                f"Per-year series must have equal length (got {detail})"
            )
        if self.start_year + lengths["revenue"] - 1 > 2200:
            raise ValueError("Projection extends beyond year 2200")
        return self

    @property
    def n_years(self) -> int:
        return len(self.revenue)

    @property
    def years(self) -> List[int]:
        """Calendar years covered by the projection."""
        return [self.start_year + i for i in range(self.n_years)]

    def resolve_settings(self, base: FinancialSettings) -> FinancialSettings:
        """
        Apply this solve's explicit overrides on top of ``base``.

        Returns:
            FinancialSettings: ``base`` unchanged if no override is set.
        """
        overrides = {
            name: value
            for name, value in (
                ("zakat_rate", self.zakat_rate),
                ("debt_interest_rate", self.debt_interest_rate),
                ("deposit_interest_rate", self.deposit_interest_rate),
                ("minimum_cash_balance", self.minimum_cash_balance),
                ("working_capital", self.working_capital),
            )
            if value is not None
        }
        if not overrides:
            return base
        return base.copy_with(**overrides)
