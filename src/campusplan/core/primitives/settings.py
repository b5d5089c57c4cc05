# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from .enums import ZakatMethodEnum
from .model import Model
from .types import (
    DayCount,
    DecimalBetween0And1,
    IterationCount,
    PositiveDecimal,
    ZakatRate,
)


class WorkingCapitalSettings(Model):
    """
    Day-count and factor assumptions that size working-capital balances.

    Receivables and deferred income follow revenue; payables and accruals
    follow staff costs. Balances are recomputed from each year's flows, so
    only the year-over-year change moves cash.
    """

    collection_days: DayCount = Field(
        default=0,
        description="Days of revenue outstanding as accounts receivable.",
    )
    payment_days: DayCount = Field(
        default=30,
        description="Days of staff costs outstanding as accounts payable.",
    )
    deferral_factor: DecimalBetween0And1 = Field(
        default=Decimal("0.25"),
        description="Share of annual revenue collected in advance (e.g., 0.25 for 25%).",
    )
    accrual_days: DayCount = Field(
        default=15,
        description="Days of staff costs accrued but not yet paid.",
    )


class FinancialSettings(Model):
    """
    Rates and thresholds the solver reads from the admin settings store.

    All rates are fractions, not percentages. The defaults are the values the
    planning tool ships with when an administrator has not overridden them.

    Usage Examples:
        # Shipping defaults
        settings = FinancialSettings()

        # Stricter liquidity policy with costlier debt
        settings = FinancialSettings(
            debt_interest_rate=Decimal("0.07"),
            minimum_cash_balance=Decimal("5000000"),
        )
    """

    zakat_rate: ZakatRate = Field(
        default=Decimal("0.025"),
        description="Zakat rate (2.5% standard, capped at 10%).",
    )
    debt_interest_rate: DecimalBetween0And1 = Field(
        default=Decimal("0.05"),
        description="Annual interest rate on short-term debt.",
    )
    deposit_interest_rate: DecimalBetween0And1 = Field(
        default=Decimal("0.02"),
        description="Annual interest rate earned on cash balances.",
    )
    minimum_cash_balance: PositiveDecimal = Field(
        default=Decimal("1000000"),
        description="Cash floor; shortfalls below it are funded with short-term debt.",
    )
    working_capital: WorkingCapitalSettings = Field(
        default_factory=WorkingCapitalSettings,
    )
    zakat_method: ZakatMethodEnum = Field(
        default=ZakatMethodEnum.INCOME_BASED,
        description="How zakat is assessed inside the projection.",
    )
    nisab_threshold: PositiveDecimal = Field(
        default=Decimal("21250"),
        description="Minimum zakatable wealth for the asset-based method (85g gold).",
    )


class ConvergenceSettings(Model):
    """
    Calibrated constants for the circular solver.

    The thresholds were calibrated on the proof-of-concept scenarios and are
    not derived from anything; they are exposed here so callers can tighten
    or relax them per request.
    """

    max_iterations: IterationCount = Field(
        default=10,
        description="Hard cap on solver passes before reporting non-convergence.",
    )
    convergence_threshold: PositiveDecimal = Field(
        default=Decimal("0.0001"),
        description="Per-year error below which a year counts as converged (0.01%).",
    )
    absolute_error_threshold: PositiveDecimal = Field(
        default=Decimal("0.01"),
        description=(
            "Previous net results with a magnitude below this use absolute error; "
            "everything else uses relative error."
        ),
    )
    balance_tolerance: PositiveDecimal = Field(
        default=Decimal("0.01"),
        description="Largest acceptable |assets - liabilities - equity| per year.",
    )
