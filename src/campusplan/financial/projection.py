# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Single projection pass: P&L, cash flow and balance sheet, year by year.

One pass walks the projection years in order. Year ``i`` reads only the
closing state of year ``i - 1`` from the same pass, plus the previous solver
iteration's cash and debt for year ``i`` (the substitution that breaks the
interest -> debt -> cash -> net result loop). Every pass builds a new list;
nothing from an earlier pass is modified.

Execution order per year:
    1. Depreciation and fixed assets (from opening fixed assets)
    2. Working capital balances and change
    3. Interest expense and income (previous-iteration balances)
    4. Zakat and net result
    5. Operating and investing cash flow, theoretical cash
    6. Minimum cash enforcement (short-term debt draw or repayment)
    7. Balance sheet totals by direct summation
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.primitives import FinancialSettings, ZakatMethodEnum
from ..utils.decimal import ZERO, financial_precision
from .params import SolverParams
from .working_capital import OPENING_WORKING_CAPITAL, calculate_working_capital
from .zakat import calculate_asset_based_zakat, calculate_income_based_zakat

_TWO = Decimal(2)


@dataclass(frozen=True)
class YearProjection:
    """
    Complete financial position for one projection year.

    Instances are produced by :func:`calculate_projection` and are never
    modified afterwards. Downstream consumers should treat every field as
    already reconciled.
    """

    year: int

    # P&L
    revenue: Decimal
    staff_costs: Decimal
    ebitda: Decimal
    capex: Decimal
    depreciation: Decimal
    interest_expense: Decimal
    interest_income: Decimal
    zakat: Decimal
    net_result: Decimal

    # Cash flow
    working_capital_change: Decimal
    operating_cash_flow: Decimal
    investing_cash_flow: Decimal
    financing_cash_flow: Decimal
    net_cash_flow: Decimal

    # Balance sheet - assets
    cash: Decimal
    accounts_receivable: Decimal
    fixed_assets: Decimal
    total_assets: Decimal

    # Balance sheet - liabilities
    accounts_payable: Decimal
    deferred_income: Decimal
    accrued_expenses: Decimal
    short_term_debt: Decimal
    total_liabilities: Decimal

    # Balance sheet - equity
    opening_equity: Decimal
    retained_earnings: Decimal
    total_equity: Decimal

    # Cash before minimum-balance enforcement
    theoretical_cash: Decimal

    @property
    def balance_gap(self) -> Decimal:
        """Assets - liabilities - equity; zero for a balanced year."""
        return self.total_assets - self.total_liabilities - self.total_equity

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


def _estimate_closing_balances(
    previous: Sequence[YearProjection],
    index: int,
    opening_cash: Decimal,
    opening_debt: Decimal,
    params: SolverParams,
    settings: FinancialSettings,
) -> Tuple[Decimal, Decimal]:
    """
    Estimate this year's closing cash and debt from the previous iteration.

    The estimate is this pass's opening balance moved by the previous
    iteration's in-year movement, so corrections already made to earlier years
    carry forward instead of waiting another iteration.
    """
    prior = previous[index]
    if index == 0:
        prior_opening_cash = params.starting_cash
        prior_opening_debt = ZERO
    else:
        prior_opening_cash = previous[index - 1].cash
        prior_opening_debt = previous[index - 1].short_term_debt

    est_cash = opening_cash + (prior.cash - prior_opening_cash)
    est_debt = opening_debt + (prior.short_term_debt - prior_opening_debt)
    return max(est_cash, settings.minimum_cash_balance), max(est_debt, ZERO)


def _zakat_for_year(
    settings: FinancialSettings,
    net_before_zakat: Decimal,
    est_closing_cash: Decimal,
    accounts_receivable: Decimal,
) -> Decimal:
    if settings.zakat_method == ZakatMethodEnum.ASSET_BASED:
        return calculate_asset_based_zakat(
            cash=max(est_closing_cash, ZERO),
            accounts_receivable=accounts_receivable,
            zakat_rate=settings.zakat_rate,
            nisab_threshold=settings.nisab_threshold,
        )
    return calculate_income_based_zakat(net_before_zakat, settings.zakat_rate)


def enforce_minimum_cash(
    theoretical_cash: Decimal, opening_debt: Decimal, minimum_cash: Decimal
) -> Tuple[Decimal, Decimal]:
    """
    Apply the minimum cash policy.

    - Below the floor: draw short-term debt for the shortfall, cash = floor
    - Above the floor with debt outstanding: repay up to the surplus
    - Otherwise: keep cash and debt as they are

    Returns:
        (closing_cash, closing_debt)
    """
    if theoretical_cash < minimum_cash:
        return minimum_cash, opening_debt + (minimum_cash - theoretical_cash)
    if opening_debt > ZERO:
        repayment = min(opening_debt, theoretical_cash - minimum_cash)
        return theoretical_cash - repayment, opening_debt - repayment
    return theoretical_cash, opening_debt


def calculate_projection(
    params: SolverParams,
    settings: FinancialSettings,
    previous: Optional[Sequence[YearProjection]] = None,
) -> List[YearProjection]:
    """
    Compute one full projection pass.

    Args:
        params: Validated solver inputs
        settings: Resolved rates, thresholds and working-capital assumptions
        previous: Projection from the previous iteration, or None for the
            first pass (which assumes zero interest)

    Returns:
        List[YearProjection]: One entry per year, in year order

    Raises:
        ValueError: If ``previous`` does not cover the same years
    """
    if previous is not None and len(previous) != params.n_years:
        raise ValueError(
            f"Previous iteration has {len(previous)} years, expected {params.n_years}"
        )

    wc_settings = settings.working_capital
    projection: List[YearProjection] = []

    with financial_precision():
        opening_cash = params.starting_cash
        opening_debt = ZERO
        opening_fixed_assets = params.fixed_assets_opening
        opening_wc = OPENING_WORKING_CAPITAL
        retained_earnings = ZERO

        for i, year in enumerate(params.years):
            revenue = params.revenue[i]
            ebitda = params.ebitda[i]
            capex = params.capex[i]
            staff_costs = params.staff_costs[i]

            depreciation = opening_fixed_assets * params.depreciation_rate
            fixed_assets = opening_fixed_assets + capex - depreciation

            wc = calculate_working_capital(revenue, staff_costs, wc_settings)
            wc_change = wc.change_from(opening_wc)

            if previous is None:
                interest_expense = ZERO
                interest_income = ZERO
                est_closing_cash = opening_cash
            else:
                est_closing_cash, est_closing_debt = _estimate_closing_balances(
                    previous, i, opening_cash, opening_debt, params, settings
                )
                interest_expense = (
                    (opening_debt + est_closing_debt) / _TWO * settings.debt_interest_rate
                )
                interest_income = (
                    (opening_cash + est_closing_cash)
                    / _TWO
                    * settings.deposit_interest_rate
                )

            # Expenses subtracted, income added
            net_before_zakat = ebitda - depreciation - interest_expense + interest_income
            zakat = _zakat_for_year(
                settings, net_before_zakat, est_closing_cash, wc.accounts_receivable
            )
            net_result = net_before_zakat - zakat

            operating_cash_flow = net_result + depreciation - wc_change
            investing_cash_flow = -capex
            theoretical_cash = opening_cash + operating_cash_flow + investing_cash_flow

            cash, short_term_debt = enforce_minimum_cash(
                theoretical_cash, opening_debt, settings.minimum_cash_balance
            )
            financing_cash_flow = short_term_debt - opening_debt
            net_cash_flow = operating_cash_flow + investing_cash_flow + financing_cash_flow

            total_assets = cash + wc.accounts_receivable + fixed_assets
            total_liabilities = (
                wc.accounts_payable
                + wc.deferred_income
                + wc.accrued_expenses
                + short_term_debt
            )
            retained_earnings += net_result
            total_equity = params.opening_equity + retained_earnings

            projection.append(
                YearProjection(
                    year=year,
                    revenue=revenue,
                    staff_costs=staff_costs,
                    ebitda=ebitda,
                    capex=capex,
                    depreciation=depreciation,
                    interest_expense=interest_expense,
                    interest_income=interest_income,
                    zakat=zakat,
                    net_result=net_result,
                    working_capital_change=wc_change,
                    operating_cash_flow=operating_cash_flow,
                    investing_cash_flow=investing_cash_flow,
                    financing_cash_flow=financing_cash_flow,
                    net_cash_flow=net_cash_flow,
                    cash=cash,
                    accounts_receivable=wc.accounts_receivable,
                    fixed_assets=fixed_assets,
                    total_assets=total_assets,
                    accounts_payable=wc.accounts_payable,
                    deferred_income=wc.deferred_income,
                    accrued_expenses=wc.accrued_expenses,
                    short_term_debt=short_term_debt,
                    total_liabilities=total_liabilities,
                    opening_equity=params.opening_equity,
                    retained_earnings=retained_earnings,
                    total_equity=total_equity,
                    theoretical_cash=theoretical_cash,
                )
            )

            opening_cash = cash
            opening_debt = short_term_debt
            opening_fixed_assets = fixed_assets
            opening_wc = wc

    return projection
