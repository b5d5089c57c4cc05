# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Working-capital balances sized from revenue and staff costs."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..core.primitives import WorkingCapitalSettings
from ..utils.decimal import DAYS_PER_YEAR, ZERO


@dataclass(frozen=True)
class WorkingCapitalBalances:
    """
    Closing working-capital balances for one year.

    Attributes:
        accounts_receivable: Revenue not yet collected (asset)
        accounts_payable: Staff costs not yet paid (liability)
        deferred_income: Revenue collected in advance (liability)
        accrued_expenses: Staff costs incurred but not invoiced (liability)
    """

    accounts_receivable: Decimal = ZERO
    accounts_payable: Decimal = ZERO
    deferred_income: Decimal = ZERO
    accrued_expenses: Decimal = ZERO

    def change_from(self, opening: "WorkingCapitalBalances") -> Decimal:
        """
        Cash absorbed by working capital since ``opening``.

        Positive means working capital consumed cash: a receivable increase
        uses cash, increases in payables, deferred income and accruals provide
        it.
        """
        return (
            (self.accounts_receivable - opening.accounts_receivable)
            - (self.accounts_payable - opening.accounts_payable)
            - (self.deferred_income - opening.deferred_income)
            - (self.accrued_expenses - opening.accrued_expenses)
        )


OPENING_WORKING_CAPITAL = WorkingCapitalBalances()


def calculate_working_capital(
    revenue: Decimal, staff_costs: Decimal, settings: WorkingCapitalSettings
) -> WorkingCapitalBalances:
    """
    Size working-capital balances for one year.

    - AR = revenue / 365 x collection days
    - AP = staff costs / 365 x payment days
    - Deferred income = revenue x deferral factor
    - Accrued expenses = staff costs x accrual days / 365

    Must be called inside the financial decimal context.
    """
    revenue_per_day = revenue / DAYS_PER_YEAR
    staff_costs_per_day = staff_costs / DAYS_PER_YEAR
    return WorkingCapitalBalances(
        accounts_receivable=revenue_per_day * settings.collection_days,
        accounts_payable=staff_costs_per_day * settings.payment_days,
        deferred_income=revenue * settings.deferral_factor,
        accrued_expenses=staff_costs_per_day * settings.accrual_days,
    )
