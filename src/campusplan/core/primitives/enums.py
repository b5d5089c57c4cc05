# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ErrorTypeEnum(str, Enum):
    """
    Error regime used by the convergence check for a single year.

    ABSOLUTE applies when the previous net result is near zero, where a
    relative error is undefined or unstable. RELATIVE applies everywhere else.
    """

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class ZakatMethodEnum(str, Enum):
    """
    Zakat calculation methods.

    - INCOME_BASED: max(0, net income) x rate (default, used by the solver)
    - ASSET_BASED: (cash + receivables + inventory) x rate, subject to nisab
    """

    INCOME_BASED = "INCOME_BASED"
    ASSET_BASED = "ASSET_BASED"


class SolverErrorKind(str, Enum):
    """
    Failure categories returned by the circular solver.

    Callers branch on the kind rather than on message text:
    - VALIDATION: malformed inputs, detected before any iteration
    - NON_CONVERGENCE: iteration cap reached, last projection attached
    - COMPUTATION: unexpected failure while computing a projection
    """

    VALIDATION = "validation"
    NON_CONVERGENCE = "non_convergence"
    COMPUTATION = "computation"


class StatementLineKey(str, Enum):
    """Row labels for the statement tables built from a projection."""

    # Income statement
    REVENUE = "Revenue"
    STAFF_COSTS = "Staff Costs"
    EBITDA = "EBITDA"
    DEPRECIATION = "Depreciation"
    INTEREST_EXPENSE = "Interest Expense"
    INTEREST_INCOME = "Interest Income"
    ZAKAT = "Zakat"
    NET_RESULT = "Net Result"

    # Cash flow statement
    WORKING_CAPITAL_CHANGE = "Working Capital Change"
    OPERATING_CASH_FLOW = "Operating Cash Flow"
    INVESTING_CASH_FLOW = "Investing Cash Flow"
    FINANCING_CASH_FLOW = "Financing Cash Flow"
    NET_CASH_FLOW = "Net Cash Flow"

    # Balance sheet
    CASH = "Cash"
    ACCOUNTS_RECEIVABLE = "Accounts Receivable"
    FIXED_ASSETS = "Fixed Assets"
    TOTAL_ASSETS = "Total Assets"
    ACCOUNTS_PAYABLE = "Accounts Payable"
    DEFERRED_INCOME = "Deferred Income"
    ACCRUED_EXPENSES = "Accrued Expenses"
    SHORT_TERM_DEBT = "Short-Term Debt"
    TOTAL_LIABILITIES = "Total Liabilities"
    OPENING_EQUITY = "Opening Equity"
    RETAINED_EARNINGS = "Retained Earnings"
    TOTAL_EQUITY = "Total Equity"
