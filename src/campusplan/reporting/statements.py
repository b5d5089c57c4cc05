# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Statement tables built from a solved projection.

Every statement is a DataFrame where rows are line items and columns are
projection years. Values stay as :class:`~decimal.Decimal`; pass
``as_float=True`` for plotting or numeric pandas operations.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple, Union

import pandas as pd

from ..core.primitives import StatementLineKey
from ..financial.projection import YearProjection
from ..financial.results import SolveSuccess
from .base import BaseReport

ReportSource = Union[SolveSuccess, Sequence[YearProjection]]

# (row label, YearProjection attribute)
LineSpec = Tuple[StatementLineKey, str]

INCOME_STATEMENT_LINES: List[LineSpec] = [
    (StatementLineKey.REVENUE, "revenue"),
    (StatementLineKey.STAFF_COSTS, "staff_costs"),
    (StatementLineKey.EBITDA, "ebitda"),
    (StatementLineKey.DEPRECIATION, "depreciation"),
    (StatementLineKey.INTEREST_EXPENSE, "interest_expense"),
    (StatementLineKey.INTEREST_INCOME, "interest_income"),
    (StatementLineKey.ZAKAT, "zakat"),
    (StatementLineKey.NET_RESULT, "net_result"),
]

CASH_FLOW_LINES: List[LineSpec] = [
    (StatementLineKey.NET_RESULT, "net_result"),
    (StatementLineKey.DEPRECIATION, "depreciation"),
    (StatementLineKey.WORKING_CAPITAL_CHANGE, "working_capital_change"),
    (StatementLineKey.OPERATING_CASH_FLOW, "operating_cash_flow"),
    (StatementLineKey.INVESTING_CASH_FLOW, "investing_cash_flow"),
    (StatementLineKey.FINANCING_CASH_FLOW, "financing_cash_flow"),
    (StatementLineKey.NET_CASH_FLOW, "net_cash_flow"),
]

BALANCE_SHEET_LINES: List[LineSpec] = [
    (StatementLineKey.CASH, "cash"),
    (StatementLineKey.ACCOUNTS_RECEIVABLE, "accounts_receivable"),
    (StatementLineKey.FIXED_ASSETS, "fixed_assets"),
    (StatementLineKey.TOTAL_ASSETS, "total_assets"),
    (StatementLineKey.ACCOUNTS_PAYABLE, "accounts_payable"),
    (StatementLineKey.DEFERRED_INCOME, "deferred_income"),
    (StatementLineKey.ACCRUED_EXPENSES, "accrued_expenses"),
    (StatementLineKey.SHORT_TERM_DEBT, "short_term_debt"),
    (StatementLineKey.TOTAL_LIABILITIES, "total_liabilities"),
    (StatementLineKey.OPENING_EQUITY, "opening_equity"),
    (StatementLineKey.RETAINED_EARNINGS, "retained_earnings"),
    (StatementLineKey.TOTAL_EQUITY, "total_equity"),
]


class StatementReport(BaseReport):
    """
    One statement as a line-item x year table.

    Example:
        ```python
        report = StatementReport(result, BALANCE_SHEET_LINES)
        df = report.generate()
        df.loc["Total Assets", 2052]
        ```
    """

    def __init__(self, source: ReportSource, lines: Sequence[LineSpec]):
        super().__init__(source)
        self._lines = list(lines)

    def generate(self, as_float: bool = False) -> pd.DataFrame:
        data: Dict[str, list] = {
            key.value: [getattr(year, attr) for year in self._projection]
            for key, attr in self._lines
        }
        df = pd.DataFrame(data, index=pd.Index(self.years, name="Year"), dtype=object)
        if as_float:
            df = df.astype(float)
        # Transpose so that rows are line items, columns are periods
        return df.T


class ProjectionTableReport(BaseReport):
    """Flat table with one row per year and one column per YearProjection field."""

    def generate(self, as_float: bool = False) -> pd.DataFrame:
        rows = [year.to_dict() for year in self._projection]
        df = pd.DataFrame(rows, columns=list(YearProjection.__dataclass_fields__))
        df = df.set_index("year")
        df.index.name = "Year"
        if as_float:
            df = df.astype(float)
        return df


def projection_to_dataframe(source: ReportSource, as_float: bool = False) -> pd.DataFrame:
    return ProjectionTableReport(source).generate(as_float=as_float)


def income_statement(source: ReportSource, as_float: bool = False) -> pd.DataFrame:
    return StatementReport(source, INCOME_STATEMENT_LINES).generate(as_float=as_float)


def cash_flow_statement(source: ReportSource, as_float: bool = False) -> pd.DataFrame:
    return StatementReport(source, CASH_FLOW_LINES).generate(as_float=as_float)


def balance_sheet(source: ReportSource, as_float: bool = False) -> pd.DataFrame:
    """Balance sheet with a trailing ``Balance Check`` row (assets - liabilities - equity)."""
    df = StatementReport(source, BALANCE_SHEET_LINES).generate(as_float=as_float)
    df.loc["Balance Check"] = (
        df.loc[StatementLineKey.TOTAL_ASSETS.value]
        - df.loc[StatementLineKey.TOTAL_LIABILITIES.value]
        - df.loc[StatementLineKey.TOTAL_EQUITY.value]
    )
    return df
