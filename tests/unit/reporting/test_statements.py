# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Tests for statement tables."""

from decimal import Decimal

import pandas as pd
import pytest

from campusplan.core.primitives import StatementLineKey
from campusplan.financial import solve
from campusplan.reporting import (
    BALANCE_SHEET_LINES,
    CASH_FLOW_LINES,
    INCOME_STATEMENT_LINES,
    balance_sheet,
    cash_flow_statement,
    income_statement,
    projection_to_dataframe,
)


@pytest.fixture
def solved(sample_params):
    return solve(sample_params)


class TestStatementShapes:
    def test_income_statement(self, solved):
        df = income_statement(solved)

        assert df.shape == (len(INCOME_STATEMENT_LINES), 30)
        assert list(df.columns) == list(range(2023, 2053))
        assert df.index[0] == StatementLineKey.REVENUE.value
        assert df.index[-1] == StatementLineKey.NET_RESULT.value

    def test_cash_flow_statement(self, solved):
        df = cash_flow_statement(solved)

        assert df.shape == (len(CASH_FLOW_LINES), 30)
        assert df.loc["Investing Cash Flow", 2023] == Decimal("-5000000")

    def test_balance_sheet_has_check_row(self, solved):
        df = balance_sheet(solved)

        assert df.shape == (len(BALANCE_SHEET_LINES) + 1, 30)
        assert df.index[-1] == "Balance Check"
        assert all(abs(v) < Decimal("0.01") for v in df.loc["Balance Check"])

    def test_values_match_projection(self, solved):
        df = income_statement(solved)
        final = solved.projection[-1]

        assert df.loc["Net Result", 2052] == final.net_result
        assert df.loc["Interest Income", 2052] == final.interest_income

    def test_as_float(self, solved):
        df = balance_sheet(solved, as_float=True)
        assert all(dtype == float for dtype in df.dtypes)


class TestProjectionTable:
    def test_one_row_per_year(self, solved):
        df = projection_to_dataframe(solved)

        assert len(df) == 30
        assert df.index.name == "Year"
        assert "year" not in df.columns
        assert "theoretical_cash" in df.columns

    def test_accepts_projection_list(self, solved):
        df = projection_to_dataframe(solved.projection[:3])
        assert list(df.index) == [2023, 2024, 2025]


class TestReportInputs:
    def test_failed_solve_rejected(self, sample_params):
        failure = solve(sample_params.model_copy(update={"opening_equity": Decimal(0)}))
        with pytest.raises(TypeError):
            income_statement(failure)

    def test_arbitrary_input_rejected(self):
        with pytest.raises(TypeError):
            balance_sheet(pd.DataFrame())
