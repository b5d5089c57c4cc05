# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Tests for a single projection pass."""

import dataclasses
from decimal import Decimal

import pytest

from campusplan.core.primitives import FinancialSettings, ZakatMethodEnum
from campusplan.financial import calculate_projection, enforce_minimum_cash
from campusplan.utils import financial_precision
from tests.conftest import create_test_params, flat_series

CENT = Decimal("0.01")


def _close(a: Decimal, b: Decimal, tol: Decimal = CENT) -> bool:
    return abs(a - b) < tol


class TestFirstPass:
    """First pass: zero interest, everything else fully computed."""

    @pytest.fixture
    def projection(self, sample_params, sample_settings):
        return calculate_projection(sample_params, sample_settings)

    def test_one_entry_per_year(self, projection):
        assert len(projection) == 30
        assert [y.year for y in projection] == list(range(2023, 2053))

    def test_no_interest(self, projection):
        assert all(y.interest_expense == 0 for y in projection)
        assert all(y.interest_income == 0 for y in projection)

    def test_year_one_income_statement(self, projection):
        year = projection[0]

        assert year.depreciation == Decimal("5000000")
        assert year.fixed_assets == Decimal("50000000")
        assert year.zakat == Decimal("250000")
        assert year.net_result == Decimal("9750000")

    def test_year_one_working_capital(self, projection):
        """Opening balances are zero, so year one carries the full build-up."""
        year = projection[0]

        assert year.accounts_receivable == 0
        assert _close(year.accounts_payable, Decimal("2465753.42"))
        assert year.deferred_income == Decimal("25000000")
        assert _close(year.accrued_expenses, Decimal("1232876.71"))
        assert _close(year.working_capital_change, Decimal("-28698630.14"))

    def test_year_one_cash_flow(self, projection):
        year = projection[0]

        assert _close(year.operating_cash_flow, Decimal("43448630.14"))
        assert year.investing_cash_flow == Decimal("-5000000")
        assert year.financing_cash_flow == 0
        assert _close(year.cash, Decimal("43448630.14"))
        assert year.theoretical_cash == year.cash
        assert year.short_term_debt == 0

    def test_flat_working_capital_after_year_one(self, projection):
        assert all(y.working_capital_change == 0 for y in projection[1:])

    def test_cash_rolls_forward(self, projection):
        for prior, year in zip(projection, projection[1:]):
            assert _close(year.cash, prior.cash + year.net_cash_flow)

    def test_equity_accumulates_net_result(self, projection):
        running = Decimal(0)
        with financial_precision():
            for year in projection:
                running += year.net_result
                assert year.retained_earnings == running
                assert year.total_equity == Decimal("55000000") + running

    def test_totals_are_direct_sums(self, projection):
        """Totals equal the sum of their lines under the same decimal context."""
        with financial_precision():
            for year in projection:
                assets = year.cash + year.accounts_receivable + year.fixed_assets
                liabilities = (
                    year.accounts_payable
                    + year.deferred_income
                    + year.accrued_expenses
                    + year.short_term_debt
                )
                assert year.total_assets == assets
                assert year.total_liabilities == liabilities

    def test_balanced_every_year(self, projection):
        assert all(abs(y.balance_gap) < CENT for y in projection)


class TestLaterPasses:
    def test_interest_income_from_previous_cash(self, sample_params, sample_settings):
        """Year one earns deposit interest on the average of opening and estimated closing cash."""
        first = calculate_projection(sample_params, sample_settings)
        second = calculate_projection(sample_params, sample_settings, first)

        expected = (Decimal("5000000") + first[0].cash) / 2 * Decimal("0.02")
        assert _close(second[0].interest_income, expected)
        assert second[0].interest_expense == 0
        assert second[0].net_result > first[0].net_result

    def test_previous_pass_untouched(self, sample_params, sample_settings):
        first = calculate_projection(sample_params, sample_settings)
        snapshot = [dataclasses.asdict(y) for y in first]

        calculate_projection(sample_params, sample_settings, first)

        assert [dataclasses.asdict(y) for y in first] == snapshot

    def test_previous_length_mismatch(self, sample_params, sample_settings):
        first = calculate_projection(sample_params, sample_settings)
        with pytest.raises(ValueError, match="expected 30"):
            calculate_projection(sample_params, sample_settings, first[:10])

    def test_interest_expense_on_debt(self, loss_params, sample_settings):
        first = calculate_projection(loss_params, sample_settings)
        second = calculate_projection(loss_params, sample_settings, first)

        assert first[-1].short_term_debt > 0
        assert second[-1].interest_expense > 0


class TestMinimumCash:
    def test_shortfall_funded_with_debt(self, loss_params, sample_settings):
        projection = calculate_projection(loss_params, sample_settings)
        borrowing = [y for y in projection if y.short_term_debt > 0]

        assert borrowing
        for year in borrowing:
            assert year.cash == Decimal("1000000")
            assert year.theoretical_cash < year.cash

    def test_cash_never_below_floor(self, loss_params, sample_settings):
        projection = calculate_projection(loss_params, sample_settings)
        assert all(y.cash >= Decimal("1000000") for y in projection)

    def test_financing_is_debt_change(self, loss_params, sample_settings):
        projection = calculate_projection(loss_params, sample_settings)
        previous_debt = Decimal(0)
        with financial_precision():
            for year in projection:
                assert year.financing_cash_flow == year.short_term_debt - previous_debt
                assert year.net_cash_flow == (
                    year.operating_cash_flow
                    + year.investing_cash_flow
                    + year.financing_cash_flow
                )
                previous_debt = year.short_term_debt

    def test_losses_carry_no_zakat(self, loss_params, sample_settings):
        projection = calculate_projection(loss_params, sample_settings)
        assert all(y.zakat == 0 for y in projection)


class TestEnforceMinimumCash:
    def test_draws_shortfall(self):
        cash, debt = enforce_minimum_cash(Decimal("400000"), Decimal(0), Decimal("1000000"))
        assert cash == Decimal("1000000")
        assert debt == Decimal("600000")

    def test_draw_adds_to_existing_debt(self):
        cash, debt = enforce_minimum_cash(Decimal("-500000"), Decimal("200000"), Decimal("1000000"))
        assert cash == Decimal("1000000")
        assert debt == Decimal("1700000")

    def test_full_repayment(self):
        cash, debt = enforce_minimum_cash(Decimal("3000000"), Decimal("500000"), Decimal("1000000"))
        assert cash == Decimal("2500000")
        assert debt == 0

    def test_partial_repayment_keeps_floor(self):
        cash, debt = enforce_minimum_cash(Decimal("1200000"), Decimal("500000"), Decimal("1000000"))
        assert cash == Decimal("1000000")
        assert debt == Decimal("300000")

    def test_no_debt_no_change(self):
        cash, debt = enforce_minimum_cash(Decimal("5000000"), Decimal(0), Decimal("1000000"))
        assert cash == Decimal("5000000")
        assert debt == 0


class TestZakatMethods:
    def test_asset_based_uses_cash_and_receivables(self, sample_params):
        settings = FinancialSettings(zakat_method=ZakatMethodEnum.ASSET_BASED)

        projection = calculate_projection(sample_params, settings)

        # First pass estimates closing cash with the opening balance; AR is zero
        assert projection[0].zakat == Decimal("125000")

    def test_zero_income_no_zakat(self, sample_settings):
        # EBITDA exactly offsets depreciation
        params = create_test_params(
            years=1, ebitda=flat_series(5_000_000, 1), capex=flat_series(0, 1)
        )
        projection = calculate_projection(params, sample_settings)
        assert projection[0].zakat == 0
        assert projection[0].net_result == 0
