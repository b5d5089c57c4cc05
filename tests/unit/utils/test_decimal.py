# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Tests for decimal helpers."""

import decimal
import threading
from decimal import Decimal

import pytest

from campusplan.utils import (
    FINANCIAL_PRECISION,
    financial_precision,
    format_money,
    round_money,
    sum_decimals,
    to_decimal,
)


class TestToDecimal:
    def test_float_goes_through_str(self):
        """0.1 converts to exactly Decimal('0.1')."""
        assert to_decimal(0.1) == Decimal("0.1")

    def test_int_and_string(self):
        assert to_decimal(5) == Decimal(5)
        assert to_decimal("1234.56") == Decimal("1234.56")

    def test_decimal_passthrough(self):
        value = Decimal("7.5")
        assert to_decimal(value) is value

    @pytest.mark.parametrize("value", ["abc", "NaN", float("inf"), None])
    def test_invalid_values_rejected(self, value):
        with pytest.raises(ValueError):
            to_decimal(value)


class TestFinancialPrecision:
    def test_twenty_significant_digits(self):
        with financial_precision():
            result = Decimal(1) / Decimal(3)
        assert result == Decimal("0.33333333333333333333")

    def test_half_up_rounding(self):
        with financial_precision() as ctx:
            assert ctx.rounding == decimal.ROUND_HALF_UP
            assert ctx.prec == FINANCIAL_PRECISION

    def test_global_context_untouched(self):
        before = decimal.getcontext().prec
        with financial_precision():
            pass
        assert decimal.getcontext().prec == before

    def test_context_is_thread_local(self):
        """A worker thread's context is not changed by another thread's block."""
        seen = []

        def worker():
            seen.append(decimal.getcontext().prec)

        with financial_precision():
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == [decimal.DefaultContext.prec]


class TestHelpers:
    def test_round_money_half_up(self):
        assert round_money(Decimal("2.345")) == Decimal("2.35")
        assert round_money(Decimal("-2.345")) == Decimal("-2.35")

    def test_format_money(self):
        assert format_money(Decimal("1234567.891")) == "1,234,567.89 SAR"
        assert format_money(Decimal("1500000"), millions=True) == "1.50M SAR"

    def test_sum_decimals(self):
        assert sum_decimals([Decimal("0.1")] * 3) == Decimal("0.3")
        assert sum_decimals([]) == Decimal(0)
