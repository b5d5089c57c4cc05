# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Tests for settings sources."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from campusplan.core.primitives import FinancialSettings, ZakatMethodEnum
from campusplan.financial import (
    MappingSettingsSource,
    SettingsSource,
    StaticSettingsSource,
)


class TestStaticSettingsSource:
    def test_defaults_when_empty(self):
        assert StaticSettingsSource().load_financial_settings() == FinancialSettings()

    def test_returns_given_settings(self):
        settings = FinancialSettings(minimum_cash_balance=Decimal("2500000"))
        assert StaticSettingsSource(settings).load_financial_settings() is settings

    def test_satisfies_protocol(self):
        assert isinstance(StaticSettingsSource(), SettingsSource)


class TestMappingSettingsSource:
    def test_stored_values_override_defaults(self):
        source = MappingSettingsSource(
            {
                "debt_interest_rate": "0.06",
                "zakat_method": "ASSET_BASED",
                "working_capital": {"payment_days": 45},
            }
        )

        settings = source.load_financial_settings()

        assert settings.debt_interest_rate == Decimal("0.06")
        assert settings.zakat_method == ZakatMethodEnum.ASSET_BASED
        assert settings.working_capital.payment_days == 45
        assert settings.working_capital.accrual_days == 15
        assert settings.deposit_interest_rate == Decimal("0.02")

    def test_bad_value_raises_on_load(self):
        source = MappingSettingsSource({"zakat_rate": "0.5"})
        with pytest.raises(ValidationError):
            source.load_financial_settings()

    def test_source_copy_is_isolated(self):
        values = {"debt_interest_rate": "0.06"}
        source = MappingSettingsSource(values)
        values["debt_interest_rate"] = "0.09"

        assert source.load_financial_settings().debt_interest_rate == Decimal("0.06")
