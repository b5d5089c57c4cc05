# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for campusplan testing.

Helpers build solver inputs without spelling out 30-element series in every
test. All amounts are Decimals.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List

import pytest

from campusplan.core.primitives import FinancialSettings
from campusplan.financial import SolverParams, YearProjection


def flat_series(value, years: int = 30) -> List[Decimal]:
    """Same amount every year."""
    return [Decimal(str(value))] * years


def base_param_values(years: int = 30, **overrides: Any) -> Dict[str, Any]:
    """
    Raw inputs for the reference relocation scenario.

    Revenue 100M flat, EBITDA 15M (15%), capex 5M, staff costs 30M, fixed
    assets 50M depreciated at 10%, starting cash 5M, opening equity 55M.
    """
    values: Dict[str, Any] = {
        "revenue": flat_series(100_000_000, years),
        "ebitda": flat_series(15_000_000, years),
        "capex": flat_series(5_000_000, years),
        "staff_costs": flat_series(30_000_000, years),
        "fixed_assets_opening": Decimal("50000000"),
        "depreciation_rate": Decimal("0.10"),
        "starting_cash": Decimal("5000000"),
        "opening_equity": Decimal("55000000"),
    }
    values.update(overrides)
    return values


def create_test_params(years: int = 30, **overrides: Any) -> SolverParams:
    """
    Create validated solver params for the reference scenario.

    Example:
        >>> params = create_test_params(ebitda=flat_series(-2_000_000))
        >>> params.n_years
        30
    """
    return SolverParams(**base_param_values(years, **overrides))


def create_loss_params(years: int = 30, **overrides: Any) -> SolverParams:
    """Scenario with losses deep enough to force short-term borrowing."""
    values = {
        "ebitda": flat_series(-2_000_000, years),
        "capex": flat_series(3_000_000, years),
    }
    values.update(overrides)
    return create_test_params(years, **values)


@pytest.fixture
def sample_params() -> SolverParams:
    return create_test_params()


@pytest.fixture
def loss_params() -> SolverParams:
    return create_loss_params()


@pytest.fixture
def sample_settings() -> FinancialSettings:
    return FinancialSettings()


def projection_with_net_results(net_results, start_year: int = 2023):
    """
    Minimal projection whose only meaningful field is ``net_result``.

    Used to exercise the convergence check without running the solver.
    """
    zero = Decimal(0)
    fields = [
        name
        for name in YearProjection.__dataclass_fields__
        if name not in ("year", "net_result")
    ]
    return [
        YearProjection(
            year=start_year + i,
            net_result=Decimal(str(value)),
            **{name: zero for name in fields},
        )
        for i, value in enumerate(net_results)
    ]
