# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculations for the relocation projection.

The circular solver (:mod:`.solver`) is the entry point; the other modules
are the pieces it composes and can be used on their own.
"""

from .balance import BalanceCheck, check_balance_sheet
from .convergence import ConvergenceCheck, check_convergence
from .params import DEFAULT_PROJECTION_YEARS, DEFAULT_START_YEAR, SolverParams
from .projection import YearProjection, calculate_projection, enforce_minimum_cash
from .results import SolveFailure, SolverResult, SolveSuccess
from .settings_source import (
    MappingSettingsSource,
    SettingsSource,
    StaticSettingsSource,
)
from .solver import CircularSolver, solve
from .working_capital import (
    OPENING_WORKING_CAPITAL,
    WorkingCapitalBalances,
    calculate_working_capital,
)
from .zakat import (
    MAX_ZAKAT_RATE,
    NISAB_THRESHOLD_SAR,
    STANDARD_ZAKAT_RATE,
    calculate_asset_based_zakat,
    calculate_income_based_zakat,
    calculate_zakat,
)

__all__ = [
    # Solver
    "CircularSolver",
    "solve",
    "SolverParams",
    "SolverResult",
    "SolveSuccess",
    "SolveFailure",
    "DEFAULT_START_YEAR",
    "DEFAULT_PROJECTION_YEARS",
    # Projection pass
    "YearProjection",
    "calculate_projection",
    "enforce_minimum_cash",
    # Checks
    "ConvergenceCheck",
    "check_convergence",
    "BalanceCheck",
    "check_balance_sheet",
    # Settings
    "SettingsSource",
    "StaticSettingsSource",
    "MappingSettingsSource",
    # Working capital
    "WorkingCapitalBalances",
    "OPENING_WORKING_CAPITAL",
    "calculate_working_capital",
    # Zakat
    "STANDARD_ZAKAT_RATE",
    "MAX_ZAKAT_RATE",
    "NISAB_THRESHOLD_SAR",
    "calculate_income_based_zakat",
    "calculate_asset_based_zakat",
    "calculate_zakat",
]
