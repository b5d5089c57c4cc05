# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Campusplan Core Primitives

Building blocks shared by the solver and its helpers: the immutable model
base, constrained decimal types, enums and settings.
"""

from .enums import (
    ErrorTypeEnum,
    SolverErrorKind,
    StatementLineKey,
    ZakatMethodEnum,
)
from .model import Model
from .settings import (
    ConvergenceSettings,
    FinancialSettings,
    WorkingCapitalSettings,
)
from .types import (
    DayCount,
    DecimalBetween0And1,
    FiniteDecimal,
    PositiveDecimal,
    IterationCount,
    ProjectionYear,
    ZakatRate,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "ConvergenceSettings",
    "FinancialSettings",
    "WorkingCapitalSettings",
    # Enums
    "ErrorTypeEnum",
    "SolverErrorKind",
    "StatementLineKey",
    "ZakatMethodEnum",
    # Types
    "DayCount",
    "DecimalBetween0And1",
    "FiniteDecimal",
    "PositiveDecimal",
    "IterationCount",
    "ProjectionYear",
    "ZakatRate",
]
