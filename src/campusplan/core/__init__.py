# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Campusplan Core Framework

Foundational primitives shared across the solver, valuation and reporting.
"""

from . import primitives
from .primitives import (
    ConvergenceSettings,
    FinancialSettings,
    Model,
    WorkingCapitalSettings,
)

__all__ = [
    "primitives",
    "ConvergenceSettings",
    "FinancialSettings",
    "Model",
    "WorkingCapitalSettings",
]
