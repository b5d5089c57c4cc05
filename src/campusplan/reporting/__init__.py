# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Campusplan Reporting

Presentation tables for a solved projection. Reports only reshape results;
all numbers come from the solver.
"""

from .base import BaseReport
from .statements import (
    BALANCE_SHEET_LINES,
    CASH_FLOW_LINES,
    INCOME_STATEMENT_LINES,
    ProjectionTableReport,
    StatementReport,
    balance_sheet,
    cash_flow_statement,
    income_statement,
    projection_to_dataframe,
)

__all__ = [
    "BaseReport",
    "StatementReport",
    "ProjectionTableReport",
    "INCOME_STATEMENT_LINES",
    "CASH_FLOW_LINES",
    "BALANCE_SHEET_LINES",
    "projection_to_dataframe",
    "income_statement",
    "cash_flow_statement",
    "balance_sheet",
]
