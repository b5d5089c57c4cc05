# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Campusplan - Financial Statements Engine for School Relocation Planning

Turns a scenario's per-year revenue, EBITDA, capex and staffing inputs into a
fully reconciled 30-year set of financial statements. The heart of the package
is the circular solver, which resolves the loop between interest, cash, debt
and net result by fixed-point iteration.

Key Entry Points:
- campusplan.financial.solve() - Converged projection for one scenario
- campusplan.financial.check_convergence() - Hybrid absolute/relative error check
- campusplan.valuation.projection_npv() - Discounting of a projection field
- campusplan.reporting.* - Statement tables (pandas DataFrames)

Example Usage:
    ```python
    from decimal import Decimal
    from campusplan.financial import SolverParams, solve

    params = SolverParams(
        revenue=[Decimal("100000000")] * 30,
        ebitda=[Decimal("15000000")] * 30,
        capex=[Decimal("5000000")] * 30,
        staff_costs=[Decimal("30000000")] * 30,
        fixed_assets_opening=Decimal("50000000"),
        starting_cash=Decimal("5000000"),
        opening_equity=Decimal("55000000"),
    )
    result = solve(params)
    if result.success:
        print(f"Converged in {result.iterations} iterations")
    ```
"""

import importlib
import logging

# Libraries leave handler configuration to the application.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "financial",
    "reporting",
    "utils",
    "valuation",
]


_LAZY_MODULES = {
    "core": "campusplan.core",
    "financial": "campusplan.financial",
    "reporting": "campusplan.reporting",
    "utils": "campusplan.utils",
    "valuation": "campusplan.valuation",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'campusplan' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
