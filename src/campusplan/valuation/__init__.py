# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Campusplan Valuation

Discounting of per-year amounts, typically a solved projection's net cash
flow or a rent stream over the relocation window.
"""

from .npv import NPVResult, PresentValue, calculate_npv, projection_npv

__all__ = [
    "NPVResult",
    "PresentValue",
    "calculate_npv",
    "projection_npv",
]
