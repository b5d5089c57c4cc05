# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Where the solver gets its rates and thresholds.

The application keeps financial settings in an admin-managed store. The
solver only needs a callable-shaped dependency that returns
:class:`FinancialSettings`, so the store is injected through the
:class:`SettingsSource` protocol instead of being fetched from a module-level
cache.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from ..core.primitives import FinancialSettings

logger = logging.getLogger(__name__)


@runtime_checkable
class SettingsSource(Protocol):
    def load_financial_settings(self) -> FinancialSettings:
        ...


class StaticSettingsSource:
    """Always returns the same settings object."""

    def __init__(self, settings: Optional[FinancialSettings] = None):
        self.settings = settings or FinancialSettings()

    def load_financial_settings(self) -> FinancialSettings:
        return self.settings


class MappingSettingsSource:
    """
    Builds settings from a raw mapping, e.g. rows read from a settings table.

    Keys match :class:`FinancialSettings` field names; missing keys keep their
    defaults. The mapping is validated on every load so a bad value surfaces
    as a pydantic ``ValidationError`` from ``load_financial_settings``.

    Example:
        >>> source = MappingSettingsSource({"debt_interest_rate": "0.06"})
        >>> source.load_financial_settings().debt_interest_rate
        Decimal('0.06')
    """

    def __init__(self, values: Mapping[str, Any]):
        self.values = dict(values)

    def load_financial_settings(self) -> FinancialSettings:
        settings = FinancialSettings.model_validate(self.values)
        logger.debug(f"Loaded financial settings from {len(self.values)} stored values")
        return settings
