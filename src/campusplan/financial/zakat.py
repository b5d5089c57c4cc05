# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Zakat calculation methods.

Zakat is assessed at 2.5% (one-fortieth) per year. Two bases are supported:

- Income-based (default): ``max(0, net income) x rate``. No zakat on losses.
- Asset-based: ``(cash + receivables + inventory) x rate`` when the zakatable
  total reaches the nisab threshold, otherwise zero. Fixed assets are not
  zakatable.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..core.primitives import ZakatMethodEnum
from ..utils.decimal import ZERO, DecimalLike, to_decimal

STANDARD_ZAKAT_RATE = Decimal("0.025")
MAX_ZAKAT_RATE = Decimal("0.1")

# 85g of gold at roughly 250 SAR/g; refresh annually with the gold price.
NISAB_THRESHOLD_SAR = Decimal("21250")


def _validated_rate(zakat_rate: Optional[DecimalLike]) -> Decimal:
    rate = STANDARD_ZAKAT_RATE if zakat_rate is None else to_decimal(zakat_rate)
    if rate < ZERO or rate > MAX_ZAKAT_RATE:
        raise ValueError("Zakat rate must be between 0% and 10%")
    return rate


def calculate_income_based_zakat(
    net_income: DecimalLike, zakat_rate: Optional[DecimalLike] = None
) -> Decimal:
    """
    Income-based zakat: only positive income is zakatable.

    Args:
        net_income: Net income for the period (before zakat)
        zakat_rate: Rate as a fraction (default 0.025)

    Returns:
        Decimal: Zakat amount, never negative

    Raises:
        ValueError: If the rate is outside [0, 0.10]

    Example:
        >>> calculate_income_based_zakat(10_000_000)
        Decimal('250000.000')
        >>> calculate_income_based_zakat(-2_000_000)
        Decimal('0')
    """
    rate = _validated_rate(zakat_rate)
    income = to_decimal(net_income)
    if income <= ZERO:
        return ZERO
    return income * rate


def calculate_asset_based_zakat(
    cash: DecimalLike,
    accounts_receivable: DecimalLike,
    inventory: DecimalLike = ZERO,
    zakat_rate: Optional[DecimalLike] = None,
    nisab_threshold: Optional[DecimalLike] = None,
) -> Decimal:
    """
    Asset-based zakat on cash, receivables and inventory.

    Args:
        cash: Cash and bank balances (fully zakatable)
        accounts_receivable: Collectible receivables
        inventory: Inventory value (usually minimal for schools)
        zakat_rate: Rate as a fraction (default 0.025)
        nisab_threshold: Minimum zakatable wealth (default 21,250 SAR)

    Returns:
        Decimal: Zakat amount, zero below the nisab threshold

    Raises:
        ValueError: If any balance or the threshold is negative, or the rate
            is outside [0, 0.10]
    """
    cash_dec = to_decimal(cash)
    ar_dec = to_decimal(accounts_receivable)
    inventory_dec = to_decimal(inventory)
    rate = _validated_rate(zakat_rate)
    nisab = (
        NISAB_THRESHOLD_SAR if nisab_threshold is None else to_decimal(nisab_threshold)
    )

    if cash_dec < ZERO:
        raise ValueError("Cash cannot be negative")
    if ar_dec < ZERO:
        raise ValueError("Accounts receivable cannot be negative")
    if inventory_dec < ZERO:
        raise ValueError("Inventory cannot be negative")
    if nisab < ZERO:
        raise ValueError("Nisab threshold cannot be negative")

    zakatable_assets = cash_dec + ar_dec + inventory_dec
    if zakatable_assets < nisab:
        return ZERO
    return zakatable_assets * rate


def calculate_zakat(method: ZakatMethodEnum, **kwargs) -> Decimal:
    """
    Route to the zakat method selected in settings.

    Example:
        >>> calculate_zakat(ZakatMethodEnum.INCOME_BASED, net_income=10_000_000)
        Decimal('250000.000')
    """
    if method == ZakatMethodEnum.INCOME_BASED:
        return calculate_income_based_zakat(**kwargs)
    if method == ZakatMethodEnum.ASSET_BASED:
        return calculate_asset_based_zakat(**kwargs)
    raise ValueError(f"Unknown zakat calculation method: {method}")
