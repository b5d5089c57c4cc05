from .decimal import (
    DAYS_PER_YEAR,
    FINANCIAL_PRECISION,
    FINANCIAL_ROUNDING,
    ONE,
    ZERO,
    financial_context,
    financial_precision,
    format_money,
    round_money,
    sum_decimals,
    to_decimal,
)

__all__ = [
    "DAYS_PER_YEAR",
    "FINANCIAL_PRECISION",
    "FINANCIAL_ROUNDING",
    "ONE",
    "ZERO",
    "financial_context",
    "financial_precision",
    "format_money",
    "round_money",
    "sum_decimals",
    "to_decimal",
]
