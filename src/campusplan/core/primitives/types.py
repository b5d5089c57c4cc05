# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from decimal import Decimal
from typing import Annotated

from pydantic import Field

# constrained types
IterationCount = Annotated[int, Field(strict=True, ge=1)]
DayCount = Annotated[int, Field(ge=0, le=365)]
PositiveDecimal = Annotated[Decimal, Field(ge=0, allow_inf_nan=False)]
FiniteDecimal = Annotated[Decimal, Field(allow_inf_nan=False)]
DecimalBetween0And1 = Annotated[Decimal, Field(ge=0, le=1, allow_inf_nan=False)]
ZakatRate = Annotated[Decimal, Field(ge=0, le=Decimal("0.1"), allow_inf_nan=False)]
ProjectionYear = Annotated[int, Field(ge=1900, le=2200)]
