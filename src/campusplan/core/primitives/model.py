# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models for solver inputs and settings. Anything produced during
    a solve (projections, check results) lives in plain dataclasses instead.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Inputs never change once a solve starts
        extra="forbid",  # Catches typos and missing field definitions immediately
    )

    def copy_with(self, **updates) -> "Model":
        """Copy with ``updates`` applied and the result re-validated.

        Unlike ``model_copy(update=...)``, constraint violations in the
        updates raise ``ValidationError`` instead of producing an invalid model.
        """
        return type(self).model_validate({**self.model_dump(), **updates})
