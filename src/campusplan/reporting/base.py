# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base class for statement reports.

Reports format a solved projection; they never perform financial
calculations of their own.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Union

from ..financial.projection import YearProjection
from ..financial.results import SolveSuccess


class BaseReport(ABC):
    """
    Abstract base class for projection reports.

    Accepts either a :class:`SolveSuccess` or the projection list itself.
    Failed solves are rejected: a non-converged projection must not be
    presented as a statement.
    """

    def __init__(self, source: Union[SolveSuccess, Sequence[YearProjection]]):
        if isinstance(source, SolveSuccess):
            projection = source.projection
        elif isinstance(source, (list, tuple)) and all(
            isinstance(year, YearProjection) for year in source
        ):
            projection = source
        else:
            raise TypeError(
                "Reports require a SolveSuccess or a sequence of YearProjection, "
                f"got {type(source).__name__}"
            )
        self._projection: List[YearProjection] = list(projection)

    @property
    def years(self) -> List[int]:
        return [year.year for year in self._projection]

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """Transform the projection into the report's output format."""
