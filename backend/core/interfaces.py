from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from models.distance import DistanceRequest, DistanceResult


class DistanceStrategy(ABC):
    """One step of the distance fallback chain."""

    name: str = "strategy"

    @abstractmethod
    async def try_resolve(self, request: DistanceRequest) -> Optional[DistanceResult]:
        """Return a found DistanceResult, or None to let the next step try."""
        ...
