# services/routing/resolver.py
from __future__ import annotations
import logging
from typing import List, Sequence

from core.interfaces import DistanceStrategy
from models.distance import DistanceRequest, DistanceResult

logger = logging.getLogger(__name__)


class DistanceResolver:
    """
    Runs the strategies in order; the first one that returns a result wins.
    Exhausting the list yields DistanceResult.not_found(), not an error.
    """

    def __init__(self, strategies: Sequence[DistanceStrategy]):
        self.strategies: List[DistanceStrategy] = list(strategies)

    async def resolve(self, request: DistanceRequest) -> DistanceResult:
        if not request.origin.strip() or not request.destination.strip():
            return DistanceResult.not_found()

        for strategy in self.strategies:
            result = await strategy.try_resolve(request)
            if result is not None and result.found:
                logger.debug(
                    "Resolved %s -> %s via %s: %s km",
                    request.origin,
                    request.destination,
                    strategy.name,
                    result.distance_km,
                )
                return result

        logger.debug("No distance for %s -> %s", request.origin, request.destination)
        return DistanceResult.not_found()

    async def find_distance(
        self, origin: str, destination: str, use_road: bool = False
    ) -> DistanceResult:
        return await self.resolve(
            DistanceRequest(origin=origin or "", destination=destination or "", use_road=use_road)
        )

    def strategy_names(self) -> List[str]:
        return [s.name for s in self.strategies]
