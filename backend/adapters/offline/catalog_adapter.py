from typing import Optional

from core.interfaces import DistanceStrategy
from models.distance import DistanceRequest, DistanceResult
from services.routing.catalog import RouteCatalog


class CatalogDistanceStrategy(DistanceStrategy):
    """Known route distances, matched in either direction."""

    name = "catalog"

    def __init__(self, catalog: RouteCatalog):
        self.catalog = catalog

    async def try_resolve(self, request: DistanceRequest) -> Optional[DistanceResult]:
        km = self.catalog.find_distance(request.origin, request.destination)
        if km is None:
            return None
        return DistanceResult.of(km, "catalog")
