import logging
from typing import Optional

from adapters.online.osrm_client import OSRMRoutingClient
from core.interfaces import DistanceStrategy
from models.distance import DistanceRequest, DistanceResult
from services.routing.catalog import RouteCatalog

logger = logging.getLogger(__name__)


class RoadDistanceStrategy(DistanceStrategy):
    """
    Road distance from the external routing provider.
    Runs only when the caller opted in, routing is enabled and both
    names resolve to coordinates.
    """

    name = "external-routing"

    def __init__(self, catalog: RouteCatalog, client: OSRMRoutingClient):
        self.catalog = catalog
        self.client = client

    async def try_resolve(self, request: DistanceRequest) -> Optional[DistanceResult]:
        if not request.use_road or not self.client.enabled:
            return None
        a = self.catalog.find_city_coord(request.origin)
        b = self.catalog.find_city_coord(request.destination)
        if a is None or b is None:
            return None

        result = await self.client.get_driving_distance(a, b)
        if not result.found or result.distance_km is None:
            logger.info(
                "Road distance unavailable for %s -> %s (%s); falling back",
                request.origin,
                request.destination,
                result.reason,
            )
            return None
        return DistanceResult.of(result.distance_km, "external-routing")
