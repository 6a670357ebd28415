import math
from typing import Optional

from core.interfaces import DistanceStrategy
from core.numeric import round_to
from models.distance import DistanceRequest, DistanceResult
from services.routing.catalog import RouteCatalog

EARTH_RADIUS_KM = 6371.0088  # mean Earth radius


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)
    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))  # km


class GreatCircleStrategy(DistanceStrategy):
    """
    Offline fallback. Straight-line estimate between the two cities' coordinates,
    rounded to whole km.
    """

    name = "coordinate-estimate"

    def __init__(self, catalog: RouteCatalog):
        self.catalog = catalog

    async def try_resolve(self, request: DistanceRequest) -> Optional[DistanceResult]:
        a = self.catalog.find_city_coord(request.origin)
        b = self.catalog.find_city_coord(request.destination)
        if a is None or b is None:
            return None
        km = round_to(haversine_km(a.lat, a.lon, b.lat, b.lon), 0)
        return DistanceResult.of(km, "coordinate-estimate")
