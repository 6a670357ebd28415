# adapters/online/osrm_client.py
from __future__ import annotations
import logging
import math
from typing import Any, Optional

import httpx

from core.cache import MemoryStore, TimedCache
from core.exceptions import InvalidResponseError
from core.numeric import is_number, round_to
from models.distance import RoutingResult
from models.settings import RoutingSettings

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://router.project-osrm.org/route/v1/driving"


def _as_latlon(coord: Any) -> Optional[tuple[float, float]]:
    """
    Return (lat, lon) from a coordinate-like object, or None if malformed.
    Supports objects with .lat/.lon or dicts with those keys.
    """
    if coord is None:
        return None
    if hasattr(coord, "lat") and hasattr(coord, "lon"):
        lat, lon = coord.lat, coord.lon
    elif isinstance(coord, dict):
        lat, lon = coord.get("lat"), coord.get("lon")
    else:
        return None
    if not is_number(lat) or not is_number(lon):
        return None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return None
    return (float(lat), float(lon))


def cache_key(a: tuple[float, float], b: tuple[float, float]) -> str:
    # direction-sensitive: A->B and B->A are separate entries
    return f"routing:{a[0]},{a[1]}|{b[0]},{b[1]}"


def _meters_from(data: Any) -> float:
    routes = data.get("routes") if isinstance(data, dict) else None
    if not isinstance(routes, list) or not routes or not isinstance(routes[0], dict):
        raise InvalidResponseError("response has no routes")
    meters = routes[0].get("distance")
    if not is_number(meters) or not math.isfinite(meters) or meters < 0:
        raise InvalidResponseError("routes[0].distance missing or not numeric")
    return float(meters)


class OSRMRoutingClient:
    """
    Driving distance from an OSRM-compatible `route` service.
    Never raises for provider problems: returns RoutingResult.unavailable.
    Successful lookups are cached per (A, B) with the configured TTL.
    """

    def __init__(
        self,
        settings: RoutingSettings,
        cache: Optional[TimedCache] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self.cache = cache or TimedCache(MemoryStore(), ttl_ms=settings.cache_ttl_ms)
        # injected client is reused; otherwise one is opened per request
        self._http = http_client

    @property
    def enabled(self) -> bool:
        return bool(self.settings.enabled)

    def build_url(self, a: tuple[float, float], b: tuple[float, float]) -> str:
        endpoint = (self.settings.endpoint or DEFAULT_ENDPOINT).rstrip("/")
        return f"{endpoint}/{a[1]},{a[0]};{b[1]},{b[0]}"

    def _params(self) -> dict:
        params = {"overview": "false", "alternatives": "false", "steps": "false"}
        if self.settings.api_key:
            params["api_key"] = self.settings.api_key
        return params

    async def _fetch(self, url: str) -> httpx.Response:
        if self._http is not None:
            return await self._http.get(url, params=self._params())
        async with httpx.AsyncClient(timeout=self.settings.timeout_s) as client:
            return await client.get(url, params=self._params())

    async def get_driving_distance(self, a: Any, b: Any) -> RoutingResult:
        if not self.enabled:
            return RoutingResult.unavailable("routing disabled")

        pa, pb = _as_latlon(a), _as_latlon(b)
        if pa is None or pb is None:
            return RoutingResult.unavailable("malformed coordinates")

        key = cache_key(pa, pb)
        hit = self.cache.get_fresh(key)
        if hit is not None:
            logger.debug("Routing cache hit for %s", key)
            return RoutingResult.ok(hit.value, round_to(hit.value / 1000, 0), True)

        url = self.build_url(pa, pb)
        try:
            resp = await self._fetch(url)
            resp.raise_for_status()
            meters = _meters_from(resp.json())
        except httpx.HTTPStatusError as e:
            logger.warning("Routing provider HTTP %s for %s", e.response.status_code, url)
            return RoutingResult.unavailable(f"HTTP {e.response.status_code}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Routing provider request failed: %s", e)
            return RoutingResult.unavailable(f"network error: {e}")
        except (InvalidResponseError, ValueError) as e:
            # ValueError covers non-JSON bodies
            logger.warning("Routing provider returned an unusable body: %s", e)
            return RoutingResult.unavailable(f"invalid response: {e}")

        try:
            self.cache.put(key, meters)
        except Exception as e:
            # storage errors must not hide a good distance
            logger.warning("Could not cache routing result for %s: %s", key, e)

        return RoutingResult.ok(meters, round_to(meters / 1000, 0))
