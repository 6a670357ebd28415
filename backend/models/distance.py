# models/distance.py
from __future__ import annotations
from typing import Literal, Optional
from pydantic import BaseModel

DistanceSource = Literal["catalog", "external-routing", "coordinate-estimate"]


class DistanceRequest(BaseModel):
    origin: str
    destination: str
    # Opt in to the external road-routing step
    use_road: bool = False


class DistanceResult(BaseModel):
    """Outcome of one resolution attempt: found with a source, or not found."""

    found: bool
    distance_km: Optional[float] = None
    source: Optional[DistanceSource] = None

    @classmethod
    def of(cls, distance_km: float, source: DistanceSource) -> "DistanceResult":
        return cls(found=True, distance_km=distance_km, source=source)

    @classmethod
    def not_found(cls) -> "DistanceResult":
        return cls(found=False)


class RoutingResult(BaseModel):
    """Outcome of a road-distance lookup: found(km) or unavailable(reason)."""

    found: bool
    distance_km: Optional[float] = None
    meters: Optional[float] = None
    from_cache: bool = False
    reason: Optional[str] = None

    @classmethod
    def ok(
        cls, meters: float, distance_km: float, from_cache: bool = False
    ) -> "RoutingResult":
        return cls(
            found=True, meters=meters, distance_km=distance_km, from_cache=from_cache
        )

    @classmethod
    def unavailable(cls, reason: str) -> "RoutingResult":
        return cls(found=False, reason=reason)
