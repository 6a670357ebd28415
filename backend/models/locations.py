from typing import Any, Dict
from pydantic import BaseModel, Field, model_validator


class Location(BaseModel):
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)

    # Accept {"latitude": .., "longitude": ..} and {"lat": .., "lng": ..} too
    @model_validator(mode="before")
    @classmethod
    def _accept_aliases(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return v
        out: Dict[str, Any] = dict(v)
        if "lat" not in out and "latitude" in out:
            out["lat"] = out.pop("latitude")
        if "lon" not in out:
            if "longitude" in out:
                out["lon"] = out.pop("longitude")
            elif "lng" in out:
                out["lon"] = out.pop("lng")
        return out


class Route(BaseModel):
    origin: str
    destination: str
    distance_km: float = Field(..., ge=0, allow_inf_nan=False)

    # Catalog files written for the browser use camelCase
    @model_validator(mode="before")
    @classmethod
    def _accept_camel_case(cls, v: Any) -> Any:
        if isinstance(v, dict) and "distance_km" not in v and "distanceKm" in v:
            out = dict(v)
            out["distance_km"] = out.pop("distanceKm")
            return out
        return v
