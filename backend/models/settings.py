# models/settings.py
from __future__ import annotations
from typing import Dict, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


DEFAULT_EMISSION_FACTORS: Dict[str, float] = {
    "bicycle": 0.0,
    "car": 192.0,  # g CO2/km
    "bus": 27.0,  # g CO2/km per passenger
    "truck": 900.0,  # g CO2/km
}


class TransportModeMeta(BaseModel):
    """Display metadata for a transport mode (consumed by the frontend only)."""

    label: str
    icon: str = ""
    color: str = ""


def _default_modes() -> Dict[str, TransportModeMeta]:
    return {
        "bicycle": TransportModeMeta(label="Bicicleta", icon="🚲", color="#10b981"),
        "car": TransportModeMeta(label="Carro", icon="🚗", color="#106b01"),
        "bus": TransportModeMeta(label="Ônibus", icon="🚌", color="#059669"),
        "truck": TransportModeMeta(label="Caminhão", icon="🚛", color="#475569"),
    }


class CarbonCreditSettings(BaseModel):
    # Missing values fall back to these defaults instead of failing.
    kg_per_credit: float = Field(1000.0, gt=0)
    price_min_per_credit: float = Field(50.0, ge=0)
    price_max_per_credit: float = Field(150.0, ge=0)


class RoutingSettings(BaseModel):
    enabled: bool = False
    endpoint: str = "https://router.project-osrm.org/route/v1/driving"
    api_key: Optional[str] = None
    cache_ttl_ms: int = Field(1000 * 60 * 60 * 24, ge=0)  # 24h
    timeout_s: float = Field(10.0, gt=0)


class AppDefaults(BaseModel):
    transport: str = "car"
    reference_distance_km: float = Field(100.0, ge=0)


class AppConfig(BaseModel):
    """Read-only configuration injected into every component."""

    version: str = "0.1.0"
    emission_factors: Dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_EMISSION_FACTORS)
    )
    transport_modes: Dict[str, TransportModeMeta] = Field(
        default_factory=_default_modes
    )
    carbon_credit: CarbonCreditSettings = Field(default_factory=CarbonCreditSettings)
    routing: RoutingSettings = Field(default_factory=RoutingSettings)
    defaults: AppDefaults = Field(default_factory=AppDefaults)

    model_config = {"frozen": True}

    @field_validator("emission_factors")
    @classmethod
    def _non_negative_factors(cls, v: Dict[str, float]) -> Dict[str, float]:
        for mode, factor in v.items():
            if factor != factor or factor < 0:  # NaN or negative
                raise ValueError(f"emission factor for '{mode}' must be >= 0")
        return v

    @model_validator(mode="after")
    def _price_range(self) -> "AppConfig":
        cc = self.carbon_credit
        if cc.price_max_per_credit < cc.price_min_per_credit:
            raise ValueError("price_max_per_credit must be >= price_min_per_credit")
        return self
