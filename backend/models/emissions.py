# models/emissions.py
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field


class ModeEmission(BaseModel):
    mode: str
    emission: float  # kg CO2
    percentage_vs_car: float


class Savings(BaseModel):
    saved_kg: float
    percentage: float


class CreditPrice(BaseModel):
    min: float
    max: float
    average: float


class RouteEndpoints(BaseModel):
    origin: str = ""
    destination: str = ""


class RouteEmission(BaseModel):
    route: RouteEndpoints
    distance_km: float
    transport: str  # display label
    factor_kg_per_km: float
    total_kg: float


class ModeTotal(BaseModel):
    mode: str
    emission: float  # kg CO2


class RouteSummary(BaseModel):
    """Per-route overview: every mode, plus credits for the car trip."""

    origin: str
    destination: str
    distance_km: float
    by_mode: List[ModeTotal]  # configuration order
    car_emission: float
    credits: float
    price: CreditPrice


class TripSummary(BaseModel):
    origin: str
    destination: str
    distance_km: float
    distance_source: Optional[str] = None
    mode: str
    emission_kg: float
    savings_vs_car: Savings
    comparison: List[ModeEmission]
    credits: float
    price: CreditPrice


# ---------- Request bodies ----------
# Numeric fields are left unconstrained here; the calculator owns validation.


class EmissionRequest(BaseModel):
    distance_km: float
    mode: str


class CompareRequest(BaseModel):
    # None -> defaults.reference_distance_km
    distance_km: Optional[float] = None


class SavingsRequest(BaseModel):
    emission_kg: float
    baseline_kg: float


class CreditsRequest(BaseModel):
    emission_kg: float


class RouteEmissionRequest(BaseModel):
    origin: Optional[str] = None
    destination: Optional[str] = None
    distance_km: float
    transport: Optional[str] = None


class TripRequest(BaseModel):
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    mode: Optional[str] = None
    distance_km: Optional[float] = None
    use_road: bool = False
