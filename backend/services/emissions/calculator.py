# services/emissions/calculator.py
from __future__ import annotations
from typing import List, Optional

from core.numeric import require_non_negative, require_number, round_to
from models.emissions import (
    CreditPrice,
    ModeEmission,
    RouteEmission,
    RouteEndpoints,
    Savings,
)
from models.settings import AppConfig, CarbonCreditSettings
from .factors import ModeFactors

BASELINE_MODE = "car"


class EmissionCalculator:
    """
    Pure arithmetic over distance + emission factors. No I/O.
    Emissions are kg CO2 rounded to 2 decimals, credits to 4.
    """

    def __init__(self, factors: ModeFactors, credit: CarbonCreditSettings) -> None:
        self.factors = factors
        self.credit = credit

    @classmethod
    def from_config(cls, config: AppConfig) -> "EmissionCalculator":
        return cls(ModeFactors.from_config(config), config.carbon_credit)

    def calculate_emission(self, distance_km: float, mode: str) -> float:
        distance_km = require_non_negative(distance_km, "distance_km")
        factor_g = self.factors.per_km(mode)
        return round_to(distance_km * factor_g / 1000.0, 2)

    def calculate_all_modes(self, distance_km: float) -> List[ModeEmission]:
        distance_km = require_non_negative(distance_km, "distance_km")
        results = [
            (mode, self.calculate_emission(distance_km, mode))
            for mode in self.factors.modes()
        ]

        car_emission = next((e for m, e in results if m == BASELINE_MODE), None)
        enriched: List[ModeEmission] = []
        for mode, emission in results:
            if car_emission:
                pct = round_to(emission / car_emission * 100, 2)
            else:
                pct = 100.0 if mode == BASELINE_MODE else 0.0
            enriched.append(
                ModeEmission(mode=mode, emission=emission, percentage_vs_car=pct)
            )

        # sorted() is stable: ties keep configuration order
        return sorted(enriched, key=lambda r: r.emission)

    def calculate_savings(self, emission: float, baseline: float) -> Savings:
        emission = require_number(emission, "emission")
        baseline = require_number(baseline, "baseline")
        saved = max(0.0, baseline - emission)
        percentage = round_to(saved / baseline * 100, 2) if baseline > 0 else 0.0
        return Savings(saved_kg=round_to(saved, 2), percentage=percentage)

    def calculate_carbon_credits(self, emission_kg: float) -> float:
        emission_kg = require_non_negative(emission_kg, "emission_kg")
        return round_to(emission_kg / self.credit.kg_per_credit, 4)

    def estimate_credit_price(self, credits: float) -> CreditPrice:
        credits = require_non_negative(credits, "credits")
        lo = credits * self.credit.price_min_per_credit
        hi = credits * self.credit.price_max_per_credit
        return CreditPrice(
            min=round_to(lo, 2), max=round_to(hi, 2), average=round_to((lo + hi) / 2, 2)
        )

    def resolve_mode(self, transport: Optional[str]) -> str:
        return self.factors.resolve(transport)

    def calculate_route_emission(
        self,
        origin: Optional[str],
        destination: Optional[str],
        distance_km: float,
        transport: Optional[str] = None,
    ) -> RouteEmission:
        distance_km = require_non_negative(distance_km, "distance_km")
        mode = self.resolve_mode(transport)
        factor_kg_per_km = round_to(self.factors.per_km(mode) / 1000.0, 3)
        return RouteEmission(
            route=RouteEndpoints(origin=origin or "", destination=destination or ""),
            distance_km=distance_km,
            transport=self.factors.label(mode),
            factor_kg_per_km=factor_kg_per_km,
            total_kg=round_to(distance_km * factor_kg_per_km, 2),
        )

    def available_modes(self) -> List[dict]:
        return [
            {
                "mode": m,
                "label": self.factors.label(m),
                "factor_g_per_km": self.factors.per_km(m),
            }
            for m in self.factors.modes()
        ]
