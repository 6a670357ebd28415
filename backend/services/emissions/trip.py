# services/emissions/trip.py
from __future__ import annotations
from typing import Iterable, List, Optional

from core.exceptions import InvalidInputError
from core.numeric import require_non_negative
from models.distance import DistanceResult
from models.emissions import ModeTotal, RouteSummary, TripRequest, TripSummary
from models.locations import Route
from services.routing.resolver import DistanceResolver
from .calculator import BASELINE_MODE, EmissionCalculator


class TripPlanner:
    """Resolve a trip's distance (if not given) and derive every figure shown for it."""

    def __init__(self, calculator: EmissionCalculator, resolver: DistanceResolver):
        self.calculator = calculator
        self.resolver = resolver

    async def distance_for(self, req: TripRequest) -> DistanceResult:
        if req.distance_km is not None:
            km = require_non_negative(req.distance_km, "distance_km")
            if km <= 0:
                raise InvalidInputError("distance_km must be greater than 0 for a trip")
            return DistanceResult(found=True, distance_km=km)
        return await self.resolver.find_distance(req.origin, req.destination, req.use_road)

    async def summarize(self, req: TripRequest) -> Optional[TripSummary]:
        """None when no distance was given and none could be resolved."""
        resolved = await self.distance_for(req)
        if not resolved.found or resolved.distance_km is None:
            return None
        return self.summarize_distance(
            req.origin, req.destination, resolved.distance_km, req.mode, resolved.source
        )

    def summarize_distance(
        self,
        origin: str,
        destination: str,
        distance_km: float,
        mode: Optional[str] = None,
        source: Optional[str] = None,
    ) -> TripSummary:
        calc = self.calculator
        distance_km = require_non_negative(distance_km, "distance_km")
        mode_key = calc.resolve_mode(mode)

        emission = calc.calculate_emission(distance_km, mode_key)
        if calc.factors.has(BASELINE_MODE):
            baseline = calc.calculate_emission(distance_km, BASELINE_MODE)
        else:
            baseline = emission
        credits = calc.calculate_carbon_credits(emission)

        return TripSummary(
            origin=origin,
            destination=destination,
            distance_km=distance_km,
            distance_source=source,
            mode=mode_key,
            emission_kg=emission,
            savings_vs_car=calc.calculate_savings(emission, baseline),
            comparison=calc.calculate_all_modes(distance_km),
            credits=credits,
            price=calc.estimate_credit_price(credits),
        )

    def route_summaries(self, routes: Iterable[Route]) -> List[RouteSummary]:
        calc = self.calculator
        out: List[RouteSummary] = []
        for route in routes:
            by_mode = [
                ModeTotal(mode=m, emission=calc.calculate_emission(route.distance_km, m))
                for m in calc.factors.modes()
            ]
            car = next((t.emission for t in by_mode if t.mode == BASELINE_MODE), 0.0)
            credits = calc.calculate_carbon_credits(car)
            out.append(
                RouteSummary(
                    origin=route.origin,
                    destination=route.destination,
                    distance_km=route.distance_km,
                    by_mode=by_mode,
                    car_emission=car,
                    credits=credits,
                    price=calc.estimate_credit_price(credits),
                )
            )
        return out
