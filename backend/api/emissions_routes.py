# api/emissions_routes.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from api._resp import fail, fail_from, get_services, ok
from core.exceptions import AppError
from models.emissions import (
    CompareRequest,
    CreditsRequest,
    EmissionRequest,
    RouteEmissionRequest,
    SavingsRequest,
    TripRequest,
)
from services.bootstrap import Services

router = APIRouter(prefix="/emissions", tags=["emissions"])


@router.post("/estimate")
def estimate_emission(req: EmissionRequest, svc: Services = Depends(get_services)):
    try:
        kg = svc.calculator.calculate_emission(req.distance_km, req.mode)
    except AppError as e:
        fail_from(e)
    return ok({"mode": req.mode, "distance_km": req.distance_km, "emission_kg": kg})


@router.post("/compare")
def compare_modes(req: CompareRequest, svc: Services = Depends(get_services)):
    try:
        distance = req.distance_km
        if distance is None:
            distance = svc.config.defaults.reference_distance_km
        rows = svc.calculator.calculate_all_modes(distance)
    except AppError as e:
        fail_from(e)
    return ok([r.model_dump() for r in rows])


@router.post("/savings")
def savings(req: SavingsRequest, svc: Services = Depends(get_services)):
    try:
        s = svc.calculator.calculate_savings(req.emission_kg, req.baseline_kg)
    except AppError as e:
        fail_from(e)
    return ok(s.model_dump())


@router.post("/credits")
def credits(req: CreditsRequest, svc: Services = Depends(get_services)):
    try:
        n = svc.calculator.calculate_carbon_credits(req.emission_kg)
        price = svc.calculator.estimate_credit_price(n)
    except AppError as e:
        fail_from(e)
    return ok({"credits": n, "price": price.model_dump()})


@router.post("/route")
def route_emission(req: RouteEmissionRequest, svc: Services = Depends(get_services)):
    try:
        out = svc.calculator.calculate_route_emission(
            req.origin, req.destination, req.distance_km, req.transport
        )
    except AppError as e:
        fail_from(e)
    return ok(out.model_dump())


@router.post("/trip")
async def trip_summary(req: TripRequest, svc: Services = Depends(get_services)):
    try:
        summary = await svc.trips.summarize(req)
    except AppError as e:
        fail_from(e)
    if summary is None:
        fail(404, f"Distance not found for {req.origin} -> {req.destination}; enter it manually")
    return ok(summary.model_dump())
