# api/distance_routes.py
from fastapi import APIRouter, Depends, Query

from api._resp import get_services, ok
from services.bootstrap import Services

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("")
def list_routes(svc: Services = Depends(get_services)):
    return ok([r.model_dump() for r in svc.catalog.unique_routes()])


@router.get("/distances")
def distance_map(svc: Services = Depends(get_services)):
    return ok(svc.catalog.distance_map())


@router.get("/summaries")
def route_summaries(svc: Services = Depends(get_services)):
    rows = svc.trips.route_summaries(svc.catalog.unique_routes())
    return ok([r.model_dump() for r in rows])


@router.get("/cities")
def list_cities(svc: Services = Depends(get_services)):
    return ok(svc.catalog.all_cities())


@router.get("/distance")
async def find_distance(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    use_road: bool = Query(False),
    svc: Services = Depends(get_services),
):
    # not-found is a normal answer (found=false), not an HTTP error
    result = await svc.resolver.find_distance(origin, destination, use_road)
    return ok(result.model_dump())
