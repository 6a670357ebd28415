from fastapi import APIRouter, Depends

from api._resp import get_services, ok
from services.bootstrap import Services

router = APIRouter(prefix="/status", tags=["status"])


@router.get("/modes")
def modes(svc: Services = Depends(get_services)):
    return ok(svc.calculator.available_modes())


@router.get("/config")
def config(svc: Services = Depends(get_services)):
    cfg = svc.config
    routing = cfg.routing.model_dump()
    if routing.get("api_key"):
        routing["api_key"] = "***"
    return ok(
        {
            "version": cfg.version,
            "carbon_credit": cfg.carbon_credit.model_dump(),
            "routing": routing,
            "defaults": cfg.defaults.model_dump(),
            "distance_strategies": svc.resolver.strategy_names(),
        }
    )
