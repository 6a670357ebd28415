# services/bootstrap.py
from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Optional

from adapters.offline.catalog_adapter import CatalogDistanceStrategy
from adapters.offline.haversine_adapter import GreatCircleStrategy
from adapters.online.osrm_client import OSRMRoutingClient
from adapters.online.road_distance_adapter import RoadDistanceStrategy
from core.cache import KeyValueStore, MemoryStore, TimedCache
from models.settings import AppConfig
from services.emissions.calculator import EmissionCalculator
from services.emissions.trip import TripPlanner
from services.routing.catalog import RouteCatalog
from services.routing.resolver import DistanceResolver

logger = logging.getLogger(__name__)


@dataclass
class Services:
    config: AppConfig
    catalog: RouteCatalog
    calculator: EmissionCalculator
    routing: OSRMRoutingClient
    resolver: DistanceResolver
    trips: TripPlanner


def build_resolver(catalog: RouteCatalog, routing: OSRMRoutingClient) -> DistanceResolver:
    # Priority order: catalog -> road routing (opt-in) -> great-circle estimate
    return DistanceResolver(
        [
            CatalogDistanceStrategy(catalog),
            RoadDistanceStrategy(catalog, routing),
            GreatCircleStrategy(catalog),
        ]
    )


def build_services(
    config: AppConfig,
    catalog: RouteCatalog,
    store: Optional[KeyValueStore] = None,
    routing: Optional[OSRMRoutingClient] = None,
) -> Services:
    """Wire every component from one injected configuration."""
    if routing is None:
        cache = TimedCache(store or MemoryStore(), ttl_ms=config.routing.cache_ttl_ms)
        routing = OSRMRoutingClient(config.routing, cache=cache)
    calculator = EmissionCalculator.from_config(config)
    resolver = build_resolver(catalog, routing)

    logger.info(
        "Loaded %d routes, %d city coordinates, %d transport modes (road routing %s)",
        len(catalog),
        len(catalog.cities),
        len(config.emission_factors),
        "on" if config.routing.enabled else "off",
    )
    return Services(
        config=config,
        catalog=catalog,
        calculator=calculator,
        routing=routing,
        resolver=resolver,
        trips=TripPlanner(calculator, resolver),
    )


def load_services(config: Optional[AppConfig] = None) -> Services:
    """Build services from settings and the catalog files under DATA_DIR."""
    from config import get_cities_file, get_data_dir, get_routes_file, get_settings
    from file_handler.catalog_loader import load_optional_cities, load_routes

    config = config or get_settings()
    routes = load_routes(get_routes_file())
    cities = load_optional_cities(
        get_cities_file(), get_data_dir() / "municipalities-br.json"
    )
    return build_services(config, RouteCatalog(routes, cities))
