# backend/tests/test_adapters.py
import asyncio
import httpx
import pytest
import respx

from adapters.offline.catalog_adapter import CatalogDistanceStrategy
from adapters.offline.haversine_adapter import GreatCircleStrategy, haversine_km
from adapters.online.osrm_client import OSRMRoutingClient
from core.interfaces import DistanceStrategy
from models.distance import DistanceRequest, DistanceResult
from services.bootstrap import build_resolver
from services.routing.resolver import DistanceResolver

ROUTER = "https://router.test/route/v1/driving"


def _resolve(resolver, origin, destination, use_road=False):
    return asyncio.run(resolver.find_distance(origin, destination, use_road))


@pytest.fixture
def offline_resolver(toy_catalog, config):
    return build_resolver(toy_catalog, OSRMRoutingClient(config.routing))


@pytest.fixture
def road_resolver(toy_catalog, routing_config):
    return build_resolver(toy_catalog, OSRMRoutingClient(routing_config.routing))


def test_haversine_one_degree_at_equator():
    assert haversine_km(0, 0, 0, 1) == pytest.approx(111.195, abs=0.01)


@pytest.mark.parametrize(
    "o,d,expected_range_km",
    [
        ((37.7749, -122.4194), (34.0522, -118.2437), (500, 700)),  # SF→LA ~560 km
    ],
)
def test_haversine_real_cities(o, d, expected_range_km):
    km = haversine_km(o[0], o[1], d[0], d[1])
    lo, hi = expected_range_km
    assert lo <= km <= hi, f"expected {lo}..{hi} km, got {km}"


def test_catalog_wins_over_estimate(offline_resolver):
    result = _resolve(offline_resolver, "A", "B")
    assert (result.distance_km, result.source) == (100, "catalog")


def test_reverse_direction_uses_catalog(offline_resolver):
    result = _resolve(offline_resolver, "b", " a ")
    assert (result.distance_km, result.source) == (100, "catalog")


def test_great_circle_fallback(offline_resolver):
    result = _resolve(offline_resolver, "X", "Y")
    assert result.found
    assert (result.distance_km, result.source) == (111, "coordinate-estimate")


def test_not_found_is_a_result(offline_resolver):
    result = _resolve(offline_resolver, "X", "Atlantis")
    assert result == DistanceResult.not_found()
    assert _resolve(offline_resolver, "", "Y").found is False


def test_strategy_order(offline_resolver):
    assert offline_resolver.strategy_names() == [
        "catalog",
        "external-routing",
        "coordinate-estimate",
    ]


class _Stub(DistanceStrategy):
    def __init__(self, name, result, calls):
        self.name = name
        self.result = result
        self.calls = calls

    async def try_resolve(self, request):
        self.calls.append(self.name)
        return self.result


def test_first_success_stops_the_chain():
    calls = []
    resolver = DistanceResolver(
        [
            _Stub("one", None, calls),
            _Stub("two", DistanceResult.of(5, "catalog"), calls),
            _Stub("three", DistanceResult.of(9, "coordinate-estimate"), calls),
        ]
    )
    result = asyncio.run(resolver.resolve(DistanceRequest(origin="a", destination="b")))
    assert result.distance_km == 5
    assert calls == ["one", "two"]


def test_catalog_strategy_declines_unknown_pairs(toy_catalog):
    strategy = CatalogDistanceStrategy(toy_catalog)
    req = DistanceRequest(origin="X", destination="Y")
    assert asyncio.run(strategy.try_resolve(req)) is None


def test_great_circle_strategy_needs_both_coordinates(toy_catalog):
    strategy = GreatCircleStrategy(toy_catalog)
    req = DistanceRequest(origin="X", destination="Nowhere")
    assert asyncio.run(strategy.try_resolve(req)) is None


# ---------- road routing step ----------


@respx.mock
def test_road_distance_used_when_opted_in(road_resolver):
    respx.get(url__startswith=ROUTER).mock(
        return_value=httpx.Response(200, json={"routes": [{"distance": 150_400}]})
    )
    result = _resolve(road_resolver, "X", "Y", use_road=True)
    assert (result.distance_km, result.source) == (150, "external-routing")


@respx.mock(assert_all_called=False)
def test_catalog_still_wins_over_road(road_resolver):
    route = respx.get(url__startswith=ROUTER).mock(
        return_value=httpx.Response(200, json={"routes": [{"distance": 150_400}]})
    )
    result = _resolve(road_resolver, "A", "B", use_road=True)
    assert result.source == "catalog"
    assert route.call_count == 0


@respx.mock(assert_all_called=False)
def test_road_skipped_without_opt_in(road_resolver):
    route = respx.get(url__startswith=ROUTER).mock(
        return_value=httpx.Response(200, json={"routes": [{"distance": 150_400}]})
    )
    result = _resolve(road_resolver, "X", "Y", use_road=False)
    assert result.source == "coordinate-estimate"
    assert route.call_count == 0


def test_road_skipped_when_routing_disabled(offline_resolver):
    # respx is not active: a real request here would fail the test
    result = _resolve(offline_resolver, "X", "Y", use_road=True)
    assert result.source == "coordinate-estimate"


@respx.mock
def test_road_failure_falls_back_to_estimate(road_resolver):
    respx.get(url__startswith=ROUTER).mock(return_value=httpx.Response(503))
    result = _resolve(road_resolver, "X", "Y", use_road=True)
    assert (result.distance_km, result.source) == (111, "coordinate-estimate")


@respx.mock(assert_all_called=False)
def test_road_needs_known_coordinates(road_resolver):
    route = respx.get(url__startswith=ROUTER).mock(
        return_value=httpx.Response(200, json={"routes": [{"distance": 1}]})
    )
    result = _resolve(road_resolver, "X", "Atlantis", use_road=True)
    assert not result.found
    assert route.call_count == 0
