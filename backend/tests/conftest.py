# backend/tests/conftest.py
import os
import sys
import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# Tests never talk to a real routing provider unless they mock it
os.environ["ROUTING_ENABLED"] = "0"
os.environ.setdefault("DATA_DIR", os.path.join(BACKEND_DIR, "data"))

# Import app only after setting env
from main import app
from models.locations import Location, Route
from models.settings import AppConfig
from services.routing.catalog import RouteCatalog


@pytest.fixture(scope="session")
def client():
    # Use context manager so FastAPI lifespan (startup/shutdown) runs
    with TestClient(app) as c:
        yield c


@pytest.fixture
def config():
    return AppConfig()


@pytest.fixture
def routing_config():
    return AppConfig(
        routing={
            "enabled": True,
            "endpoint": "https://router.test/route/v1/driving/",
            "cache_ttl_ms": 60_000,
        }
    )


@pytest.fixture
def toy_catalog():
    """A/B are ~120 km apart by great circle but 100 km in the catalog."""
    return RouteCatalog(
        routes=[Route(origin="A", destination="B", distance_km=100)],
        cities={
            "A": Location(lat=0.0, lon=0.0),
            "B": Location(lat=0.0, lon=1.08),
            "X": Location(lat=0.0, lon=0.0),
            "Y": Location(lat=0.0, lon=1.0),
        },
    )
