# file_handler/catalog_loader.py
from __future__ import annotations
import csv
import json
import logging
from pathlib import Path
from typing import Dict, List

from pydantic import ValidationError

from core.exceptions import ConfigError
from models.locations import Location, Route

logger = logging.getLogger(__name__)


def _load_routes_csv(path: Path) -> List[Route]:
    routes: List[Route] = []
    with open(path, newline="", encoding="utf-8") as f:
        rdr = csv.DictReader(f)
        for i, row in enumerate(rdr, start=1):
            # tolerate distance_km or distanceKm headers
            dist = row.get("distance_km", row.get("distanceKm"))
            if not row.get("origin") or not row.get("destination") or dist is None:
                raise ConfigError(
                    f"{path}: row {i} needs origin, destination and distance_km"
                )
            routes.append(
                Route(
                    origin=row["origin"],
                    destination=row["destination"],
                    distance_km=float(dist),
                )
            )
    return routes


def load_routes(path: str | Path) -> List[Route]:
    """Read a route catalog from JSON (list or {"routes": [...]}) or CSV."""
    path = Path(path)
    try:
        if path.suffix.lower() == ".csv":
            return _load_routes_csv(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            data = data.get("routes", [])
        if not isinstance(data, list):
            raise ConfigError(f"{path}: expected a list of routes")
        return [Route.model_validate(item) for item in data]
    except (OSError, ValueError, ValidationError) as e:
        raise ConfigError(f"Could not load routes from {path}: {e}") from e


def load_cities(path: str | Path) -> Dict[str, Location]:
    """Read a {name: {lat, lon}} coordinate dataset. Insertion order is kept."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected an object of name -> {{lat, lon}}")
        return {str(name): Location.model_validate(c) for name, c in data.items()}
    except (OSError, ValueError, ValidationError) as e:
        raise ConfigError(f"Could not load cities from {path}: {e}") from e


def load_optional_cities(*paths: str | Path) -> Dict[str, Location]:
    """
    Merge several coordinate datasets; later files override earlier ones.
    Missing files are skipped (the full municipality dataset is optional).
    """
    merged: Dict[str, Location] = {}
    for p in paths:
        p = Path(p)
        if not p.exists():
            logger.debug("Coordinate dataset %s not found; skipping", p)
            continue
        merged.update(load_cities(p))
    return merged
