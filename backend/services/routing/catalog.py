# services/routing/catalog.py
from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from models.locations import Location, Route


def _norm(name: str) -> str:
    return name.strip().lower()


class RouteCatalog:
    """
    Curated routes with known distances plus a city -> coordinate index.
    Static for the lifetime of the process.
    """

    def __init__(
        self,
        routes: Iterable[Route],
        cities: Optional[Dict[str, Location]] = None,
    ) -> None:
        self.routes: List[Route] = list(routes)
        self.cities: Dict[str, Location] = dict(cities or {})

        # first entry per normalized (origin, destination) wins
        self._index: Dict[tuple[str, str], Route] = {}
        for r in self.routes:
            self._index.setdefault((_norm(r.origin), _norm(r.destination)), r)

    def __len__(self) -> int:
        return len(self.routes)

    # ---------- Route lookup ----------
    def find_route(self, origin: str, destination: str) -> Optional[Route]:
        """Exact or reverse-direction match, case-insensitive and trimmed."""
        if not origin or not destination:
            return None
        o, d = _norm(origin), _norm(destination)
        return self._index.get((o, d)) or self._index.get((d, o))

    def find_distance(self, origin: str, destination: str) -> Optional[float]:
        route = self.find_route(origin, destination)
        return route.distance_km if route else None

    def unique_routes(self) -> List[Route]:
        return list(self._index.values())

    def distance_map(self) -> Dict[str, float]:
        return {f"{r.origin}|{r.destination}": r.distance_km for r in self.unique_routes()}

    def all_cities(self) -> List[str]:
        names = {n for r in self.unique_routes() for n in (r.origin, r.destination)}
        names.update(self.cities.keys())
        return sorted(names)

    # ---------- Coordinates ----------
    def find_city_coord(self, name: str) -> Optional[Location]:
        """
        Resolve a free-form name to coordinates. Passes, in priority order:
          exact key -> case-insensitive equality -> "name," prefix -> containment.
        """
        if not name or not name.strip():
            return None
        if name in self.cities:
            return self.cities[name]

        wanted = _norm(name)
        lowered = [(_norm(k), loc) for k, loc in self.cities.items()]
        passes = (
            lambda kl: kl == wanted,
            lambda kl: kl.startswith(wanted + ","),
            lambda kl: wanted in kl,
        )
        for matches in passes:
            for kl, loc in lowered:
                if matches(kl):
                    return loc
        return None
