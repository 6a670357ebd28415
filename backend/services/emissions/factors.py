# services/emissions/factors.py
from __future__ import annotations
from typing import Dict, List, Optional

from core.exceptions import InvalidModeError
from models.settings import AppConfig, TransportModeMeta


class ModeFactors:
    """
    Emission factors in grams CO2 per km, keyed by transport mode.
    Iteration order is the configuration order (used for stable tie-breaks).
    """

    def __init__(
        self,
        per_km_table: Dict[str, float],
        modes_meta: Optional[Dict[str, TransportModeMeta]] = None,
        default_mode: str = "car",
    ) -> None:
        self.per_km_table: Dict[str, float] = dict(per_km_table)
        self.modes_meta: Dict[str, TransportModeMeta] = dict(modes_meta or {})
        self.default_mode = default_mode

    @classmethod
    def from_config(cls, config: AppConfig) -> "ModeFactors":
        return cls(
            per_km_table=config.emission_factors,
            modes_meta=config.transport_modes,
            default_mode=config.defaults.transport,
        )

    def modes(self) -> List[str]:
        return list(self.per_km_table.keys())

    def has(self, mode: object) -> bool:
        return isinstance(mode, str) and mode in self.per_km_table

    def per_km(self, mode: object) -> float:
        if not self.has(mode):
            raise InvalidModeError(mode)
        return float(self.per_km_table[mode])  # type: ignore[index]

    def label(self, mode: str) -> str:
        meta = self.modes_meta.get(mode)
        return meta.label if meta and meta.label else mode

    def resolve(self, transport: Optional[str]) -> str:
        """
        Map a key or a display label to a mode key:
          exact key -> case-insensitive key -> label equality/containment
          -> configured default mode.
        The result may still lack a factor; per_km() reports that.
        """
        if transport and transport in self.per_km_table:
            return transport

        wanted = str(transport or "").strip().lower()
        if wanted:
            for k in self.per_km_table:
                if k.lower() == wanted:
                    return k
            # meta keys may name modes that have no factor; per_km() reports those
            for k, meta in self.modes_meta.items():
                if k.lower() == wanted:
                    return k
                label = (meta.label or "").lower()
                if label and (label == wanted or wanted in label or label in wanted):
                    return k

        return self.default_mode
