"""Sources de villes / services pour la génération SEO programmatique."""
import os
from typing import Optional, Protocol, Sequence, Tuple

DEFAULT_CITIES: Tuple[str, ...] = ("sydney", "melbourne", "brisbane")
DEFAULT_SERVICES: Tuple[str, ...] = ("house-cleaning", "end-of-lease")


class LocationSource(Protocol):
    def cities(self) -> Sequence[str]:
        ...

    def services(self) -> Sequence[str]:
        ...


def _split(raw: Optional[str]) -> Tuple[str, ...]:
    return tuple(p.strip() for p in (raw or "").split(",") if p.strip())


class StaticLocationSource:
    """Listes fixes ; l'ordre détermine l'ordre de création des slugs."""

    def __init__(self, cities: Sequence[str] = DEFAULT_CITIES, services: Sequence[str] = DEFAULT_SERVICES):
        self._cities = tuple(cities)
        self._services = tuple(services)

    @classmethod
    def from_env(cls) -> "StaticLocationSource":
        """SIMPLYMAID_CITIES / SIMPLYMAID_SERVICES (séparés par des virgules), défauts sinon."""
        cities = _split(os.getenv("SIMPLYMAID_CITIES")) or DEFAULT_CITIES
        services = _split(os.getenv("SIMPLYMAID_SERVICES")) or DEFAULT_SERVICES
        return cls(cities, services)

    def cities(self) -> Sequence[str]:
        return self._cities

    def services(self) -> Sequence[str]:
        return self._services
