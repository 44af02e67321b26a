"""
Value Object: resultado de geocodificação (endereço formatado + coordenadas)
"""
from dataclasses import dataclass

from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class GeocodedLocation:
    """Localização resolvida pelo provider de geocoding"""
    name: str
    coordinates: Coordinates

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude
