"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
import re
from dataclasses import dataclass
from typing import Optional

from domain.constants import App


_COORDINATES_RE = re.compile(App.COORDINATES_PATTERN)


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Parse do texto "lat, lon" digitado pelo usuário
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not (-90 <= self.latitude <= 90):
            raise ValueError(
                f"Latitude inválida: {self.latitude}. "
                f"Deve estar entre -90 e 90 graus."
            )
        if not (-180 <= self.longitude <= 180):
            raise ValueError(
                f"Longitude inválida: {self.longitude}. "
                f"Deve estar entre -180 e 180 graus."
            )

    @classmethod
    def parse(cls, text: str) -> Optional['Coordinates']:
        """
        Interpreta "lat, lon" (ex: "-22.75, -49.94")

        Returns:
            Coordinates ou None se o texto não é um par de coordenadas
        """
        match = _COORDINATES_RE.match(text.strip())
        if not match:
            return None
        return cls(latitude=float(match.group(1)), longitude=float(match.group(2)))

    def to_label(self) -> str:
        """Nome de fallback quando o reverse geocoding não encontra endereço"""
        return f"{self.latitude}, {self.longitude}"
