"""
Weather Report Entity - Entidade agregada devolvida pela rota /api/weather
Combina localização geocodificada, condições atuais e previsão diária
"""
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import List, Optional

from domain.entities.current_conditions import CurrentConditions
from domain.entities.daily_forecast import DailyForecastEntry


@dataclass
class WeatherReport:
    """
    Entidade Agregada do relatório de clima

    Mesmo formato para os modos "current" (forecast 5 dias)
    e "range" (histórico entre duas datas).
    """
    location: str
    latitude: float
    longitude: float
    current: Optional[CurrentConditions]
    forecast: List[DailyForecastEntry] = field(default_factory=list)

    def to_api_response(self, timezone: tzinfo) -> dict:
        """
        Converte para formato de resposta da API

        Args:
            timezone: Timezone de exibição das datas do forecast

        Returns:
            Dict consolidado (também é o payload salvo em weatherData)
        """
        return {
            'location': self.location,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'current': self.current.to_api_response() if self.current else None,
            'forecast': [entry.to_api_response(timezone) for entry in self.forecast]
        }
