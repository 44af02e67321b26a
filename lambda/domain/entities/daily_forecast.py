"""
Daily Forecast Entity - Entidade de domínio para previsão agregada por dia
Fonte: samples 3h (forecast 5 dias) ou horários (histórico) da OpenWeather
"""
from dataclasses import dataclass
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from domain.constants import Aggregation


@dataclass(frozen=True)
class DailyForecastEntry:
    """
    Entidade de Previsão Diária

    Um registro por data UTC presente no feed de entrada.
    Invariante: temp_min <= temp_max
    """
    date_key: str  # Formato YYYY-MM-DD (UTC)
    timestamp: int  # Timestamp representativo (primeiro sample do dia)
    temp_min: float  # Temperatura mínima (°C)
    temp_max: float  # Temperatura máxima (°C)
    description: str  # Condição predominante
    icon: str  # Ícone representativo (OpenWeather, ex: "01d")

    def display_date(self, timezone: tzinfo) -> str:
        """
        Data do timestamp representativo no timezone de exibição

        Pode divergir de date_key perto da meia-noite local.
        """
        local_dt = datetime.fromtimestamp(self.timestamp, tz=ZoneInfo("UTC")).astimezone(timezone)
        return local_dt.strftime(Aggregation.DATE_KEY_FORMAT)

    def to_api_response(self, timezone: tzinfo) -> dict:
        """
        Converte para formato de resposta da API

        Args:
            timezone: Timezone usado para a data exibida

        Returns:
            Dict com dados formatados para JSON
        """
        return {
            'dt': self.timestamp,
            'date': self.display_date(timezone),
            'temp_min': self.temp_min,
            'temp_max': self.temp_max,
            'description': self.description,
            'icon': self.icon
        }
