"""
Value Object: Resumo derivado do payload de clima salvo em um registro
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from domain.exceptions import InvalidRequestException


@dataclass(frozen=True)
class WeatherPayloadSummary:
    """
    Colunas derivadas no momento da escrita a partir do payload opaco

    temperature_min/max: extremos de temp_min/temp_max dos dias do forecast
    description: descrição das condições atuais
    weather_data: payload serializado como texto JSON
    """
    temperature_min: Optional[float]
    temperature_max: Optional[float]
    description: Optional[str]
    weather_data: str

    @classmethod
    def from_payload(cls, payload: Union[str, Dict[str, Any]]) -> "WeatherPayloadSummary":
        """
        Args:
            payload: Dict do relatório (/api/weather) ou o mesmo em texto JSON

        Raises:
            InvalidRequestException: Se o texto não for JSON de um objeto
        """
        if isinstance(payload, str):
            try:
                data = json.loads(payload)
            except json.JSONDecodeError as e:
                raise InvalidRequestException(
                    "weatherData must be valid JSON",
                    details={"error": str(e)}
                ) from e
        else:
            data = payload

        if not isinstance(data, dict):
            raise InvalidRequestException(
                "weatherData must be a JSON object",
                details={"type": type(data).__name__}
            )

        forecast = data.get('forecast') or []
        temperature_min = None
        temperature_max = None
        if forecast:
            try:
                temperature_min = min(float(day['temp_min']) for day in forecast)
                temperature_max = max(float(day['temp_max']) for day in forecast)
            except (KeyError, TypeError, ValueError) as e:
                raise InvalidRequestException(
                    "weatherData.forecast entries need temp_min and temp_max",
                    details={"error": str(e)}
                ) from e

        current = data.get('current') or {}
        description = current.get('description') if isinstance(current, dict) else None

        return cls(
            temperature_min=temperature_min,
            temperature_max=temperature_max,
            description=description or None,
            weather_data=payload if isinstance(payload, str) else json.dumps(payload)
        )
