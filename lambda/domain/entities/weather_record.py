"""
Weather Record Entity - registro de clima persistido pelo usuário
Inclui o struct de atualização parcial (RecordUpdate)
"""
import math
from dataclasses import dataclass, fields, replace
from datetime import date, datetime
from typing import Any, Dict, Optional

from domain.exceptions import InvalidRequestException
from domain.value_objects.weather_payload_summary import WeatherPayloadSummary
from shared.utils.datetime_parser import DateTimeParser


@dataclass(frozen=True)
class WeatherRecord:
    """
    Registro salvo: localização, intervalo de datas e o relatório de clima

    temperature_min/max e description são derivados de weather_data
    no momento da escrita (create/update).
    """
    id: int
    location: str
    latitude: float
    longitude: float
    start_date: date
    end_date: date
    temperature_min: Optional[float]
    temperature_max: Optional[float]
    description: Optional[str]
    weather_data: Optional[str]  # JSON opaco
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """
        Representação estrutural usada na API e no export JSON

        Returns:
            Dict com as chaves do modelo persistido
        """
        return {
            'id': self.id,
            'location': self.location,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'startDate': self.start_date.isoformat(),
            'endDate': self.end_date.isoformat(),
            'temperature_min': self.temperature_min,
            'temperature_max': self.temperature_max,
            'description': self.description,
            'weatherData': self.weather_data,
            'createdAt': self.created_at.isoformat(),
            'updatedAt': self.updated_at.isoformat()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherRecord":
        """Inverso de to_dict"""
        return cls(
            id=int(data['id']),
            location=data['location'],
            latitude=float(data['latitude']),
            longitude=float(data['longitude']),
            start_date=DateTimeParser.parse_date(data['startDate'], 'startDate'),
            end_date=DateTimeParser.parse_date(data['endDate'], 'endDate'),
            temperature_min=_optional_float(data.get('temperature_min')),
            temperature_max=_optional_float(data.get('temperature_max')),
            description=data.get('description'),
            weather_data=data.get('weatherData'),
            created_at=DateTimeParser.parse_timestamp(data['createdAt']),
            updated_at=DateTimeParser.parse_timestamp(data['updatedAt'])
        )


@dataclass(frozen=True)
class NewWeatherRecord:
    """Dados de um registro ainda sem id (corpo do POST /api/records)"""
    location: str
    latitude: float
    longitude: float
    start_date: date
    end_date: date
    temperature_min: Optional[float]
    temperature_max: Optional[float]
    description: Optional[str]
    weather_data: str

    def to_record(self, record_id: int, created_at: datetime) -> WeatherRecord:
        return WeatherRecord(
            id=record_id,
            location=self.location,
            latitude=self.latitude,
            longitude=self.longitude,
            start_date=self.start_date,
            end_date=self.end_date,
            temperature_min=self.temperature_min,
            temperature_max=self.temperature_max,
            description=self.description,
            weather_data=self.weather_data,
            created_at=created_at,
            updated_at=created_at
        )

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "NewWeatherRecord":
        """
        Monta o registro a partir do corpo do POST

        Colunas de temperatura e description são derivadas de weatherData,
        igual ao PUT.

        Raises:
            InvalidRequestException: location/weatherData ausentes ou coordenadas inválidas
            InvalidDateTimeException: startDate/endDate inválidos
        """
        if not data.get('location') or not data.get('weatherData'):
            raise InvalidRequestException(
                "Missing required fields",
                details={"required": ["location", "weatherData"]}
            )

        try:
            latitude = float(data.get('latitude'))
            longitude = float(data.get('longitude'))
        except (TypeError, ValueError) as e:
            raise InvalidRequestException(
                "latitude and longitude must be numeric",
                details={"latitude": data.get('latitude'), "longitude": data.get('longitude')}
            ) from e
        _require_finite_coordinates(latitude, longitude)

        summary = WeatherPayloadSummary.from_payload(data['weatherData'])

        return cls(
            location=data['location'],
            latitude=latitude,
            longitude=longitude,
            start_date=DateTimeParser.parse_date(data.get('startDate'), 'startDate'),
            end_date=DateTimeParser.parse_date(data.get('endDate'), 'endDate'),
            temperature_min=summary.temperature_min,
            temperature_max=summary.temperature_max,
            description=summary.description,
            weather_data=summary.weather_data
        )


@dataclass(frozen=True)
class RecordUpdate:
    """
    Atualização parcial explícita de um WeatherRecord

    Cada atributo atualizável é listado; None significa "não informado".
    """
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    temperature_min: Optional[float] = None
    temperature_max: Optional[float] = None
    description: Optional[str] = None
    weather_data: Optional[str] = None

    def provided_fields(self) -> Dict[str, Any]:
        """Atributos presentes nesta atualização (nome -> valor)"""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.provided_fields()

    def apply_to(self, record: WeatherRecord, updated_at: datetime) -> WeatherRecord:
        return replace(record, updated_at=updated_at, **self.provided_fields())

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "RecordUpdate":
        """
        Monta a atualização a partir do corpo do PUT

        Regras:
        - location só se não vazio
        - latitude/longitude apenas juntos; strings são convertidas para float
        - startDate/endDate só se não vazios
        - weatherData recalcula extremos, descrição e o JSON armazenado

        Raises:
            ValueError: Coordenadas não numéricas
            InvalidDateTimeException: Datas inválidas
            InvalidRequestException: weatherData inválido ou coordenadas nan/inf
        """
        values: Dict[str, Any] = {}

        if data.get('location'):
            values['location'] = data['location']

        if data.get('latitude') is not None and data.get('longitude') is not None:
            values['latitude'] = float(data['latitude'])
            values['longitude'] = float(data['longitude'])
            _require_finite_coordinates(values['latitude'], values['longitude'])

        if data.get('startDate'):
            values['start_date'] = DateTimeParser.parse_date(data['startDate'], 'startDate')
        if data.get('endDate'):
            values['end_date'] = DateTimeParser.parse_date(data['endDate'], 'endDate')

        if data.get('weatherData'):
            summary = WeatherPayloadSummary.from_payload(data['weatherData'])
            values['temperature_min'] = summary.temperature_min
            values['temperature_max'] = summary.temperature_max
            values['description'] = summary.description
            values['weather_data'] = summary.weather_data

        return cls(**values)


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _require_finite_coordinates(latitude: float, longitude: float) -> None:
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidRequestException(
            "latitude and longitude must be finite numbers",
            details={"latitude": str(latitude), "longitude": str(longitude)}
        )
