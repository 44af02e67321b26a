"""Request DTOs - Contratos de entrada para use cases"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from domain.constants import App
from domain.exceptions import InvalidRequestException, UnsupportedFormatError
from domain.services.record_exporter import ExportFormat
from shared.utils.datetime_parser import DateTimeParser
from shared.utils.validators import RecordIdsValidator


@dataclass(frozen=True)
class GetWeatherRequest:
    """Request para buscar clima de uma localização"""
    location: str
    mode: str = App.MODE_CURRENT
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def is_range(self) -> bool:
        return self.mode == App.MODE_RANGE

    @classmethod
    def from_query(cls, params: Dict[str, Any]) -> "GetWeatherRequest":
        """
        Monta o request a partir da query string de /api/weather

        Raises:
            InvalidRequestException: location ausente; modo inválido ou
                intervalo incompleto no modo range
            InvalidDateTimeException: datas inválidas ou fora de ordem
        """
        location = (params.get('location') or '').strip()
        if not location:
            raise InvalidRequestException("Location is required")

        mode = params.get('mode') or App.MODE_CURRENT
        start_value = params.get('startDate')
        end_value = params.get('endDate')

        if mode == App.MODE_CURRENT:
            return cls(location=location, mode=mode)

        if mode != App.MODE_RANGE or not start_value or not end_value:
            raise InvalidRequestException(
                "Invalid mode or missing date range for range data",
                details={"mode": mode, "startDate": start_value, "endDate": end_value}
            )

        start_date, end_date = DateTimeParser.parse_date_range(start_value, end_value)
        return cls(location=location, mode=mode, start_date=start_date, end_date=end_date)


@dataclass(frozen=True)
class ExportRecordsRequest:
    """Request de exportação (POST /api/records com action=export)"""
    record_ids: List[int]
    export_format: ExportFormat

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> "ExportRecordsRequest":
        """
        Raises:
            InvalidRequestException: recordIds não é lista não-vazia de ids
                ou format desconhecido
        """
        record_ids = RecordIdsValidator.validate(body.get('recordIds'))
        try:
            export_format = ExportFormat.parse(body.get('format'))
        except UnsupportedFormatError as e:
            raise InvalidRequestException("Invalid export format", details=e.details) from e
        return cls(record_ids=record_ids, export_format=export_format)

