"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.requests import (
    GetWeatherRequest,
    ExportRecordsRequest
)
from application.dtos.responses import ExportRecordsResponse

__all__ = [
    'GetWeatherRequest',
    'ExportRecordsRequest',
    'ExportRecordsResponse'
]
