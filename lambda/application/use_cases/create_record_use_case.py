"""
Async Use Case: Create Record
"""
from typing import Any, Dict
from ddtrace import tracer

from application.ports.output.record_repository_port import IRecordRepository
from domain.entities.weather_record import NewWeatherRecord, WeatherRecord
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class CreateRecordUseCase:
    """Salva o relatório de clima de uma localização como registro"""

    def __init__(self, record_repository: IRecordRepository):
        self.record_repository = record_repository

    @tracer.wrap(resource="use_case.create_record")
    async def execute(self, body: Dict[str, Any]) -> WeatherRecord:
        """
        Args:
            body: Corpo do POST (location, latitude, longitude, startDate,
                endDate, weatherData)

        Raises:
            InvalidRequestException: Campos obrigatórios ausentes
            InvalidDateTimeException: Datas inválidas
        """
        new_record = NewWeatherRecord.from_payload(body)
        record = await self.record_repository.create(new_record)

        logger.info("Record created", record_id=record.id, location=record.location)
        return record
