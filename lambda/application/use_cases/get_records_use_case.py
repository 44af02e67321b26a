"""
Async Use Cases: listar registros e buscar um registro por ID
"""
from typing import List
from ddtrace import tracer

from application.ports.output.record_repository_port import IRecordRepository
from domain.entities.weather_record import WeatherRecord
from domain.exceptions import RecordNotFoundException
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class ListRecordsUseCase:
    """Todos os registros, mais recentes primeiro"""

    def __init__(self, record_repository: IRecordRepository):
        self.record_repository = record_repository

    @tracer.wrap(resource="use_case.list_records")
    async def execute(self) -> List[WeatherRecord]:
        records = await self.record_repository.list_all()
        logger.info("Records listed", count=len(records))
        return records


class GetRecordUseCase:
    """Um registro por ID"""

    def __init__(self, record_repository: IRecordRepository):
        self.record_repository = record_repository

    @tracer.wrap(resource="use_case.get_record")
    async def execute(self, record_id: int) -> WeatherRecord:
        """
        Raises:
            RecordNotFoundException: Se o registro não existir
        """
        record = await self.record_repository.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundException(
                "Record not found",
                details={"id": record_id}
            )
        return record
