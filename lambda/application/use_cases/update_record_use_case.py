"""
Async Use Case: Update Record
"""
from typing import Any, Dict
from ddtrace import tracer

from application.ports.output.record_repository_port import IRecordRepository
from domain.entities.weather_record import RecordUpdate, WeatherRecord
from domain.exceptions import InvalidRequestException
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class UpdateRecordUseCase:
    """Atualização parcial de um registro existente"""

    def __init__(self, record_repository: IRecordRepository):
        self.record_repository = record_repository

    @tracer.wrap(resource="use_case.update_record")
    async def execute(self, record_id: int, body: Dict[str, Any]) -> WeatherRecord:
        """
        Args:
            record_id: ID já validado
            body: Campos a atualizar; weatherData recalcula as colunas derivadas

        Raises:
            InvalidRequestException: Corpo vazio ou weatherData inválido
            RecordNotFoundException: Se o registro não existir
        """
        if not body:
            raise InvalidRequestException(
                "No update data provided",
                details={"id": record_id}
            )

        update = RecordUpdate.from_payload(body)
        logger.debug(
            "Prepared update data",
            record_id=record_id,
            fields=sorted(update.provided_fields())
        )

        record = await self.record_repository.update(record_id, update)

        logger.info("Record updated", record_id=record_id)
        return record
