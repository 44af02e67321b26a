"""
Async Use Case: Delete Record
"""
from ddtrace import tracer

from application.ports.output.record_repository_port import IRecordRepository
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class DeleteRecordUseCase:
    """Remove um registro"""

    def __init__(self, record_repository: IRecordRepository):
        self.record_repository = record_repository

    @tracer.wrap(resource="use_case.delete_record")
    async def execute(self, record_id: int) -> None:
        """
        Raises:
            RecordNotFoundException: Se o registro não existir
        """
        await self.record_repository.delete(record_id)
        logger.info("Record deleted", record_id=record_id)
