"""
Async Use Case: Export Records
Busca os registros selecionados e serializa em JSON, CSV ou XML
"""
from datetime import datetime, timezone
from typing import Callable
from ddtrace import tracer

from application.dtos.requests import ExportRecordsRequest
from application.dtos.responses import ExportRecordsResponse
from application.ports.output.record_repository_port import IRecordRepository
from domain.constants import Export
from domain.exceptions import RecordNotFoundException
from domain.services.record_exporter import RecordExporter
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExportRecordsUseCase:
    """Exportação de registros para download"""

    def __init__(
        self,
        record_repository: IRecordRepository,
        exporter: RecordExporter,
        clock: Callable[[], datetime] = _utc_now
    ):
        self.record_repository = record_repository
        self.exporter = exporter
        self.clock = clock

    @tracer.wrap(resource="use_case.export_records")
    async def execute(self, request: ExportRecordsRequest) -> ExportRecordsResponse:
        """
        Returns:
            Conteúdo, nome do arquivo (weather_records_YYYY-MM-DD) e MIME type

        Raises:
            RecordNotFoundException: Se nenhum dos IDs existir
        """
        records = await self.record_repository.get_many(request.record_ids)
        logger.info(
            "Records found for export",
            requested=len(request.record_ids),
            found=len(records),
            format=request.export_format.value
        )

        if not records:
            raise RecordNotFoundException(
                "No records found",
                details={"recordIds": request.record_ids}
            )

        result = self.exporter.export_records(records, request.export_format)
        filename = Export.FILENAME_PREFIX + self.clock().strftime(Export.DATE_FORMAT)

        return ExportRecordsResponse(
            content=result.content,
            filename=filename,
            mime_type=result.mime_type
        )
