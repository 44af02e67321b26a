"""
Domain Services - Serviços de lógica de negócio pura (sem I/O)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/openweather/mappers/openweather_data_mapper.py
"""

from domain.services.daily_aggregator import DailyAggregator, HistoricalAggregation
from domain.services.record_exporter import ExportFormat, ExportResult, RecordExporter

__all__ = [
    'DailyAggregator',
    'HistoricalAggregation',
    'ExportFormat',
    'ExportResult',
    'RecordExporter'
]
