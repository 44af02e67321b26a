"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .get_location_weather_use_case import GetLocationWeatherUseCase
from .get_records_use_case import ListRecordsUseCase, GetRecordUseCase
from .create_record_use_case import CreateRecordUseCase
from .update_record_use_case import UpdateRecordUseCase
from .delete_record_use_case import DeleteRecordUseCase
from .export_records_use_case import ExportRecordsUseCase

__all__ = [
    'GetLocationWeatherUseCase',
    'ListRecordsUseCase',
    'GetRecordUseCase',
    'CreateRecordUseCase',
    'UpdateRecordUseCase',
    'DeleteRecordUseCase',
    'ExportRecordsUseCase'
]
