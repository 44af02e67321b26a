"""
Service Container - monta providers, repositório e use cases a partir do ambiente
Uma instância por processo Lambda; os testes substituem por fakes
"""
from zoneinfo import ZoneInfo

from application.use_cases import (
    CreateRecordUseCase,
    DeleteRecordUseCase,
    ExportRecordsUseCase,
    GetLocationWeatherUseCase,
    GetRecordUseCase,
    ListRecordsUseCase,
    UpdateRecordUseCase,
)
from application.ports.output.geocoding_provider_port import IGeocodingProvider
from application.ports.output.record_repository_port import IRecordRepository
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.services.daily_aggregator import DailyAggregator
from domain.services.record_exporter import RecordExporter
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.http.dynamodb_client_manager import DynamoDBClientManager
from infrastructure.adapters.output.providers.google import GoogleGeocodingProvider
from infrastructure.adapters.output.providers.openweather import OpenWeatherProvider
from infrastructure.adapters.output.repositories.dynamodb_record_repository import (
    DynamoDBRecordRepository
)
from shared.config import settings


class ServiceContainer:
    """Dependências explícitas das rotas"""

    def __init__(
        self,
        weather_provider: IWeatherProvider,
        geocoding_provider: IGeocodingProvider,
        record_repository: IRecordRepository,
        aggregator: DailyAggregator,
        exporter: RecordExporter
    ):
        self.weather_provider = weather_provider
        self.geocoding_provider = geocoding_provider
        self.record_repository = record_repository
        self.aggregator = aggregator
        self.exporter = exporter

    @classmethod
    def from_environment(cls) -> "ServiceContainer":
        """Wiring de produção (OpenWeather + Google + DynamoDB)"""
        session_manager = AiohttpSessionManager()
        return cls(
            weather_provider=OpenWeatherProvider(session_manager),
            geocoding_provider=GoogleGeocodingProvider(session_manager),
            record_repository=DynamoDBRecordRepository(
                DynamoDBClientManager(region_name=settings.AWS_REGION),
                table_name=settings.RECORDS_TABLE_NAME
            ),
            aggregator=DailyAggregator(ZoneInfo(settings.APP_TIMEZONE)),
            exporter=RecordExporter()
        )

    @property
    def display_timezone(self):
        return self.aggregator.display_timezone

    def get_location_weather(self) -> GetLocationWeatherUseCase:
        return GetLocationWeatherUseCase(
            weather_provider=self.weather_provider,
            geocoding_provider=self.geocoding_provider,
            aggregator=self.aggregator,
            forecast_days=settings.FORECAST_DAYS
        )

    def list_records(self) -> ListRecordsUseCase:
        return ListRecordsUseCase(self.record_repository)

    def get_record(self) -> GetRecordUseCase:
        return GetRecordUseCase(self.record_repository)

    def create_record(self) -> CreateRecordUseCase:
        return CreateRecordUseCase(self.record_repository)

    def update_record(self) -> UpdateRecordUseCase:
        return UpdateRecordUseCase(self.record_repository)

    def delete_record(self) -> DeleteRecordUseCase:
        return DeleteRecordUseCase(self.record_repository)

    def export_records(self) -> ExportRecordsUseCase:
        return ExportRecordsUseCase(self.record_repository, self.exporter)
