"""
Async Use Case: Get Location Weather
Geocodifica a localização, busca samples no provider e agrega por dia
"""
from typing import List, Optional, Tuple
from ddtrace import tracer

from application.dtos.requests import GetWeatherRequest
from application.ports.input.get_location_weather_port import IGetLocationWeatherUseCase
from application.ports.output.geocoding_provider_port import IGeocodingProvider
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.entities.current_conditions import CurrentConditions
from domain.entities.daily_forecast import DailyForecastEntry
from domain.entities.weather_report import WeatherReport
from domain.exceptions import WeatherDataNotFoundException
from domain.services.daily_aggregator import DailyAggregator
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.geocoded_location import GeocodedLocation
from shared.config import settings
from shared.config.logger_config import get_logger
from shared.utils.datetime_parser import DateTimeParser

logger = get_logger(child=True)


class GetLocationWeatherUseCase(IGetLocationWeatherUseCase):
    """Async use case: relatório de clima (forecast ou histórico) de uma localização"""

    def __init__(
        self,
        weather_provider: IWeatherProvider,
        geocoding_provider: IGeocodingProvider,
        aggregator: DailyAggregator,
        forecast_days: int = None
    ):
        self.weather_provider = weather_provider
        self.geocoding_provider = geocoding_provider
        self.aggregator = aggregator
        self.forecast_days = forecast_days or settings.FORECAST_DAYS

    @tracer.wrap(resource="use_case.get_location_weather")
    async def execute(self, request: GetWeatherRequest) -> WeatherReport:
        """
        Execute use case asynchronously

        Args:
            request: GetWeatherRequest já validado

        Returns:
            WeatherReport com current e forecast diário

        Raises:
            LocationNotFoundException: Se a localização não for encontrada
            WeatherDataNotFoundException: Se o provider não devolver samples
            ValueError: Coordenadas fora do intervalo válido
        """
        location = await self._resolve_location(request.location)

        if request.is_range:
            current, forecast = await self._fetch_historical(location, request)
        else:
            current, forecast = await self._fetch_forecast(location)

        if current is None:
            raise WeatherDataNotFoundException(
                "No weather data available for location",
                details={"location": location.name, "mode": request.mode}
            )

        logger.info(
            "Weather fetched successfully",
            location=location.name,
            mode=request.mode,
            days=len(forecast),
            provider=self.weather_provider.provider_name
        )

        return WeatherReport(
            location=location.name,
            latitude=location.latitude,
            longitude=location.longitude,
            current=current,
            forecast=forecast
        )

    async def _resolve_location(self, text: str) -> GeocodedLocation:
        coordinates = Coordinates.parse(text)
        if coordinates is None:
            return await self.geocoding_provider.geocode(text)

        name = await self.geocoding_provider.reverse_geocode(
            coordinates.latitude,
            coordinates.longitude
        )
        return GeocodedLocation(name=name, coordinates=coordinates)

    async def _fetch_forecast(
        self,
        location: GeocodedLocation
    ) -> Tuple[Optional[CurrentConditions], List[DailyForecastEntry]]:
        samples = await self.weather_provider.get_forecast_samples(
            location.latitude,
            location.longitude
        )
        if not samples:
            return None, []

        daily = self.aggregator.aggregate_daily(samples)
        return CurrentConditions.from_sample(samples[0]), daily[:self.forecast_days]

    async def _fetch_historical(
        self,
        location: GeocodedLocation,
        request: GetWeatherRequest
    ) -> Tuple[Optional[CurrentConditions], List[DailyForecastEntry]]:
        start_timestamp, end_timestamp = DateTimeParser.to_unix_range(
            request.start_date,
            request.end_date
        )
        samples = await self.weather_provider.get_historical_samples(
            location.latitude,
            location.longitude,
            start_timestamp,
            end_timestamp
        )
        historical = self.aggregator.aggregate_historical(samples)
        return historical.current, historical.forecast
