"""Weather Provider Port - Interface para provedores de samples climáticos"""
from abc import ABC, abstractmethod
from typing import List

from domain.entities.weather_sample import WeatherSample


class IWeatherProvider(ABC):
    """
    Interface para provedores de dados meteorológicos sub-diários.
    Os samples devolvidos alimentam o DailyAggregator.
    """

    @abstractmethod
    async def get_forecast_samples(
        self,
        latitude: float,
        longitude: float
    ) -> List[WeatherSample]:
        """
        Busca o forecast de 5 dias em passos de 3h

        Returns:
            Samples na ordem devolvida pelo provider (o primeiro é o "atual")

        Raises:
            WeatherProviderException: Se o provider falhar
            InvalidSampleError: Se algum item vier malformado
        """
        pass

    @abstractmethod
    async def get_historical_samples(
        self,
        latitude: float,
        longitude: float,
        start_timestamp: int,
        end_timestamp: int
    ) -> List[WeatherSample]:
        """
        Busca samples horários entre dois instantes (Unix seconds)

        Raises:
            WeatherProviderException: Se o provider falhar
            InvalidSampleError: Se algum item vier malformado
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenWeather')"""
        pass
