"""
Input Port: Interface para buscar o relatório de clima de uma localização
"""
from abc import ABC, abstractmethod

from application.dtos.requests import GetWeatherRequest
from domain.entities.weather_report import WeatherReport


class IGetLocationWeatherUseCase(ABC):
    """Interface para caso de uso de buscar clima de uma localização"""

    @abstractmethod
    async def execute(self, request: GetWeatherRequest) -> WeatherReport:
        """
        Busca dados climáticos de uma localização

        Args:
            request: Localização (nome ou "lat, lon"), modo e intervalo de datas

        Returns:
            WeatherReport: localização resolvida, condições atuais e dias agregados

        Raises:
            LocationNotFoundException: Se a localização não for encontrada
            InvalidRequestException: Modo inválido ou intervalo ausente
            WeatherDataNotFoundException: Se o provider não devolver samples
        """
        pass
