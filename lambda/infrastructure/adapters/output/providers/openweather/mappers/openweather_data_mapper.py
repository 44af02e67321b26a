"""
OpenWeather Data Mapper - Transforma respostas da API OpenWeather em WeatherSample
LOCALIZAÇÃO: infrastructure (conhece o formato externo)
"""
from typing import Any, Dict, List

from domain.entities.weather_sample import WeatherSample
from domain.exceptions import WeatherProviderException


class OpenWeatherDataMapper:
    """
    Traduz o envelope {"list": [...]} dos endpoints /forecast e /history/city

    Os itens da lista são validados por WeatherSample.from_openweather;
    um item malformado derruba a resposta inteira (InvalidSampleError).
    """

    @staticmethod
    def map_samples(data: Dict[str, Any]) -> List[WeatherSample]:
        """
        Args:
            data: JSON da resposta (forecast 5 dias / 3h ou histórico horário)

        Returns:
            Samples na ordem da resposta

        Raises:
            WeatherProviderException: Envelope sem "list"
            InvalidSampleError: Item sem main/weather/dt
        """
        if not isinstance(data, dict) or not isinstance(data.get('list'), list):
            raise WeatherProviderException(
                "Unexpected OpenWeather response",
                details={"keys": sorted(data) if isinstance(data, dict) else type(data).__name__}
            )
        return WeatherSample.from_list(data['list'])
