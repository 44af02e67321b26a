"""
Output Port: Geocoding Provider
Contrato para resolver nomes de lugares em coordenadas e vice-versa
"""
from abc import ABC, abstractmethod

from domain.value_objects.geocoded_location import GeocodedLocation


class IGeocodingProvider(ABC):
    """Interface para provedores de geocodificação"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: Google)"""
        raise NotImplementedError

    @abstractmethod
    async def geocode(self, address: str) -> GeocodedLocation:
        """
        Resolve um texto livre (cidade, CEP, endereço) para coordenadas

        Raises:
            LocationNotFoundException: Se não houver resultado
            WeatherProviderException: Se o provider falhar
        """
        raise NotImplementedError

    @abstractmethod
    async def reverse_geocode(self, latitude: float, longitude: float) -> str:
        """
        Devolve o endereço formatado das coordenadas

        Nunca falha: sem resultado ou com erro devolve "lat, lon".
        """
        raise NotImplementedError
