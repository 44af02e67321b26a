"""
Google Geocoding Provider
Resolve nomes de lugares em coordenadas e coordenadas em endereço formatado
"""
import asyncio
from typing import Any, Dict, Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.geocoding_provider_port import IGeocodingProvider
from domain.constants import API
from domain.exceptions import LocationNotFoundException, WeatherProviderException
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.geocoded_location import GeocodedLocation
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GoogleGeocodingProvider(IGeocodingProvider):
    """Provider para a Google Geocoding API (JSON)"""

    def __init__(
        self,
        session_manager: AiohttpSessionManager,
        api_key: Optional[str] = None
    ):
        self.session_manager = session_manager
        self.api_key = api_key if api_key is not None else settings.GOOGLE_MAPS_API_KEY
        self.base_url = API.GOOGLE_GEOCODING_URL

    @property
    def provider_name(self) -> str:
        return "Google"

    @tracer.wrap(resource="google.geocode")
    async def geocode(self, address: str) -> GeocodedLocation:
        """
        Raises:
            LocationNotFoundException: Sem resultados para o endereço
            WeatherProviderException: API key ausente ou falha HTTP
        """
        data = await self._get_json({'address': address})
        results = data.get('results') or []

        if not results:
            raise LocationNotFoundException(
                "Location not found",
                details={"location": address, "status": data.get('status')}
            )

        first = results[0]
        point = first['geometry']['location']
        location = GeocodedLocation(
            name=first.get('formatted_address') or address,
            coordinates=Coordinates(latitude=float(point['lat']), longitude=float(point['lng']))
        )

        logger.debug("Location geocoded", query=address, name=location.name)
        return location

    @tracer.wrap(resource="google.reverse_geocode")
    async def reverse_geocode(self, latitude: float, longitude: float) -> str:
        fallback = Coordinates(latitude=latitude, longitude=longitude).to_label()

        try:
            data = await self._get_json({'latlng': f"{latitude},{longitude}"})
        except WeatherProviderException as e:
            logger.warning(
                "Reverse geocoding failed, using coordinates as name",
                latitude=latitude,
                longitude=longitude,
                error=e.message
            )
            return fallback

        results = data.get('results') or []
        if not results or not results[0].get('formatted_address'):
            return fallback
        return results[0]['formatted_address']

    async def _get_json(self, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise WeatherProviderException("GOOGLE_MAPS_API_KEY is not configured")

        query = dict(params, key=self.api_key)
        try:
            session = await self.session_manager.get_session()
            async with session.get(self.base_url, params=query) as response:
                if response.status >= 400:
                    raise WeatherProviderException(
                        "Failed to geocode location",
                        details={"status": response.status}
                    )
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            raise WeatherProviderException(
                f"Geocoding request failed: {str(ex) or type(ex).__name__}"
            ) from ex

        if not isinstance(data, dict):
            raise WeatherProviderException("Unexpected geocoding response")
        return data
