"""
Testes Unitários - GoogleGeocodingProvider
"""
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from domain.exceptions import LocationNotFoundException, WeatherProviderException
from infrastructure.adapters.output.providers.google.google_geocoding_provider import (
    GoogleGeocodingProvider
)


class FakeResponse:

    def __init__(self, status=200, payload=None):
        self.status = status
        self.payload = payload

    async def json(self, **kwargs):
        return self.payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


GEOCODE_OK = {
    'status': 'OK',
    'results': [{
        'formatted_address': 'London, UK',
        'geometry': {'location': {'lat': 51.5072, 'lng': -0.1276}}
    }]
}


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def provider(session):
    session_manager = MagicMock()
    session_manager.get_session = AsyncMock(return_value=session)
    return GoogleGeocodingProvider(session_manager, api_key='maps-key')


class TestGeocode:

    @pytest.mark.asyncio
    async def test_first_result(self, provider, session):
        session.get.return_value = FakeResponse(payload=GEOCODE_OK)

        location = await provider.geocode('London')

        assert location.name == 'London, UK'
        assert (location.latitude, location.longitude) == (51.5072, -0.1276)
        assert session.get.call_args.kwargs['params'] == {'address': 'London', 'key': 'maps-key'}

    @pytest.mark.asyncio
    async def test_zero_results(self, provider, session):
        session.get.return_value = FakeResponse(payload={'status': 'ZERO_RESULTS', 'results': []})

        with pytest.raises(LocationNotFoundException, match="Location not found"):
            await provider.geocode('Atlantis')

    @pytest.mark.asyncio
    async def test_http_error(self, provider, session):
        session.get.return_value = FakeResponse(status=500)

        with pytest.raises(WeatherProviderException, match="Failed to geocode location"):
            await provider.geocode('London')

    @pytest.mark.asyncio
    async def test_network_error(self, provider, session):
        session.get.side_effect = aiohttp.ClientConnectionError()

        with pytest.raises(WeatherProviderException, match="Geocoding request failed"):
            await provider.geocode('London')

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        provider = GoogleGeocodingProvider(MagicMock(), api_key='')

        with pytest.raises(WeatherProviderException, match="GOOGLE_MAPS_API_KEY"):
            await provider.geocode('London')


class TestReverseGeocode:

    @pytest.mark.asyncio
    async def test_formatted_address(self, provider, session):
        session.get.return_value = FakeResponse(payload=GEOCODE_OK)

        name = await provider.reverse_geocode(51.5, -0.12)

        assert name == 'London, UK'
        assert session.get.call_args.kwargs['params']['latlng'] == '51.5,-0.12'

    @pytest.mark.asyncio
    async def test_no_results_falls_back_to_coordinates(self, provider, session):
        session.get.return_value = FakeResponse(payload={'status': 'ZERO_RESULTS', 'results': []})

        assert await provider.reverse_geocode(0.0, -150.25) == '0.0, -150.25'

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_coordinates(self, provider, session):
        session.get.return_value = FakeResponse(status=403)

        assert await provider.reverse_geocode(-23.55, -46.63) == '-23.55, -46.63'
