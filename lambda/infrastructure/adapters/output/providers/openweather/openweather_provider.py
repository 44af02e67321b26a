"""OpenWeather Provider - forecast 5 dias / 3h e histórico horário"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp
from ddtrace import tracer
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log
)

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API
from domain.entities.weather_sample import WeatherSample
from domain.exceptions import WeatherProviderException
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.providers.openweather.mappers.openweather_data_mapper import (
    OpenWeatherDataMapper
)
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenWeatherProvider(IWeatherProvider):
    """
    Provider para OpenWeather (API 2.5)

    Características:
    - /forecast: 40 samples de 3h (5 dias)
    - /history/city: samples horários entre dois Unix timestamps
    - Retry com backoff em 429/503/timeout
    - 100% async com aiohttp
    """

    def __init__(
        self,
        session_manager: AiohttpSessionManager,
        api_key: Optional[str] = None
    ):
        """
        Args:
            session_manager: Dono da sessão aiohttp compartilhada
            api_key: OpenWeather API key (settings se None)
        """
        self.session_manager = session_manager
        self.api_key = api_key if api_key is not None else settings.OPENWEATHER_API_KEY
        self.base_url = API.OPENWEATHER_BASE_URL
        self.history_url = API.OPENWEATHER_HISTORY_URL

    @property
    def provider_name(self) -> str:
        return "OpenWeather"

    @tracer.wrap(resource="openweather.get_forecast_samples")
    async def get_forecast_samples(
        self,
        latitude: float,
        longitude: float
    ) -> List[WeatherSample]:
        url = f"{self.base_url}/forecast"
        params = {
            'lat': latitude,
            'lon': longitude,
            'units': API.UNITS_METRIC
        }

        data = await self._get_json(url, params, operation="forecast")
        samples = OpenWeatherDataMapper.map_samples(data)

        logger.debug("Forecast samples fetched", count=len(samples))
        return samples

    @tracer.wrap(resource="openweather.get_historical_samples")
    async def get_historical_samples(
        self,
        latitude: float,
        longitude: float,
        start_timestamp: int,
        end_timestamp: int
    ) -> List[WeatherSample]:
        url = f"{self.history_url}/history/city"
        params = {
            'lat': latitude,
            'lon': longitude,
            'type': 'hour',
            'start': start_timestamp,
            'end': end_timestamp,
            'units': API.UNITS_METRIC
        }

        data = await self._get_json(url, params, operation="history")
        samples = OpenWeatherDataMapper.map_samples(data)

        logger.debug(
            "Historical samples fetched",
            count=len(samples),
            start=start_timestamp,
            end=end_timestamp
        )
        return samples

    async def _get_json(
        self,
        url: str,
        params: Dict[str, Any],
        operation: str
    ) -> Dict[str, Any]:
        """
        GET com retry; erros HTTP/rede viram WeatherProviderException

        Raises:
            WeatherProviderException: API key ausente, status != 2xx, rede ou timeout
        """
        if not self.api_key:
            raise WeatherProviderException(
                "OPENWEATHER_API_KEY is not configured",
                details={"operation": operation}
            )

        session = await self.session_manager.get_session()
        query = dict(params, appid=self.api_key)

        # Retry apenas em rate limit (429), service unavailable (503) e timeout
        @retry(
            retry=retry_if_exception_type((aiohttp.ClientResponseError, asyncio.TimeoutError)),
            stop=stop_after_attempt(API.RETRY_ATTEMPTS),
            wait=wait_exponential(multiplier=1, min=1, max=4),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True
        )
        async def fetch_with_retry():
            async with session.get(url, params=query) as response:
                if response.status in API.RETRY_STATUS_CODES:
                    raise aiohttp.ClientResponseError(
                        request_info=response.request_info,
                        history=response.history,
                        status=response.status
                    )
                if response.status >= 400:
                    raise WeatherProviderException(
                        f"Failed to fetch {operation} data",
                        details={"operation": operation, "status": response.status}
                    )
                return await response.json()

        try:
            return await fetch_with_retry()
        except aiohttp.ClientResponseError as e:
            raise WeatherProviderException(
                f"Failed to fetch {operation} data",
                details={"operation": operation, "status": e.status}
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise WeatherProviderException(
                f"OpenWeather request failed: {str(e) or type(e).__name__}",
                details={"operation": operation}
            ) from e
