"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .weather_provider_port import IWeatherProvider
from .geocoding_provider_port import IGeocodingProvider
from .record_repository_port import IRecordRepository
