"""Infrastructure Providers - OpenWeather (samples) e Google (geocoding)"""

from infrastructure.adapters.output.providers.openweather.openweather_provider import OpenWeatherProvider
from infrastructure.adapters.output.providers.google.google_geocoding_provider import GoogleGeocodingProvider

__all__ = ['OpenWeatherProvider', 'GoogleGeocodingProvider']
