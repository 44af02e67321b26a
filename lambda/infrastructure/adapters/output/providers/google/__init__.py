"""Google Geocoding Provider Package"""

from infrastructure.adapters.output.providers.google.google_geocoding_provider import (
    GoogleGeocodingProvider
)

__all__ = ['GoogleGeocodingProvider']
