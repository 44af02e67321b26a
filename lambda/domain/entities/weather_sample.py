"""
Weather Sample - normalized view of one sub-daily OpenWeather item
Centralizes field mapping so the aggregator does not rely on raw JSON
structure from the provider (forecast 3h and hourly history share it).
"""
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Dict, List, Sequence, Union
from zoneinfo import ZoneInfo

from domain.exceptions import InvalidSampleError


@dataclass(frozen=True)
class WeatherSample:
    """
    One forecast/observation point.
    timestamp is Unix epoch seconds (UTC).
    """
    timestamp: int
    temperature: float
    temp_min: float
    temp_max: float
    description: str
    icon: str

    @property
    def utc_datetime(self) -> datetime:
        """Timezone-aware datetime in UTC."""
        return datetime.fromtimestamp(self.timestamp, tz=ZoneInfo("UTC"))

    def local_datetime(self, timezone: tzinfo) -> datetime:
        """Datetime rendered in the given display timezone."""
        return self.utc_datetime.astimezone(timezone)

    @classmethod
    def from_openweather(cls, payload: Dict[str, Any]) -> "WeatherSample":
        """
        Build a sample from an OpenWeather list item.

        Args:
            payload: Single item of the `list` array (forecast or history).

        Returns:
            WeatherSample with normalized fields.

        Raises:
            InvalidSampleError: If dt, main.temp or weather[0] are missing,
                or dt is outside the representable date range.
        """
        if not isinstance(payload, dict):
            raise InvalidSampleError(
                "Weather sample must be an object",
                details={"sample": repr(payload)}
            )

        main = payload.get('main')
        weather_list = payload.get('weather')
        if not isinstance(main, dict) or not isinstance(weather_list, list) or not weather_list:
            raise InvalidSampleError(
                "Weather sample is missing 'main' or 'weather'",
                details={"dt": payload.get('dt')}
            )

        try:
            weather_block = weather_list[0]
            if not isinstance(weather_block, dict):
                raise TypeError("weather[0] must be an object")
            timestamp = int(payload['dt'])
            datetime.fromtimestamp(timestamp, tz=ZoneInfo("UTC"))
            temperature = float(main['temp'])
            return cls(
                timestamp=timestamp,
                temperature=temperature,
                temp_min=float(main.get('temp_min', temperature)),
                temp_max=float(main.get('temp_max', temperature)),
                description=str(weather_block.get('description', '')),
                icon=str(weather_block.get('icon', ''))
            )
        except (KeyError, TypeError, ValueError, AttributeError, OverflowError, OSError) as e:
            raise InvalidSampleError(
                f"Malformed weather sample: {e}",
                details={"dt": payload.get('dt')}
            ) from e

    @staticmethod
    def from_list(
        samples: Sequence[Union["WeatherSample", Dict[str, Any]]]
    ) -> List["WeatherSample"]:
        """
        Normalize a list of mixed representations into WeatherSamples.
        A single malformed entry aborts the whole batch.
        """
        normalized: List[WeatherSample] = []
        for sample in samples or []:
            if isinstance(sample, WeatherSample):
                normalized.append(sample)
            else:
                normalized.append(WeatherSample.from_openweather(sample))
        return normalized
