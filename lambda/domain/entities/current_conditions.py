"""
Current Conditions - snapshot do primeiro sample de um feed
"""
from dataclasses import dataclass

from domain.entities.weather_sample import WeatherSample


@dataclass(frozen=True)
class CurrentConditions:
    """Condições "atuais" exibidas no topo do relatório"""
    temp: float
    temp_min: float
    temp_max: float
    description: str
    icon: str

    @classmethod
    def from_sample(cls, sample: WeatherSample) -> "CurrentConditions":
        # temp_min/temp_max aqui são os do próprio sample, não os do dia
        return cls(
            temp=sample.temperature,
            temp_min=sample.temp_min,
            temp_max=sample.temp_max,
            description=sample.description,
            icon=sample.icon
        )

    def to_api_response(self) -> dict:
        return {
            'temp': self.temp,
            'temp_min': self.temp_min,
            'temp_max': self.temp_max,
            'description': self.description,
            'icon': self.icon
        }
