"""
Configurações e fixtures compartilhadas para testes unitários
"""
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence

import pytest

from application.ports.output.record_repository_port import IRecordRepository
from domain.entities.weather_record import NewWeatherRecord, RecordUpdate, WeatherRecord
from domain.entities.weather_sample import WeatherSample
from domain.exceptions import RecordNotFoundException


def utc_ts(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> int:
    """Unix seconds de um instante UTC"""
    return int(datetime(year, month, day, hour, minute, tzinfo=timezone.utc).timestamp())


@pytest.fixture
def make_raw_sample():
    """
    Factory fixture para itens do array `list` da OpenWeather

    Usage:
        def test_something(make_raw_sample):
            item = make_raw_sample(dt=utc_ts(2025, 1, 10, 12), temp=15)
    """
    def _make(
        dt: int = None,
        temp: float = 20.0,
        description: str = 'clear sky',
        icon: str = '01d',
        temp_min: Optional[float] = None,
        temp_max: Optional[float] = None
    ) -> dict:
        return {
            'dt': dt if dt is not None else utc_ts(2025, 1, 10, 12),
            'main': {
                'temp': temp,
                'temp_min': temp if temp_min is None else temp_min,
                'temp_max': temp if temp_max is None else temp_max
            },
            'weather': [{'description': description, 'icon': icon}]
        }

    return _make


@pytest.fixture
def make_sample():
    """Factory fixture para WeatherSample"""
    def _make(
        timestamp: int = None,
        temperature: float = 20.0,
        description: str = 'clear sky',
        icon: str = '01d'
    ) -> WeatherSample:
        return WeatherSample(
            timestamp=timestamp if timestamp is not None else utc_ts(2025, 1, 10, 12),
            temperature=temperature,
            temp_min=temperature - 1,
            temp_max=temperature + 1,
            description=description,
            icon=icon
        )

    return _make


@pytest.fixture
def make_record():
    """Factory fixture para WeatherRecord com valores padrão"""
    def _make(record_id: int = 1, **overrides) -> WeatherRecord:
        record = WeatherRecord(
            id=record_id,
            location='London, UK',
            latitude=51.5,
            longitude=-0.12,
            start_date=date(2025, 1, 10),
            end_date=date(2025, 1, 12),
            temperature_min=3.0,
            temperature_max=9.5,
            description='light rain',
            weather_data='{"a":1}',
            created_at=datetime(2025, 1, 10, 12, 0, 0, tzinfo=timezone.utc),
            updated_at=datetime(2025, 1, 11, 8, 30, 15, tzinfo=timezone.utc)
        )
        return replace(record, **overrides)

    return _make


@pytest.fixture
def weather_payload():
    """Relatório no formato devolvido por GET /api/weather"""
    return {
        'location': 'London, UK',
        'latitude': 51.5,
        'longitude': -0.12,
        'current': {
            'temp': 7.0,
            'temp_min': 6.0,
            'temp_max': 8.0,
            'description': 'overcast clouds',
            'icon': '04d'
        },
        'forecast': [
            {'dt': 1, 'date': '2025-01-10', 'temp_min': 4.0, 'temp_max': 9.0, 'description': 'rain', 'icon': '10d'},
            {'dt': 2, 'date': '2025-01-11', 'temp_min': 2.5, 'temp_max': 11.0, 'description': 'clear', 'icon': '01d'}
        ]
    }


class InMemoryRecordRepository(IRecordRepository):
    """Repositório fake: mesmo contrato do DynamoDB, sem I/O"""

    def __init__(self, records: Sequence[WeatherRecord] = ()):
        self.records = {record.id: record for record in records}
        self.last_id = max(self.records, default=0)
        self.now = datetime(2025, 2, 1, 10, 0, 0, tzinfo=timezone.utc)

    async def list_all(self) -> List[WeatherRecord]:
        return sorted(self.records.values(), key=lambda r: r.created_at, reverse=True)

    async def get_by_id(self, record_id: int) -> Optional[WeatherRecord]:
        return self.records.get(record_id)

    async def get_many(self, record_ids: Sequence[int]) -> List[WeatherRecord]:
        return [self.records[i] for i in dict.fromkeys(record_ids) if i in self.records]

    async def create(self, new_record: NewWeatherRecord) -> WeatherRecord:
        self.last_id += 1
        record = new_record.to_record(self.last_id, self.now)
        self.records[record.id] = record
        return record

    async def update(self, record_id: int, update: RecordUpdate) -> WeatherRecord:
        if record_id not in self.records:
            raise RecordNotFoundException("Record not found", details={"id": record_id})
        record = update.apply_to(self.records[record_id], self.now)
        self.records[record_id] = record
        return record

    async def delete(self, record_id: int) -> None:
        if self.records.pop(record_id, None) is None:
            raise RecordNotFoundException("Record not found", details={"id": record_id})


@pytest.fixture
def record_repository(make_record):
    """Repositório em memória com dois registros (ids 1 e 2)"""
    return InMemoryRecordRepository([
        make_record(1),
        make_record(
            2,
            location='Paris, France',
            created_at=datetime(2025, 1, 15, 9, 0, 0, tzinfo=timezone.utc),
            updated_at=datetime(2025, 1, 15, 9, 0, 0, tzinfo=timezone.utc)
        )
    ])
