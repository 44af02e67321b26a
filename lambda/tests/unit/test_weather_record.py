"""
Testes Unitários - WeatherRecord, NewWeatherRecord, RecordUpdate e WeatherPayloadSummary
"""
import json
from datetime import date, datetime, timezone

import pytest

from domain.entities.weather_record import NewWeatherRecord, RecordUpdate, WeatherRecord
from domain.exceptions import InvalidDateTimeException, InvalidRequestException
from domain.value_objects.weather_payload_summary import WeatherPayloadSummary


class TestWeatherRecord:

    def test_to_dict_keys_and_formats(self, make_record):
        data = make_record().to_dict()

        assert data == {
            'id': 1,
            'location': 'London, UK',
            'latitude': 51.5,
            'longitude': -0.12,
            'startDate': '2025-01-10',
            'endDate': '2025-01-12',
            'temperature_min': 3.0,
            'temperature_max': 9.5,
            'description': 'light rain',
            'weatherData': '{"a":1}',
            'createdAt': '2025-01-10T12:00:00+00:00',
            'updatedAt': '2025-01-11T08:30:15+00:00'
        }

    def test_from_dict_inverts_to_dict(self, make_record):
        record = make_record()

        assert WeatherRecord.from_dict(record.to_dict()) == record

    def test_from_dict_accepts_zulu_timestamps(self, make_record):
        data = make_record().to_dict()
        data['createdAt'] = '2025-01-10T12:00:00.000Z'

        assert WeatherRecord.from_dict(data).created_at == datetime(2025, 1, 10, 12, tzinfo=timezone.utc)


class TestWeatherPayloadSummary:

    def test_derives_columns_from_dict(self, weather_payload):
        summary = WeatherPayloadSummary.from_payload(weather_payload)

        assert summary.temperature_min == 2.5
        assert summary.temperature_max == 11.0
        assert summary.description == 'overcast clouds'
        assert json.loads(summary.weather_data) == weather_payload

    def test_keeps_json_text_as_is(self, weather_payload):
        text = json.dumps(weather_payload, indent=4)

        summary = WeatherPayloadSummary.from_payload(text)

        assert summary.weather_data == text
        assert summary.temperature_min == 2.5

    def test_without_forecast_or_current(self):
        summary = WeatherPayloadSummary.from_payload({'location': 'Nowhere'})

        assert summary.temperature_min is None
        assert summary.temperature_max is None
        assert summary.description is None

    @pytest.mark.parametrize("payload", ['not json', '[1, 2]', '"text"'])
    def test_invalid_payload(self, payload):
        with pytest.raises(InvalidRequestException):
            WeatherPayloadSummary.from_payload(payload)

    def test_forecast_entry_without_temperatures(self):
        with pytest.raises(InvalidRequestException):
            WeatherPayloadSummary.from_payload({'forecast': [{'dt': 1}]})


class TestNewWeatherRecord:

    def test_from_payload(self, weather_payload):
        new_record = NewWeatherRecord.from_payload({
            'location': 'London, UK',
            'latitude': '51.5',
            'longitude': -0.12,
            'startDate': '2025-01-10',
            'endDate': '2025-01-12T00:00:00.000Z',
            'weatherData': weather_payload
        })

        assert new_record.latitude == 51.5
        assert new_record.start_date == date(2025, 1, 10)
        assert new_record.end_date == date(2025, 1, 12)
        assert new_record.temperature_min == 2.5
        assert new_record.temperature_max == 11.0
        assert new_record.description == 'overcast clouds'

    @pytest.mark.parametrize("missing", ['location', 'weatherData'])
    def test_missing_required_fields(self, missing, weather_payload):
        body = {
            'location': 'London',
            'latitude': 1,
            'longitude': 2,
            'startDate': '2025-01-10',
            'endDate': '2025-01-12',
            'weatherData': weather_payload
        }
        body[missing] = ''

        with pytest.raises(InvalidRequestException) as exc_info:
            NewWeatherRecord.from_payload(body)

        assert exc_info.value.message == "Missing required fields"

    def test_non_numeric_coordinates(self, weather_payload):
        with pytest.raises(InvalidRequestException):
            NewWeatherRecord.from_payload({
                'location': 'London', 'latitude': 'north', 'longitude': 2,
                'startDate': '2025-01-10', 'endDate': '2025-01-12',
                'weatherData': weather_payload
            })

    @pytest.mark.parametrize("latitude,longitude", [
        ('nan', 2), (1, 'inf'), (float('-inf'), 2),
    ])
    def test_non_finite_coordinates(self, latitude, longitude, weather_payload):
        with pytest.raises(InvalidRequestException, match="must be finite"):
            NewWeatherRecord.from_payload({
                'location': 'London', 'latitude': latitude, 'longitude': longitude,
                'startDate': '2025-01-10', 'endDate': '2025-01-12',
                'weatherData': weather_payload
            })

    def test_missing_dates(self, weather_payload):
        with pytest.raises(InvalidDateTimeException):
            NewWeatherRecord.from_payload({
                'location': 'London', 'latitude': 1, 'longitude': 2,
                'weatherData': weather_payload
            })

    def test_to_record_sets_both_timestamps(self, weather_payload):
        now = datetime(2025, 2, 1, tzinfo=timezone.utc)
        new_record = NewWeatherRecord.from_payload({
            'location': 'London', 'latitude': 1, 'longitude': 2,
            'startDate': '2025-01-10', 'endDate': '2025-01-12',
            'weatherData': weather_payload
        })

        record = new_record.to_record(7, now)

        assert record.id == 7
        assert record.created_at == record.updated_at == now


class TestRecordUpdate:

    def test_empty_body(self):
        update = RecordUpdate.from_payload({})

        assert update.is_empty()
        assert update.provided_fields() == {}

    def test_location_only_when_not_empty(self):
        assert RecordUpdate.from_payload({'location': ''}).is_empty()
        assert RecordUpdate.from_payload({'location': 'Rome'}).location == 'Rome'

    def test_coordinates_only_as_pair(self):
        assert RecordUpdate.from_payload({'latitude': 10}).is_empty()

        update = RecordUpdate.from_payload({'latitude': '10.5', 'longitude': '-20'})
        assert (update.latitude, update.longitude) == (10.5, -20.0)

    def test_zero_coordinates_are_kept(self):
        update = RecordUpdate.from_payload({'latitude': 0, 'longitude': 0})

        assert update.provided_fields() == {'latitude': 0.0, 'longitude': 0.0}

    def test_non_numeric_coordinates_raise_value_error(self):
        with pytest.raises(ValueError):
            RecordUpdate.from_payload({'latitude': 'abc', 'longitude': '1'})

    @pytest.mark.parametrize("latitude,longitude", [('nan', '1'), ('10', '-inf')])
    def test_non_finite_coordinates(self, latitude, longitude):
        with pytest.raises(InvalidRequestException, match="must be finite"):
            RecordUpdate.from_payload({'latitude': latitude, 'longitude': longitude})

    def test_dates(self):
        update = RecordUpdate.from_payload({'startDate': '2025-03-01', 'endDate': ''})

        assert update.start_date == date(2025, 3, 1)
        assert update.end_date is None

    def test_weather_data_recomputes_derived_columns(self, weather_payload):
        update = RecordUpdate.from_payload({'weatherData': weather_payload})

        assert update.temperature_min == 2.5
        assert update.temperature_max == 11.0
        assert update.description == 'overcast clouds'
        assert json.loads(update.weather_data) == weather_payload

    def test_apply_to_changes_only_provided_fields(self, make_record):
        record = make_record()
        now = datetime(2025, 2, 1, tzinfo=timezone.utc)

        updated = RecordUpdate(location='Rome').apply_to(record, now)

        assert updated.location == 'Rome'
        assert updated.latitude == record.latitude
        assert updated.weather_data == record.weather_data
        assert updated.created_at == record.created_at
        assert updated.updated_at == now
