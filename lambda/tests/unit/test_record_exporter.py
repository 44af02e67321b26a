"""
Testes Unitários - RecordExporter (JSON / CSV / XML)
"""
import json
from datetime import datetime, timezone

import pytest

from domain.entities.weather_record import WeatherRecord
from domain.exceptions import UnsupportedFormatError
from domain.services.record_exporter import CSV_HEADERS, ExportFormat, RecordExporter

CSV_HEADER_ROW = (
    'ID,Location,Latitude,Longitude,Start Date,End Date,Temperature Min,'
    'Temperature Max,Description,Weather Data,Created At,Updated At'
)
XML_PROLOGUE = '<?xml version="1.0" encoding="UTF-8"?>'


class TestExportFormat:

    @pytest.mark.parametrize("token,expected", [
        ('json', ExportFormat.JSON),
        ('csv', ExportFormat.CSV),
        ('xml', ExportFormat.XML),
        (ExportFormat.CSV, ExportFormat.CSV),
    ])
    def test_parse(self, token, expected):
        assert ExportFormat.parse(token) is expected

    @pytest.mark.parametrize("token", ['xyz', '', None, 'pdf', 'JSON', 'CSV', ' xml '])
    def test_parse_unknown_token(self, token):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            ExportFormat.parse(token)

        assert exc_info.value.details['supported'] == ['json', 'csv', 'xml']

    def test_every_format_has_mime_type_and_serializer(self):
        expected = {
            ExportFormat.JSON: 'application/json',
            ExportFormat.CSV: 'text/csv',
            ExportFormat.XML: 'application/xml',
        }
        for fmt in ExportFormat:
            result = RecordExporter.export_records([], fmt)
            assert fmt.mime_type == expected[fmt]
            assert result.mime_type == expected[fmt]


class TestJsonExport:

    def test_round_trip_reconstructs_records(self, make_record):
        records = [make_record(1), make_record(2, weather_data=None, description=None,
                                              temperature_min=None, temperature_max=None)]

        result = RecordExporter.export_records(records, 'json')
        parsed = [WeatherRecord.from_dict(item) for item in json.loads(result.content)]

        assert parsed == records
        assert result.mime_type == 'application/json'

    def test_indented_and_unicode_preserved(self, make_record):
        content = RecordExporter.to_json([make_record(location='São Paulo')])

        assert '\n  {' in content
        assert 'São Paulo' in content

    def test_empty_list(self):
        assert json.loads(RecordExporter.export_records([], ExportFormat.JSON).content) == []


class TestCsvExport:

    def test_empty_list_is_header_only(self):
        result = RecordExporter.export_records([], 'csv')

        assert result.content == CSV_HEADER_ROW
        assert result.mime_type == 'text/csv'
        assert ','.join(CSV_HEADERS) == CSV_HEADER_ROW

    def test_row_layout(self, make_record):
        content = RecordExporter.to_csv([make_record()])

        lines = content.split('\n')
        assert lines[0] == CSV_HEADER_ROW
        assert lines[1] == (
            '1,"London, UK",51.5,-0.12,2025-01-10,2025-01-12,3.0,9.5,'
            '"light rain","{"a":1}",2025-01-10 12:00:00,2025-01-11 08:30:15'
        )

    def test_missing_optional_fields_render_empty(self, make_record):
        content = RecordExporter.to_csv([
            make_record(temperature_min=None, temperature_max=None, description=None, weather_data=None)
        ])

        row = content.split('\n')[1]
        assert ',,,"","",' in row

    def test_one_row_per_record_in_input_order(self, make_record):
        content = RecordExporter.to_csv([make_record(3), make_record(1), make_record(2)])

        ids = [line.split(',')[0] for line in content.split('\n')[1:]]
        assert ids == ['3', '1', '2']

    def test_embedded_quotes_are_not_escaped(self, make_record):
        """Limitação conhecida: só há o wrap em aspas, sem escape interno"""
        content = RecordExporter.to_csv([make_record(location='The "Big" Apple')])

        assert '"The "Big" Apple"' in content


class TestXmlExport:

    def test_empty_list_has_only_root(self):
        result = RecordExporter.export_records([], 'xml')

        assert result.content == f'{XML_PROLOGUE}\n<weather_records>\n\n</weather_records>'
        assert result.mime_type == 'application/xml'

    def test_record_layout(self, make_record):
        content = RecordExporter.to_xml([make_record()])

        assert content.startswith(f'{XML_PROLOGUE}\n<weather_records>\n')
        assert content.endswith('</record>\n</weather_records>')
        expected_children = [
            '<id>1</id>',
            '<location>London, UK</location>',
            '<latitude>51.5</latitude>',
            '<longitude>-0.12</longitude>',
            '<start_date>2025-01-10</start_date>',
            '<end_date>2025-01-12</end_date>',
            '<temperature_min>3.0</temperature_min>',
            '<temperature_max>9.5</temperature_max>',
            '<description>light rain</description>',
            '<weather_data><![CDATA[{"a":1}]]></weather_data>',
            '<created_at>2025-01-10 12:00:00</created_at>',
            '<updated_at>2025-01-11 08:30:15</updated_at>',
        ]
        positions = [content.index(child) for child in expected_children]
        assert positions == sorted(positions)

    def test_absent_payload_is_empty_element(self, make_record):
        content = RecordExporter.to_xml([make_record(weather_data=None)])

        assert '<weather_data></weather_data>' in content

    def test_one_record_element_per_record(self, make_record):
        content = RecordExporter.to_xml([make_record(1), make_record(2)])

        assert content.count('<record>') == 2
        assert content.count('</record>') == 2


class TestExportProperties:

    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_idempotent(self, fmt, make_record):
        records = [make_record(1), make_record(2, location='Paris')]

        first = RecordExporter.export_records(records, fmt)
        second = RecordExporter.export_records(records, fmt)

        assert first.encode() == second.encode()

    def test_numbers_render_the_same_in_every_format(self, make_record):
        records = [make_record(location='London', latitude=10.0,
                               temperature_min=3.0, temperature_max=None)]

        as_json = RecordExporter.to_json(records)
        row = RecordExporter.to_csv(records).split('\n')[1].split(',')
        as_xml = RecordExporter.to_xml(records)

        assert '"latitude": 10.0' in as_json
        assert '"temperature_min": 3.0' in as_json
        assert (row[2], row[6], row[7]) == ('10.0', '3.0', '')
        assert '<latitude>10.0</latitude>' in as_xml
        assert '<temperature_min>3.0</temperature_min>' in as_xml
        assert '<temperature_max></temperature_max>' in as_xml

    def test_unknown_format_produces_nothing(self, make_record):
        with pytest.raises(UnsupportedFormatError):
            RecordExporter.export_records([make_record()], 'xyz')

    def test_timestamps_rendered_in_stored_timezone(self, make_record):
        record = make_record(created_at=datetime(2025, 3, 1, 23, 59, 59, tzinfo=timezone.utc))

        assert '2025-03-01 23:59:59' in RecordExporter.to_csv([record])
