"""
Record Exporter - Serializa registros de clima em JSON, CSV ou XML

Limitações conhecidas:
- CSV: campos de texto são apenas envolvidos em aspas; aspas internas não são escapadas
- XML: escalares não recebem escape de entidades; weather_data vai em CDATA
- Números: os três formatos usam a mesma representação do float (10.0 -> "10.0"),
  igual ao json.dumps; None vira campo vazio em CSV/XML
"""
import json
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Union

from domain.constants import Export
from domain.entities.weather_record import WeatherRecord
from domain.exceptions import UnsupportedFormatError


class ExportFormat(str, Enum):
    """Formatos suportados (conjunto fechado)"""
    JSON = "json"
    CSV = "csv"
    XML = "xml"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @classmethod
    def parse(cls, value: Union["ExportFormat", str]) -> "ExportFormat":
        """
        Converte o token recebido na API (exato, sensível a maiúsculas)

        Raises:
            UnsupportedFormatError: Para qualquer valor fora do enum
        """
        if isinstance(value, ExportFormat):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedFormatError(
                f"Unsupported export format: {value}",
                details={"format": value, "supported": [f.value for f in cls]}
            )


_MIME_TYPES: Dict[ExportFormat, str] = {
    ExportFormat.JSON: Export.MIME_JSON,
    ExportFormat.CSV: Export.MIME_CSV,
    ExportFormat.XML: Export.MIME_XML,
}


@dataclass(frozen=True)
class ExportResult:
    """Documento exportado + MIME type para os headers de download"""
    content: str
    mime_type: str

    def encode(self) -> bytes:
        return self.content.encode('utf-8')


CSV_HEADERS = [
    'ID',
    'Location',
    'Latitude',
    'Longitude',
    'Start Date',
    'End Date',
    'Temperature Min',
    'Temperature Max',
    'Description',
    'Weather Data',
    'Created At',
    'Updated At',
]


class RecordExporter:
    """
    Exporta uma lista de WeatherRecord

    Não valida registros: confia no que a persistência entregou.
    """

    @staticmethod
    def export_records(
        records: Sequence[WeatherRecord],
        export_format: Union[ExportFormat, str]
    ) -> ExportResult:
        """
        Args:
            records: Registros a exportar (lista vazia é válida)
            export_format: ExportFormat ou token "json" / "csv" / "xml"

        Returns:
            ExportResult com conteúdo e MIME type

        Raises:
            UnsupportedFormatError: Formato desconhecido
        """
        fmt = ExportFormat.parse(export_format)
        serializer = _SERIALIZERS[fmt]
        return ExportResult(content=serializer(list(records)), mime_type=fmt.mime_type)

    @staticmethod
    def to_json(records: List[WeatherRecord]) -> str:
        return json.dumps(
            [record.to_dict() for record in records],
            indent=Export.JSON_INDENT,
            ensure_ascii=False
        )

    @staticmethod
    def to_csv(records: List[WeatherRecord]) -> str:
        rows = [
            [
                str(record.id),
                _quoted(record.location),
                _number(record.latitude),
                _number(record.longitude),
                _date(record.start_date),
                _date(record.end_date),
                _number(record.temperature_min),
                _number(record.temperature_max),
                _quoted(record.description),
                _quoted(record.weather_data),
                _timestamp(record.created_at),
                _timestamp(record.updated_at),
            ]
            for record in records
        ]
        return '\n'.join(','.join(row) for row in [CSV_HEADERS] + rows)

    @staticmethod
    def to_xml(records: List[WeatherRecord]) -> str:
        header = f"{Export.XML_PROLOGUE}\n<{Export.XML_ROOT}>\n"
        footer = f"</{Export.XML_ROOT}>"
        body = '\n'.join(_xml_record(record) for record in records)
        return header + body + '\n' + footer


def _xml_record(record: WeatherRecord) -> str:
    weather_data = f"<![CDATA[{record.weather_data}]]>" if record.weather_data else ''
    children = [
        ('id', str(record.id)),
        ('location', record.location),
        ('latitude', _number(record.latitude)),
        ('longitude', _number(record.longitude)),
        ('start_date', _date(record.start_date)),
        ('end_date', _date(record.end_date)),
        ('temperature_min', _number(record.temperature_min)),
        ('temperature_max', _number(record.temperature_max)),
        ('description', record.description or ''),
        ('weather_data', weather_data),
        ('created_at', _timestamp(record.created_at)),
        ('updated_at', _timestamp(record.updated_at)),
    ]
    lines = [f"    <{tag}>{value}</{tag}>" for tag, value in children]
    return f"\n  <{Export.XML_RECORD}>\n" + '\n'.join(lines) + f"\n  </{Export.XML_RECORD}>"


def _quoted(value: Optional[str]) -> str:
    return f'"{value or ""}"'


def _number(value: Optional[float]) -> str:
    if value is None:
        return ''
    return repr(float(value))


def _date(value: date) -> str:
    return value.strftime(Export.DATE_FORMAT)


def _timestamp(value: datetime) -> str:
    return value.strftime(Export.TIMESTAMP_FORMAT)


_SERIALIZERS: Dict[ExportFormat, Callable[[List[WeatherRecord]], str]] = {
    ExportFormat.JSON: RecordExporter.to_json,
    ExportFormat.CSV: RecordExporter.to_csv,
    ExportFormat.XML: RecordExporter.to_xml,
}
