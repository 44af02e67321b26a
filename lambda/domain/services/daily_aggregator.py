"""
Daily Aggregator - Agrega samples sub-diários (3h / horários) em um registro por dia
Lógica pura de domínio: sem I/O, sem estado compartilhado entre chamadas
"""
from collections import Counter
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Any, Dict, List, Optional, Sequence, Union
from zoneinfo import ZoneInfo

from domain.constants import Aggregation
from domain.entities.current_conditions import CurrentConditions
from domain.entities.daily_forecast import DailyForecastEntry
from domain.entities.weather_sample import WeatherSample
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

SampleInput = Sequence[Union[WeatherSample, Dict[str, Any]]]


@dataclass
class _DayGroup:
    """Acumulador mutável de um dia UTC (interno ao fold)"""
    date_key: str
    timestamp: int
    temp_min: float
    temp_max: float
    description: str
    icon: str
    conditions: Counter = field(default_factory=Counter)
    noon_icon_found: bool = False

    def to_entry(self) -> DailyForecastEntry:
        return DailyForecastEntry(
            date_key=self.date_key,
            timestamp=self.timestamp,
            temp_min=self.temp_min,
            temp_max=self.temp_max,
            description=self.description,
            icon=self.icon
        )


@dataclass(frozen=True)
class HistoricalAggregation:
    """Resultado do modo histórico: snapshot atual + dias agregados"""
    current: Optional[CurrentConditions]
    forecast: List[DailyForecastEntry]


class DailyAggregator:
    """
    Reduz um feed de samples em uma entrada por data UTC

    Regras por dia:
    - temp_min / temp_max: extremos de `temperature` (não de temp_min/temp_max do sample)
    - description: condição mais frequente; empate fica com a primeira vista no dia
    - icon: primeiro sample com hora local em [11, 13]; senão o do primeiro sample
    - timestamp: do primeiro sample agregado ao dia

    A ordem de entrada influencia description/icon em caso de empate,
    mas nunca os extremos de temperatura.
    """

    def __init__(self, display_timezone: Optional[tzinfo] = None):
        self.display_timezone = display_timezone or ZoneInfo(settings.APP_TIMEZONE)

    def aggregate_daily(self, samples: SampleInput) -> List[DailyForecastEntry]:
        """
        Agrega o forecast 5 dias / 3h

        Args:
            samples: Itens raw da OpenWeather ou WeatherSample, em qualquer ordem

        Returns:
            Entradas ordenadas por timestamp, sem datas locais repetidas

        Raises:
            InvalidSampleError: Se algum sample estiver malformado
        """
        groups = self._group_by_utc_date(samples, prefer_noon_icon=True)
        entries = self._sorted_entries(groups)
        return self._dedupe_by_display_date(entries)

    def aggregate_historical(self, samples: SampleInput) -> HistoricalAggregation:
        """
        Agrega o histórico horário entre duas datas

        Diferenças para aggregate_daily:
        - current = primeiro sample do feed raw
        - sem preferência pelo ícone do meio-dia
        - sem deduplicação por data local

        Raises:
            InvalidSampleError: Se algum sample estiver malformado
        """
        normalized = WeatherSample.from_list(samples)
        if not normalized:
            logger.debug("Histórico vazio, nada para agregar")
            return HistoricalAggregation(current=None, forecast=[])

        groups = self._group_by_utc_date(normalized, prefer_noon_icon=False)
        return HistoricalAggregation(
            current=CurrentConditions.from_sample(normalized[0]),
            forecast=self._sorted_entries(groups)
        )

    def _group_by_utc_date(
        self,
        samples: SampleInput,
        prefer_noon_icon: bool
    ) -> Dict[str, _DayGroup]:
        groups: Dict[str, _DayGroup] = {}

        for sample in WeatherSample.from_list(samples):
            date_key = sample.utc_datetime.strftime(Aggregation.DATE_KEY_FORMAT)
            group = groups.get(date_key)

            if group is None:
                group = _DayGroup(
                    date_key=date_key,
                    timestamp=sample.timestamp,
                    temp_min=sample.temperature,
                    temp_max=sample.temperature,
                    description=sample.description,
                    icon=sample.icon
                )
                groups[date_key] = group
            else:
                group.temp_min = min(group.temp_min, sample.temperature)
                group.temp_max = max(group.temp_max, sample.temperature)

            group.conditions[sample.description] += 1
            # max() devolve o primeiro máximo na ordem de inserção do Counter
            group.description = max(group.conditions, key=group.conditions.get)

            if prefer_noon_icon and not group.noon_icon_found and self._is_noon(sample):
                group.icon = sample.icon
                group.noon_icon_found = True

        if not groups:
            logger.debug("Nenhum sample para agregar")

        return groups

    def _is_noon(self, sample: WeatherSample) -> bool:
        hour = sample.local_datetime(self.display_timezone).hour
        return Aggregation.NOON_HOUR_START <= hour <= Aggregation.NOON_HOUR_END

    @staticmethod
    def _sorted_entries(groups: Dict[str, _DayGroup]) -> List[DailyForecastEntry]:
        # sorted() é estável: timestamps iguais mantêm a ordem de criação do grupo
        return [
            group.to_entry()
            for group in sorted(groups.values(), key=lambda g: g.timestamp)
        ]

    def _dedupe_by_display_date(
        self,
        entries: List[DailyForecastEntry]
    ) -> List[DailyForecastEntry]:
        """
        Remove entradas cuja data local repete a de uma entrada anterior

        O agrupamento usa a data UTC e esta checagem usa a data local, então
        perto da meia-noite local dois dias UTC distintos podem colapsar em um.
        """
        seen = set()
        unique: List[DailyForecastEntry] = []

        for entry in entries:
            display_date = entry.display_date(self.display_timezone)
            if display_date in seen:
                logger.info(
                    "Dia descartado por data local repetida",
                    date_key=entry.date_key,
                    display_date=display_date
                )
                continue
            seen.add(display_date)
            unique.append(entry)

        return unique
