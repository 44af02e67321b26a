"""
Output Port: Interface do Repositório de Registros de Clima
Define o contrato que deve ser implementado pela camada de infraestrutura
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from domain.entities.weather_record import NewWeatherRecord, RecordUpdate, WeatherRecord


class IRecordRepository(ABC):
    """Interface assíncrona para persistência de WeatherRecord"""

    @abstractmethod
    async def list_all(self) -> List[WeatherRecord]:
        """Retorna todos os registros, mais recentes primeiro"""
        pass

    @abstractmethod
    async def get_by_id(self, record_id: int) -> Optional[WeatherRecord]:
        """Busca registro por ID"""
        pass

    @abstractmethod
    async def get_many(self, record_ids: Sequence[int]) -> List[WeatherRecord]:
        """Busca vários registros; IDs inexistentes são ignorados"""
        pass

    @abstractmethod
    async def create(self, new_record: NewWeatherRecord) -> WeatherRecord:
        """Persiste um registro novo e devolve com id e timestamps"""
        pass

    @abstractmethod
    async def update(self, record_id: int, update: RecordUpdate) -> WeatherRecord:
        """
        Aplica atualização parcial

        Raises:
            RecordNotFoundException: Se o registro não existir
        """
        pass

    @abstractmethod
    async def delete(self, record_id: int) -> None:
        """
        Remove o registro

        Raises:
            RecordNotFoundException: Se o registro não existir
        """
        pass
