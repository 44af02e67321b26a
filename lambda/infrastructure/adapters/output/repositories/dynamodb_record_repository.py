"""
Async DynamoDB Record Repository - persistência de WeatherRecord com aioboto3

Estrutura do item (partition key numérica "id"):
{
    "id": {"N": "42"},
    "location": {"S": "São Paulo, SP, Brasil"},
    "latitude": {"N": "-23.55"},
    "startDate": {"S": "2025-01-10"},
    "temperature_min": {"N": "18.5"} | {"NULL": true},
    "weatherData": {"S": "{...}"},
    "createdAt": {"S": "2025-01-10T12:00:00+00:00"},
    ...
}

O item id=0 é reservado para o contador de ids (atributo lastId).
"""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from botocore.exceptions import ClientError
from ddtrace import tracer

from application.ports.output.record_repository_port import IRecordRepository
from domain.constants import Records
from domain.entities.weather_record import NewWeatherRecord, RecordUpdate, WeatherRecord
from domain.exceptions import RecordNotFoundException
from infrastructure.adapters.output.http.dynamodb_client_manager import DynamoDBClientManager
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

_NUMBER_FIELDS = {'latitude', 'longitude', 'temperature_min', 'temperature_max'}

# atributo de RecordUpdate -> atributo do item
_UPDATE_ATTRIBUTES = {
    'location': 'location',
    'latitude': 'latitude',
    'longitude': 'longitude',
    'start_date': 'startDate',
    'end_date': 'endDate',
    'temperature_min': 'temperature_min',
    'temperature_max': 'temperature_max',
    'description': 'description',
    'weather_data': 'weatherData',
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DynamoDBRecordRepository(IRecordRepository):
    """Repositório de registros sobre o cliente DynamoDB de baixo nível"""

    def __init__(
        self,
        client_manager: DynamoDBClientManager,
        table_name: Optional[str] = None,
        clock: Callable[[], datetime] = _utc_now
    ):
        self.client_manager = client_manager
        self.table_name = table_name or settings.RECORDS_TABLE_NAME
        self.clock = clock

    async def _get_client(self):
        return await self.client_manager.get_client()

    @tracer.wrap(resource="records_repository.list_all")
    async def list_all(self) -> List[WeatherRecord]:
        client = await self._get_client()
        records: List[WeatherRecord] = []
        scan_kwargs: Dict[str, Any] = {'TableName': self.table_name}

        while True:
            response = await client.scan(**scan_kwargs)
            for item in response.get('Items', []):
                if _is_counter(item):
                    continue
                records.append(_item_to_record(item))

            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                break
            scan_kwargs['ExclusiveStartKey'] = last_key

        records.sort(key=lambda record: record.created_at, reverse=True)
        return records

    @tracer.wrap(resource="records_repository.get_by_id")
    async def get_by_id(self, record_id: int) -> Optional[WeatherRecord]:
        client = await self._get_client()
        response = await client.get_item(
            TableName=self.table_name,
            Key=_key(record_id),
            ConsistentRead=True
        )
        item = response.get('Item')
        if not item or _is_counter(item):
            return None
        return _item_to_record(item)

    @tracer.wrap(resource="records_repository.get_many")
    async def get_many(self, record_ids: Sequence[int]) -> List[WeatherRecord]:
        """
        BatchGetItem em blocos de 100 chaves

        Returns:
            Registros encontrados, na ordem dos IDs pedidos (sem repetição)
        """
        unique_ids = [
            record_id for record_id in dict.fromkeys(int(i) for i in record_ids)
            if record_id != Records.COUNTER_ID
        ]
        if not unique_ids:
            return []

        client = await self._get_client()
        found: Dict[int, WeatherRecord] = {}

        for start in range(0, len(unique_ids), Records.BATCH_GET_SIZE):
            batch = unique_ids[start:start + Records.BATCH_GET_SIZE]
            request_items = {self.table_name: {'Keys': [_key(i) for i in batch]}}

            while request_items:
                response = await client.batch_get_item(RequestItems=request_items)
                for item in response.get('Responses', {}).get(self.table_name, []):
                    record = _item_to_record(item)
                    found[record.id] = record
                request_items = response.get('UnprocessedKeys') or {}

        return [found[record_id] for record_id in unique_ids if record_id in found]

    @tracer.wrap(resource="records_repository.create")
    async def create(self, new_record: NewWeatherRecord) -> WeatherRecord:
        client = await self._get_client()
        record_id = await self._next_id(client)
        record = new_record.to_record(record_id, self.clock())

        await client.put_item(
            TableName=self.table_name,
            Item=_record_to_item(record),
            ConditionExpression='attribute_not_exists(id)'
        )
        logger.debug("Record item written", record_id=record_id)
        return record

    @tracer.wrap(resource="records_repository.update")
    async def update(self, record_id: int, update: RecordUpdate) -> WeatherRecord:
        """
        UpdateItem condicional (o item precisa existir)

        Raises:
            RecordNotFoundException: Se o registro não existir
        """
        names = {'#updatedAt': 'updatedAt'}
        values = {':updatedAt': {'S': self.clock().isoformat()}}
        assignments = ['#updatedAt = :updatedAt']

        for index, (field_name, value) in enumerate(sorted(update.provided_fields().items())):
            attribute = _UPDATE_ATTRIBUTES[field_name]
            names[f'#f{index}'] = attribute
            values[f':v{index}'] = _to_attribute(attribute, value)
            assignments.append(f'#f{index} = :v{index}')

        client = await self._get_client()
        try:
            response = await client.update_item(
                TableName=self.table_name,
                Key=_key(record_id),
                UpdateExpression='SET ' + ', '.join(assignments),
                ConditionExpression='attribute_exists(id)',
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues='ALL_NEW'
            )
        except ClientError as e:
            if _is_conditional_failure(e):
                raise RecordNotFoundException(
                    "Record not found",
                    details={"id": record_id}
                ) from e
            raise

        return _item_to_record(response['Attributes'])

    @tracer.wrap(resource="records_repository.delete")
    async def delete(self, record_id: int) -> None:
        """
        Raises:
            RecordNotFoundException: Se o registro não existir
        """
        client = await self._get_client()
        try:
            await client.delete_item(
                TableName=self.table_name,
                Key=_key(record_id),
                ConditionExpression='attribute_exists(id)'
            )
        except ClientError as e:
            if _is_conditional_failure(e):
                raise RecordNotFoundException(
                    "Record not found",
                    details={"id": record_id}
                ) from e
            raise

    async def _next_id(self, client) -> int:
        """Incremento atômico do contador (item id=0)"""
        response = await client.update_item(
            TableName=self.table_name,
            Key=_key(Records.COUNTER_ID),
            UpdateExpression='ADD #lastId :one',
            ExpressionAttributeNames={'#lastId': Records.COUNTER_ATTRIBUTE},
            ExpressionAttributeValues={':one': {'N': '1'}},
            ReturnValues='UPDATED_NEW'
        )
        return int(response['Attributes'][Records.COUNTER_ATTRIBUTE]['N'])


def _key(record_id: int) -> Dict[str, Any]:
    return {'id': {'N': str(record_id)}}


def _is_counter(item: Dict[str, Any]) -> bool:
    return int(item['id']['N']) == Records.COUNTER_ID


def _is_conditional_failure(error: ClientError) -> bool:
    return error.response.get('Error', {}).get('Code') == 'ConditionalCheckFailedException'


def _to_attribute(name: str, value: Any) -> Dict[str, Any]:
    if value is None:
        return {'NULL': True}
    if name in _NUMBER_FIELDS:
        return {'N': repr(float(value))}
    if hasattr(value, 'isoformat'):
        return {'S': value.isoformat()}
    return {'S': str(value)}


def _from_attribute(attribute: Optional[Dict[str, Any]]) -> Any:
    if attribute is None or attribute.get('NULL'):
        return None
    if 'N' in attribute:
        return float(attribute['N'])
    return attribute.get('S')


def _record_to_item(record: WeatherRecord) -> Dict[str, Any]:
    item = {
        name: _to_attribute(name, value)
        for name, value in record.to_dict().items()
        if name != 'id'
    }
    item['id'] = _key(record.id)['id']
    return item


def _item_to_record(item: Dict[str, Any]) -> WeatherRecord:
    data = {name: _from_attribute(attribute) for name, attribute in item.items()}
    data['id'] = int(item['id']['N'])
    return WeatherRecord.from_dict(data)
