"""
DynamoDB Client Manager - cliente aioboto3 reaproveitado entre invocações
"""
import asyncio
import aioboto3
from botocore.config import Config

from shared.config import settings


class DynamoDBClientManager:
    """
    Dono do cliente DynamoDB async usado pelo repositório de registros

    - Cliente persiste dentro do mesmo event loop
    - Recria quando o loop muda (o loop anterior pode ter sido fechado)
    - Uma instância por container, criada pelo ServiceContainer

    Uso:
        manager = DynamoDBClientManager(region_name="us-east-1")
        client = await manager.get_client()
        response = await client.get_item(...)
    """

    def __init__(
        self,
        region_name: str = None,
        max_pool_connections: int = 50,
        connect_timeout: int = 3,
        read_timeout: int = 3
    ):
        self.region_name = region_name or settings.AWS_REGION
        self.session = aioboto3.Session()
        self.boto_config = Config(
            region_name=self.region_name,
            max_pool_connections=max_pool_connections,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={'max_attempts': 2, 'mode': 'adaptive'}
        )

        self._client = None
        self._client_loop_id = None
        self._client_context_manager = None

    async def get_client(self):
        """
        Retorna o cliente do event loop atual (cria se preciso)

        Raises:
            RuntimeError: Fora de event loop ou falha ao criar o cliente
        """
        try:
            current_loop_id = id(asyncio.get_running_loop())
        except RuntimeError:
            raise RuntimeError("No running event loop found")

        if self._client is not None and self._client_loop_id == current_loop_id:
            return self._client

        if self._client is not None:
            await self._close_client()

        try:
            self._client_context_manager = self.session.client(
                'dynamodb',
                region_name=self.region_name,
                config=self.boto_config
            )
            self._client = await self._client_context_manager.__aenter__()
            self._client_loop_id = current_loop_id
        except Exception as e:
            self._client = None
            self._client_loop_id = None
            self._client_context_manager = None
            raise RuntimeError(f"Failed to create DynamoDB client: {str(e)}") from e

        return self._client

    async def _close_client(self) -> None:
        context_manager = self._client_context_manager
        self._client = None
        self._client_loop_id = None
        self._client_context_manager = None
        if context_manager is not None:
            await context_manager.__aexit__(None, None, None)

    async def cleanup(self) -> None:
        """Fecha o cliente e libera o pool de conexões"""
        await self._close_client()
