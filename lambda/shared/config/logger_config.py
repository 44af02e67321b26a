"""
Configuração centralizada de logging para a aplicação
Logger AWS Lambda Powertools (JSON estruturado) com service name do Datadog
"""
import os
from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = 'weather-records'


def get_logger(service_name: str = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Ordem do service name: argumento, POWERTOOLS_SERVICE_NAME, DD_SERVICE, padrão.
    O nível vem de POWERTOOLS_LOG_LEVEL (INFO se ausente).

    Args:
        service_name: Nome do serviço
        child: Se True, cria um child logger (compartilha handlers do pai)

    Returns:
        Logger configurado
    """
    if service_name is None:
        service_name = (
            os.environ.get('POWERTOOLS_SERVICE_NAME')
            or os.environ.get('DD_SERVICE')
            or DEFAULT_SERVICE_NAME
        )

    if child:
        return Logger(service=service_name, child=True)

    return Logger(
        service=service_name,
        level=os.environ.get('POWERTOOLS_LOG_LEVEL', 'INFO')
    )


# Logger principal da aplicação
logger = get_logger()
