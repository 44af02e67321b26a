"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import json
import asyncio
from typing import Any, Dict
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig, Response
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - DTOs
from application.dtos.requests import ExportRecordsRequest, GetWeatherRequest

# Domain Layer - Exceptions
from domain.exceptions import (
    InvalidSampleError,
    UnsupportedFormatError,
    InvalidRequestException,
    InvalidDateTimeException,
    LocationNotFoundException,
    RecordNotFoundException,
    WeatherDataNotFoundException,
    WeatherProviderException,
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.input.service_container import ServiceContainer

# Shared Layer - Utilities
from shared.config import settings
from shared.config.logger_config import get_logger
from shared.utils.validators import RecordIdValidator

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=settings.CORS_ORIGIN))

# Dependências de produção (substituídas nos testes)
container = ServiceContainer.from_environment()

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService(logger)

app.exception_handler(InvalidRequestException)(exception_service.handle_invalid_request)
app.exception_handler(InvalidDateTimeException)(exception_service.handle_invalid_datetime)
app.exception_handler(UnsupportedFormatError)(exception_service.handle_unsupported_format)
app.exception_handler(LocationNotFoundException)(exception_service.handle_location_not_found)
app.exception_handler(RecordNotFoundException)(exception_service.handle_record_not_found)
app.exception_handler(WeatherDataNotFoundException)(exception_service.handle_weather_data_not_found)
app.exception_handler(InvalidSampleError)(exception_service.handle_invalid_sample)
app.exception_handler(WeatherProviderException)(exception_service.handle_provider_error)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.not_found(exception_service.handle_route_not_found)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


def _query_params() -> Dict[str, Any]:
    return app.current_event.query_string_parameters or {}


def _request_body() -> Dict[str, Any]:
    """Corpo JSON da requisição ({} quando vazio)"""
    if not app.current_event.body:
        return {}
    try:
        body = json.loads(app.current_event.decoded_body)
    except json.JSONDecodeError as e:
        raise InvalidRequestException(
            "Request body must be valid JSON",
            details={"error": str(e)}
        ) from e
    if not isinstance(body, dict):
        raise InvalidRequestException("Request body must be a JSON object")
    return body


def _json_list_response(items: list) -> Response:
    return Response(
        status_code=200,
        content_type="application/json",
        body=json.dumps(items)
    )


# =============================
# Routes (Async execution with sync wrappers for AWS Powertools compatibility)
# =============================

@app.get("/api/weather")
def get_weather_route():
    """
    GET /api/weather?location=São Paulo&mode=current
    GET /api/weather?location=-23.55,-46.63&mode=range&startDate=2025-01-01&endDate=2025-01-05

    Returns location, current conditions and one entry per day
    """
    weather_request = GetWeatherRequest.from_query(_query_params())

    report = run_async(container.get_location_weather().execute(weather_request))

    return report.to_api_response(container.display_timezone)


@app.get("/api/records")
def get_records_route():
    """
    GET /api/records          -> todos os registros (mais recentes primeiro)
    GET /api/records?id=42    -> um registro
    """
    record_id = _query_params().get('id')

    if not record_id:
        records = run_async(container.list_records().execute())
        return _json_list_response([record.to_dict() for record in records])

    record = run_async(container.get_record().execute(RecordIdValidator.validate(record_id)))
    return record.to_dict()


@app.post("/api/records")
def post_records_route():
    """
    POST /api/records
    Body: {location, latitude, longitude, startDate, endDate, weatherData}

    POST /api/records
    Body: {"action": "export", "recordIds": [1, 2], "format": "csv"}
    """
    body = _request_body()

    if body.get('action') == 'export':
        export_request = ExportRecordsRequest.from_body(body)
        logger.info(
            "Export request received",
            record_ids=export_request.record_ids,
            format=export_request.export_format.value
        )
        exported = run_async(container.export_records().execute(export_request))
        return exported.to_dict()

    record = run_async(container.create_record().execute(body))
    return {'success': True, 'record': record.to_dict()}


@app.put("/api/records")
def put_records_route():
    """PUT /api/records?id=42 com os campos a atualizar"""
    record_id = RecordIdValidator.validate(_query_params().get('id'))
    body = _request_body()

    record = run_async(container.update_record().execute(record_id, body))

    return {
        'success': True,
        'record': record.to_dict(),
        'message': 'Record updated successfully'
    }


@app.delete("/api/records")
def delete_records_route():
    """DELETE /api/records?id=42"""
    record_id = RecordIdValidator.validate(_query_params().get('id'))

    run_async(container.delete_record().execute(record_id))

    return {'success': True}


# =============================
# Lambda Handler (100% ASYNC)
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function - 100% ASYNC

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Available routes:
    - GET    /api/weather?location=&mode=current|range&startDate=&endDate=
    - GET    /api/records[?id=]
    - POST   /api/records (create or {"action": "export"})
    - PUT    /api/records?id=
    - DELETE /api/records?id=
    """
    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        session_id=headers.get('x-session-id', 'N/A')
    )

    response = app.resolve(event, context)

    if 'headers' not in response or response['headers'] is None:
        response['headers'] = {}

    response['headers']['Access-Control-Allow-Origin'] = settings.CORS_ORIGIN
    response['headers']['Access-Control-Allow-Headers'] = 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Requested-With,X-Session-Id'
    response['headers']['Access-Control-Allow-Methods'] = 'GET,POST,PUT,DELETE,OPTIONS'
    response['headers']['Access-Control-Max-Age'] = '86400'

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    Sessão aiohttp e cliente aioboto3 ficam presos ao loop em que foram
    criados; reutilizar o loop mantém esses clientes válidos entre invocações.
    """
    global _global_event_loop

    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop

    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)

    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)

    Args:
        coro: Coroutine a ser executada

    Returns:
        Resultado da coroutine
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
