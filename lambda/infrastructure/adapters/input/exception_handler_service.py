"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from typing import Optional
from aws_lambda_powertools.event_handler import Response

from domain.exceptions import (
    DomainException,
    InvalidSampleError,
    UnsupportedFormatError,
    InvalidRequestException,
    InvalidDateTimeException,
    LocationNotFoundException,
    RecordNotFoundException,
    WeatherDataNotFoundException,
    WeatherProviderException,
)
from shared.config.logger_config import logger as app_logger


def _json_response(
    status_code: int,
    error_type: Optional[str],
    error: str,
    message: str,
    details: Optional[dict] = None
) -> Response:
    body = {"error": error, "message": message}
    if error_type:
        body = {"type": error_type, **body}
    if details is not None:
        body["details"] = details
    return Response(
        status_code=status_code,
        content_type="application/json",
        body=json.dumps(body, default=str)
    )


def _domain_response(status_code: int, error: str, ex: DomainException) -> Response:
    return _json_response(status_code, type(ex).__name__, error, ex.message, ex.details)


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def handle_invalid_request(ex: InvalidRequestException) -> Response:
        """Handle 400 - Missing or malformed parameters"""
        ExceptionHandlerService.logger.warning("Invalid request", error=str(ex), details=ex.details)
        return _domain_response(400, "Invalid request", ex)

    @staticmethod
    def handle_invalid_datetime(ex: InvalidDateTimeException) -> Response:
        """Handle 400 - Invalid date format or range"""
        ExceptionHandlerService.logger.warning("Invalid datetime", error=str(ex), details=ex.details)
        return _domain_response(400, "Invalid datetime", ex)

    @staticmethod
    def handle_unsupported_format(ex: UnsupportedFormatError) -> Response:
        """Handle 400 - Unknown export format"""
        ExceptionHandlerService.logger.warning("Unsupported export format", error=str(ex), details=ex.details)
        return _domain_response(400, "Invalid export format", ex)

    @staticmethod
    def handle_location_not_found(ex: LocationNotFoundException) -> Response:
        """Handle 404 - Location not found"""
        ExceptionHandlerService.logger.warning("Location not found", error=str(ex), details=ex.details)
        return _domain_response(404, "Location not found", ex)

    @staticmethod
    def handle_record_not_found(ex: RecordNotFoundException) -> Response:
        """Handle 404 - Record not found"""
        ExceptionHandlerService.logger.warning("Record not found", error=str(ex), details=ex.details)
        return _domain_response(404, "Record not found", ex)

    @staticmethod
    def handle_weather_data_not_found(ex: WeatherDataNotFoundException) -> Response:
        """Handle 404 - Weather data not available"""
        ExceptionHandlerService.logger.warning("Weather data not found", error=str(ex), details=ex.details)
        return _domain_response(404, "Weather data not found", ex)

    @staticmethod
    def handle_invalid_sample(ex: InvalidSampleError) -> Response:
        """Handle 502 - Provider returned a malformed sample"""
        ExceptionHandlerService.logger.error("Invalid weather sample", error=str(ex), details=ex.details)
        return _domain_response(502, "Invalid weather data from provider", ex)

    @staticmethod
    def handle_provider_error(ex: WeatherProviderException) -> Response:
        """Handle 502 - Upstream OpenWeather/Google error"""
        ExceptionHandlerService.logger.error("Provider error", error=str(ex), details=ex.details, exc_info=True)
        return _domain_response(502, "Weather provider error", ex)

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return _json_response(400, "ValidationError", "Validation error", str(ex))

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return _json_response(500, None, "Internal server error", "An unexpected error occurred")

    @staticmethod
    def handle_route_not_found(ex: Exception) -> Response:
        """Handle 404 - Unknown route"""
        ExceptionHandlerService.logger.warning("Route not found")
        return _json_response(404, None, "Not found", "Route not found")
