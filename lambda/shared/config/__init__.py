"""Shared configuration"""
from .settings import APP_TIMEZONE, FORECAST_DAYS, RECORDS_TABLE_NAME
from .logger_config import get_logger, logger

__all__ = ['APP_TIMEZONE', 'FORECAST_DAYS', 'RECORDS_TABLE_NAME', 'get_logger', 'logger']
