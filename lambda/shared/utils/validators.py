"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Any, List, Type

from domain.exceptions import InvalidRequestException


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_not_empty(
        value: Any,
        param_name: str,
        exception_class: Type[Exception] = InvalidRequestException
    ) -> str:
        """
        Valida se string não está vazia

        Args:
            value: Valor a validar
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            String validada e trimmed

        Raises:
            exception_class: Se string vazia
        """
        if value is None or not str(value).strip():
            raise exception_class(f"{param_name} cannot be empty")
        return str(value).strip()

    @staticmethod
    def validate_numeric_string(
        value: Any,
        param_name: str,
        exception_class: Type[Exception] = InvalidRequestException
    ) -> str:
        """
        Valida se string é numérica

        Raises:
            exception_class: Se não for numérica
        """
        trimmed = GenericValidator.validate_not_empty(value, param_name, exception_class)
        if not trimmed.isdigit():
            raise exception_class(f"Invalid {param_name} format: {value}")
        return trimmed


class RecordIdValidator:
    """Validate the ?id= query parameter"""

    @staticmethod
    def validate(record_id: Any) -> int:
        """
        Returns:
            The record id as int

        Raises:
            InvalidRequestException: If missing or not a positive integer
        """
        if record_id is None or str(record_id).strip() == '':
            raise InvalidRequestException("Record ID is required")

        value = GenericValidator.validate_numeric_string(record_id, "id")
        if int(value) <= 0:
            raise InvalidRequestException(
                "Record ID must be a positive integer",
                details={"id": record_id}
            )
        return int(value)


class RecordIdsValidator:
    """Validate recordIds of an export request"""

    @staticmethod
    def validate(record_ids: Any) -> List[int]:
        """
        Raises:
            InvalidRequestException: If not a non-empty list of numeric ids
        """
        if not isinstance(record_ids, list) or not record_ids:
            raise InvalidRequestException(
                "Invalid record IDs",
                details={"recordIds": record_ids}
            )
        try:
            return [int(record_id) for record_id in record_ids]
        except (TypeError, ValueError):
            raise InvalidRequestException(
                "Invalid record IDs",
                details={"recordIds": record_ids}
            )

