"""
Lambda Function Handler - entrypoint configurado na AWS
Delega para o adapter HTTP (rotas /api/weather e /api/records)
"""
from infrastructure.adapters.input.lambda_handler import lambda_handler

__all__ = ['lambda_handler']
