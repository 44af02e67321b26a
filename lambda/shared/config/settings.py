"""
Configurações centralizadas da aplicação
"""
import os

# Chaves das APIs externas (validadas no momento da requisição)
OPENWEATHER_API_KEY = os.environ.get('OPENWEATHER_API_KEY', '')
GOOGLE_MAPS_API_KEY = os.environ.get('GOOGLE_MAPS_API_KEY', '')

# Persistência de registros (DynamoDB)
RECORDS_TABLE_NAME = os.environ.get('RECORDS_TABLE_NAME', 'weather-records')

# Timezone de exibição das datas do forecast
APP_TIMEZONE = os.environ.get('APP_TIMEZONE', 'UTC')

# Dias devolvidos no modo "current"
FORECAST_DAYS = int(os.environ.get('FORECAST_DAYS', '5'))

# AWS
AWS_REGION = os.environ.get('AWS_REGION', 'us-east-1')

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')
