"""
Domain Constants - Todas as constantes da aplicação centralizadas
Valores dependentes de ambiente ficam em shared/config/settings.py
"""


class API:
    """Constantes de APIs externas"""

    # OpenWeather (forecast 5 dias / 3h e histórico horário)
    OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
    OPENWEATHER_HISTORY_URL = "https://history.openweathermap.org/data/2.5"

    # Google Geocoding
    GOOGLE_GEOCODING_URL = "https://maps.googleapis.com/maps/api/geocode/json"

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 8  # segundos
    HTTP_TIMEOUT_CONNECT = 3  # segundos
    HTTP_TIMEOUT_READ = 5  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos

    # Retry apenas em rate limit (429), indisponibilidade (503) e timeout
    RETRY_ATTEMPTS = 3
    RETRY_STATUS_CODES = (429, 503)

    UNITS_METRIC = "metric"


class Aggregation:
    """Regras de agregação diária"""

    # Janela (hora local, inclusiva) usada para escolher o ícone do dia
    NOON_HOUR_START = 11
    NOON_HOUR_END = 13

    DATE_KEY_FORMAT = "%Y-%m-%d"


class Export:
    """Formatos de exportação de registros"""

    MIME_JSON = "application/json"
    MIME_CSV = "text/csv"
    MIME_XML = "application/xml"

    DATE_FORMAT = "%Y-%m-%d"
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

    JSON_INDENT = 2
    FILENAME_PREFIX = "weather_records_"

    XML_PROLOGUE = '<?xml version="1.0" encoding="UTF-8"?>'
    XML_ROOT = "weather_records"
    XML_RECORD = "record"


class Records:
    """Persistência de registros (DynamoDB)"""

    # Item reservado que guarda o último id gerado
    COUNTER_ID = 0
    COUNTER_ATTRIBUTE = "lastId"

    BATCH_GET_SIZE = 100  # limite DynamoDB


class App:
    """Constantes gerais da aplicação"""

    # Regex de coordenadas "lat, lon" no parâmetro location
    COORDINATES_PATTERN = r'^([-+]?\d+\.?\d*),\s*([-+]?\d+\.?\d*)$'

    MODE_CURRENT = "current"
    MODE_RANGE = "range"
