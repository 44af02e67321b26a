#!/usr/bin/env python3
"""
Servidor Local para Desenvolvimento
Simula AWS Lambda + API Gateway localmente usando Flask

Pré-requisitos:
    - Dependências instaladas: pip install -e ".[test]"
    - OPENWEATHER_API_KEY, GOOGLE_MAPS_API_KEY e credenciais AWS no ambiente

Como usar:
    cd lambda
    python local_server.py

Endpoints disponíveis:
    GET    http://localhost:8000/api/weather?location=London&mode=current
    GET    http://localhost:8000/api/weather?location=51.5,-0.12&mode=range&startDate=2025-01-01&endDate=2025-01-03
    GET    http://localhost:8000/api/records[?id=1]
    POST   http://localhost:8000/api/records
    PUT    http://localhost:8000/api/records?id=1
    DELETE http://localhost:8000/api/records?id=1
"""
import os
import sys
import json
from flask import Flask, request, jsonify
from flask_cors import CORS
from datetime import datetime

# Garantir que o diretório lambda está no path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Importar o lambda_handler
from lambda_function import lambda_handler

AVAILABLE_ROUTES = [
    'GET /api/weather',
    'GET /api/records',
    'POST /api/records',
    'PUT /api/records',
    'DELETE /api/records',
    'GET /health'
]

app = Flask(__name__)
# Habilitar CORS para todos os endpoints e origens (desenvolvimento local)
CORS(app, resources={r"/api/*": {"origins": "*"}}, supports_credentials=True)


class MockLambdaContext:
    """Mock do contexto Lambda para testes locais"""
    def __init__(self):
        self.aws_request_id = f"local-{datetime.now().timestamp()}"
        self.function_name = "local-weather-records"
        self.function_version = "$LATEST"
        self.invoked_function_arn = "arn:aws:lambda:local:000000000000:function:local-weather-records"
        self.memory_limit_in_mb = "512"
        self.log_group_name = "/aws/lambda/local-weather-records"
        self.log_stream_name = "local"

    def get_remaining_time_in_millis(self):
        return 300000  # 5 minutos


def flask_to_lambda_event(flask_request):
    """Converte requisição Flask para evento Lambda/API Gateway"""
    query_string_parameters = dict(flask_request.args.items())
    headers = dict(flask_request.headers.items())

    body = None
    if flask_request.data:
        body = flask_request.data.decode('utf-8')

    return {
        'resource': flask_request.path,
        'path': flask_request.path,
        'httpMethod': flask_request.method,
        'headers': headers,
        'queryStringParameters': query_string_parameters or None,
        'body': body,
        'isBase64Encoded': False,
        'requestContext': {
            'accountId': '000000000000',
            'apiId': 'local',
            'protocol': 'HTTP/1.1',
            'httpMethod': flask_request.method,
            'path': flask_request.path,
            'stage': 'local',
            'requestId': f"local-{datetime.now().timestamp()}",
            'requestTime': datetime.now().isoformat(),
            'requestTimeEpoch': int(datetime.now().timestamp() * 1000),
            'identity': {
                'sourceIp': flask_request.remote_addr,
                'userAgent': flask_request.headers.get('User-Agent', '')
            }
        }
    }


def lambda_to_flask_response(lambda_response):
    """Converte resposta Lambda para resposta Flask"""
    status_code = lambda_response.get('statusCode', 200)
    headers = lambda_response.get('headers') or {}
    body = lambda_response.get('body', '')

    try:
        body_json = json.loads(body) if isinstance(body, str) else body
        return jsonify(body_json), status_code, headers
    except (json.JSONDecodeError, TypeError):
        return body, status_code, headers


def _dispatch():
    if request.method == 'OPTIONS':
        return '', 200

    event = flask_to_lambda_event(request)
    response = lambda_handler(event, MockLambdaContext())
    return lambda_to_flask_response(response)


@app.route('/api/weather', methods=['GET', 'OPTIONS'])
def get_weather():
    """GET /api/weather?location=...&mode=current|range&startDate=&endDate="""
    return _dispatch()


@app.route('/api/records', methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'])
def records():
    """CRUD e export de registros"""
    return _dispatch()


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'weather-records-local',
        'timestamp': datetime.now().isoformat()
    })


@app.errorhandler(404)
def not_found(error):
    """Handler para rotas não encontradas"""
    return jsonify({
        'error': 'Not Found',
        'message': f"Route {request.path} not found",
        'available_routes': AVAILABLE_ROUTES
    }), 404


@app.errorhandler(500)
def internal_error(error):
    """Handler para erros internos"""
    return jsonify({
        'error': 'Internal Server Error',
        'message': str(error)
    }), 500


if __name__ == '__main__':
    required_env_vars = ['OPENWEATHER_API_KEY', 'GOOGLE_MAPS_API_KEY']
    missing_vars = [var for var in required_env_vars if not os.environ.get(var)]

    if missing_vars:
        print(f"⚠️  AVISO: Variáveis de ambiente faltando: {', '.join(missing_vars)}")

    port = int(os.environ.get('PORT', 8000))
    host = os.environ.get('HOST', '0.0.0.0')

    print("=" * 70)
    print("🚀 Servidor Local - Weather Records API")
    print("=" * 70)
    print(f"\n📍 Rodando em: http://{host}:{port}")
    print("\n📋 Endpoints disponíveis:")
    for route in AVAILABLE_ROUTES:
        print(f"   • {route}")
    print("\n💡 Exemplo de uso:")
    print(f"   curl 'http://localhost:{port}/api/weather?location=London'")
    print("\n" + "=" * 70 + "\n")

    app.run(host=host, port=port, debug=True)
