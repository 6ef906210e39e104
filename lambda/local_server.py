#!/usr/bin/env python3
"""
Servidor Local para Desenvolvimento
Simula AWS Lambda + API Gateway localmente usando Flask (um serviço por processo)

Como usar:
    cd lambda
    WEATHER_API_KEY=... python local_server.py resolver   # porta 8081
    python local_server.py gateway                        # porta 8080

Endpoints disponíveis:
    gateway:  POST http://localhost:8080/cep          Body: {"cep": "01001000"}
    resolver: GET  http://localhost:8081/cep/{cep}
              POST http://localhost:8081/localizacao  Body: {"cep": "01001000"}
    ambos:    GET  /health
"""
import os
import sys
from datetime import datetime

from flask import Flask, Response, request
from flask_cors import CORS

# Garantir que o diretório lambda está no path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from domain.constants import Services

SERVICES = {
    'gateway': Services.GATEWAY,
    'resolver': Services.RESOLVER,
}


class MockLambdaContext:
    """Mock do contexto Lambda para execução local"""
    def __init__(self, function_name: str):
        self.aws_request_id = f"local-{datetime.now().timestamp()}"
        self.function_name = function_name
        self.function_version = "$LATEST"
        self.invoked_function_arn = f"arn:aws:lambda:local:000000000000:function:{function_name}"
        self.memory_limit_in_mb = "256"
        self.log_group_name = f"/aws/lambda/{function_name}"
        self.log_stream_name = "local"
        
    def get_remaining_time_in_millis(self):
        return 30000


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
    """Converte resposta Lambda para resposta Flask (body repassado sem alterações)"""
    headers = dict(lambda_response.get('headers') or {})
    for key, values in (lambda_response.get('multiValueHeaders') or {}).items():
        headers[key] = ', '.join(values)
    
    return Response(
        lambda_response.get('body') or '',
        status=lambda_response.get('statusCode', 200),
        headers=headers
    )


def create_local_app(handler, function_name: str) -> Flask:
    """Cria app Flask que encaminha qualquer rota para o lambda handler"""
    app = Flask(function_name)
    CORS(app, resources={r"/*": {"origins": "*"}})

    @app.route('/', defaults={'path': ''}, methods=['GET', 'POST'])
    @app.route('/<path:path>', methods=['GET', 'POST'])
    def proxy(path):
        event = flask_to_lambda_event(request)
        response = handler(event, MockLambdaContext(function_name))
        return lambda_to_flask_response(response)

    return app


def main(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) != 2 or argv[1] not in SERVICES:
        print(f"Uso: python local_server.py [{'|'.join(SERVICES)}]")
        return 2
    
    service_key = argv[1]
    service_name = SERVICES[service_key]
    os.environ.setdefault('DD_SERVICE', service_name)
    
    # Import tardio: settings e logger leem DD_SERVICE no import
    import lambda_function
    from shared.config import settings
    
    if service_key == 'resolver' and not settings.WEATHER_API_KEY:
        print("⚠️  AVISO: WEATHER_API_KEY não definida; consultas de clima vão falhar\n")
    
    handler = lambda_function.resolver_handler if service_key == 'resolver' else lambda_function.gateway_handler
    port = settings.RESOLVER_PORT if service_key == 'resolver' else settings.GATEWAY_PORT
    
    print("=" * 70)
    print(f"🚀 Servidor Local - {service_name}")
    print(f"📍 Rodando em: http://{settings.HOST}:{port}")
    print("=" * 70 + "\n")
    
    app = create_local_app(handler, service_name)
    try:
        app.run(host=settings.HOST, port=port, threaded=True)
    finally:
        lambda_function.tracing.shutdown()
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
