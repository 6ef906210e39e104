"""
Configurações centralizadas da aplicação
Lidas do ambiente no momento do import
"""
import os

from domain.constants import API, Services

# Provedores externos
VIACEP_BASE_URL = os.environ.get('VIACEP_BASE_URL', API.VIACEP_BASE_URL).rstrip('/')
WEATHERAPI_BASE_URL = os.environ.get('WEATHERAPI_BASE_URL', API.WEATHERAPI_BASE_URL).rstrip('/')
WEATHER_API_KEY = os.environ.get('WEATHER_API_KEY', '')

# Serviço resolver (usado pelo gateway)
RESOLVER_BASE_URL = os.environ.get('RESOLVER_BASE_URL', API.RESOLVER_BASE_URL).rstrip('/')

# HTTP
HTTP_TIMEOUT_SECONDS = float(os.environ.get('HTTP_TIMEOUT_SECONDS', str(API.HTTP_TIMEOUT_TOTAL)))

# Servidor local
HOST = os.environ.get('HOST', '0.0.0.0')
GATEWAY_PORT = int(os.environ.get('GATEWAY_PORT', '8080'))
RESOLVER_PORT = int(os.environ.get('RESOLVER_PORT', '8081'))

# Observabilidade
SERVICE_NAME = os.environ.get('DD_SERVICE', Services.DEFAULT)
TRACING_ENABLED = os.environ.get('TRACING_ENABLED', 'true').lower() in ('true', '1', 'yes')
