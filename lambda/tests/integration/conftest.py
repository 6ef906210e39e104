"""
Fixtures compartilhadas para testes de integração
Os apps do Powertools são montados com provedores mockados (sem rede)
"""
import json
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.dtos.responses import RelayedResponse
from application.use_cases.forward_cep_use_case import ForwardCepUseCase
from application.use_cases.resolve_cep_temperature_use_case import ResolveCepTemperatureUseCase
from domain.entities.location import Location
from domain.entities.weather_reading import WeatherReading
from infrastructure.adapters.input.gateway_handler import create_gateway_app
from infrastructure.adapters.input.lambda_runtime import build_lambda_handler
from infrastructure.adapters.input.resolver_handler import create_resolver_app


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'cep-weather'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:sa-east-1:123456789012:function:cep-weather'
        self.memory_limit_in_mb = '256'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/cep-weather'
        self.log_stream_name = '2026/10/19/[$LATEST]test'
    
    def get_remaining_time_in_millis(self):
        return 30000


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


def build_api_gateway_event(
    method: str,
    path: str,
    resource: str,
    path_parameters: Optional[Dict[str, str]] = None,
    body: Optional[Any] = None,
    raw_body: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Builder genérico para eventos do API Gateway
    
    Args:
        method: HTTP method (GET, POST)
        path: Request path (/cep/01001000)
        resource: API Gateway resource (/cep/{cep})
        path_parameters: Path params dict
        body: Request body (será serializado em JSON)
        raw_body: Body cru (tem precedência sobre body)
        headers: Headers extras
    """
    event_headers = {
        'Accept': 'application/json',
        'Content-Type': 'application/json'
    }
    event_headers.update(headers or {})
    
    if raw_body is None and body is not None:
        raw_body = json.dumps(body)
    
    return {
        'resource': resource,
        'path': path,
        'httpMethod': method,
        'headers': event_headers,
        'pathParameters': path_parameters,
        'queryStringParameters': None,
        'body': raw_body,
        'isBase64Encoded': False,
        'requestContext': {
            'stage': 'test',
            'requestId': 'test-request-id-12345',
            'identity': {'sourceIp': '127.0.0.1'}
        }
    }


def build_gateway_event(cep: Any = None, raw_body: Optional[str] = None, path: str = '/cep') -> Dict[str, Any]:
    """Builder para evento POST /cep"""
    return build_api_gateway_event(
        method='POST',
        path=path,
        resource=path,
        body={'cep': cep},
        raw_body=raw_body
    )


def build_resolver_get_event(cep: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Builder para evento GET /cep/{cep}"""
    return build_api_gateway_event(
        method='GET',
        path=f'/cep/{cep}',
        resource='/cep/{cep}',
        path_parameters={'cep': cep},
        headers=headers
    )


def build_resolver_post_event(cep: Any = None, raw_body: Optional[str] = None) -> Dict[str, Any]:
    """Builder para evento POST /localizacao"""
    return build_api_gateway_event(
        method='POST',
        path='/localizacao',
        resource='/localizacao',
        body={'cep': cep},
        raw_body=raw_body
    )


@pytest.fixture
def postal_code_provider():
    """Provedor de CEP stub: sempre São Paulo"""
    provider = MagicMock()
    provider.provider_name = "ViaCEP"
    provider.build_url = MagicMock(side_effect=lambda cep: f"https://viacep.com.br/ws/{cep}/json/")
    provider.get_location = AsyncMock(return_value=Location(city="São Paulo"))
    return provider


@pytest.fixture
def weather_provider():
    """Provedor de clima stub: sempre 20 °C"""
    provider = MagicMock()
    provider.provider_name = "WeatherAPI"
    provider.current_url = "https://api.weatherapi.com/v1/current.json"
    provider.get_current_weather = AsyncMock(return_value=WeatherReading(temp_c=20.0))
    return provider


@pytest.fixture
def resolver_handler(postal_code_provider, weather_provider, recording_tracing):
    """Lambda handler do resolver com provedores stub"""
    use_case = ResolveCepTemperatureUseCase(
        postal_code_provider=postal_code_provider,
        weather_provider=weather_provider,
        tracing=recording_tracing
    )
    return build_lambda_handler(create_resolver_app(use_case, recording_tracing))


@pytest.fixture
def resolver_client():
    """Cliente do resolver stub (gateway)"""
    client = MagicMock()
    client.forward_url = "http://localhost:8081/localizacao"
    client.forward = AsyncMock(return_value=RelayedResponse(
        status_code=200,
        body='{"city":"S\\u00e3o Paulo","temp_C":20.0,"temp_F":68.0,"temp_K":293.15}'
    ))
    return client


@pytest.fixture
def gateway_handler(resolver_client, recording_tracing):
    """Lambda handler do gateway com cliente stub"""
    use_case = ForwardCepUseCase(resolver_client=resolver_client, tracing=recording_tracing)
    return build_lambda_handler(create_gateway_app(use_case, recording_tracing))
