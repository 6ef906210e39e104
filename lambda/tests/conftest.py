"""
Configuração global dos testes
Ambiente definido antes do import dos módulos da aplicação
"""
import os
import sys
from contextlib import contextmanager

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

os.environ.setdefault('TRACING_ENABLED', 'false')
os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('DD_SERVICE', 'cep-weather-test')
os.environ.setdefault('WEATHER_API_KEY', 'test-api-key')
os.environ.setdefault('POWERTOOLS_LOG_LEVEL', 'WARNING')

import pytest

from shared.tracing import Tracing


class RecordingSpan:
    """Span fake que guarda tags"""
    def __init__(self, name):
        self.name = name
        self.tags = {}
        self.metrics = {}

    def set_tag(self, key, value=None):
        self.tags[key] = value

    def set_metric(self, key, value):
        self.metrics[key] = value


class RecordingTracing(Tracing):
    """
    Tracing fake: registra spans abertos e injeta um header de trace
    previsível para verificar a propagação entre os serviços
    """
    TRACE_HEADER = 'x-datadog-trace-id'

    def __init__(self):
        super().__init__('test', tracer=None)
        self.spans = []
        self.activated = []

    @contextmanager
    def span(self, name, resource=None, **tags):
        span = RecordingSpan(name)
        span.tags.update(tags)
        self.spans.append(span)
        yield span

    def inject_headers(self, headers=None):
        headers = dict(headers or {})
        if self.spans:
            headers[self.TRACE_HEADER] = '1234567890'
        return headers

    @contextmanager
    def continue_trace(self, headers):
        self.activated.append(dict(headers or {}))
        yield

    @property
    def span_names(self):
        return [span.name for span in self.spans]


@pytest.fixture
def noop_tracing():
    """Handle de tracing que não faz nada"""
    return Tracing.noop()


@pytest.fixture
def recording_tracing():
    """Handle de tracing que registra spans e propagação"""
    return RecordingTracing()
