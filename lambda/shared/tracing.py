"""
Distributed Tracing - handle injetável sobre o Datadog APM (ddtrace)

O handle é criado pelo ponto de entrada do processo e passado explicitamente
para handlers e use cases. Nenhum componente acessa o tracer global direto.

Usage:
    tracing = Tracing.start("cep-resolver")

    with tracing.span("get_location_by_cep", cep=cep):
        ...

    headers = tracing.inject_headers({})      # lado cliente (propaga o trace)
    with tracing.continue_trace(headers):    # lado servidor (continua o trace)
        ...

    tracing.shutdown()
"""
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional

from ddtrace import tracer as dd_tracer
from ddtrace.propagation.http import HTTPPropagator

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class _NoopSpan:
    """Span que descarta tags e métricas"""

    def set_tag(self, key: str, value: Any = None) -> None:
        pass

    def set_metric(self, key: str, value: float) -> None:
        pass


class Tracing:
    """Handle de tracing com ciclo de vida explícito (start/shutdown)"""

    def __init__(self, service_name: str, tracer=None):
        self.service_name = service_name
        self._tracer = tracer

    @classmethod
    def start(cls, service_name: str, enabled: bool = True) -> 'Tracing':
        """
        Inicializa o tracing do processo
        
        Args:
            service_name: Nome do serviço nos spans
            enabled: False devolve um handle no-op
        
        Returns:
            Handle pronto para ser injetado nos componentes
        """
        if not enabled:
            logger.info("Tracing disabled", service=service_name)
            return cls.noop(service_name)

        logger.info("Tracing started", service=service_name)
        return cls(service_name, tracer=dd_tracer)

    @classmethod
    def noop(cls, service_name: str = "noop") -> 'Tracing':
        return cls(service_name, tracer=None)

    @property
    def enabled(self) -> bool:
        return self._tracer is not None

    @contextmanager
    def span(self, name: str, resource: Optional[str] = None, **tags) -> Iterator[Any]:
        """
        Abre um span filho do span ativo e registra a duração em ms
        
        Args:
            name: Nome do span (ex: "get_location_by_cep")
            resource: Recurso do span (default: name)
            **tags: Tags adicionadas ao span
        """
        if self._tracer is None:
            yield _NoopSpan()
            return

        start_time = time.perf_counter()
        with self._tracer.trace(name, service=self.service_name, resource=resource or name) as span:
            for key, value in tags.items():
                span.set_tag(key, value)
            try:
                yield span
            finally:
                duration_ms = (time.perf_counter() - start_time) * 1000
                span.set_metric(f"{name}_duration_ms", duration_ms)

    def inject_headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Copia os headers e injeta o contexto do span ativo"""
        headers = dict(headers or {})
        if self._tracer is None:
            return headers

        current_span = self._tracer.current_span()
        if current_span is not None:
            HTTPPropagator.inject(current_span.context, headers)
        return headers

    @contextmanager
    def continue_trace(self, headers: Optional[Mapping[str, str]]) -> Iterator[None]:
        """
        Continua o trace recebido nos headers enquanto o bloco executa

        Headers sem trace_id iniciam um trace novo. Na saída o contexto que
        estava ativo antes é restaurado, mesmo em caso de erro.
        """
        if self._tracer is None:
            yield
            return

        context = HTTPPropagator.extract(dict(headers or {}))
        if not context.trace_id:
            context = None

        provider = self._tracer.context_provider
        previous = provider.active()
        provider.activate(context)
        if context is not None:
            logger.debug("Trace context activated", trace_id=context.trace_id)
        try:
            yield
        finally:
            provider.activate(previous)

    def shutdown(self) -> None:
        """Envia spans pendentes e encerra o tracer"""
        if self._tracer is None:
            return
        self._tracer.shutdown()
        self._tracer = None
        logger.info("Tracing shut down", service=self.service_name)
