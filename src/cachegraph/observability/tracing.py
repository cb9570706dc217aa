"""OpenTelemetry tracing.

Cached repositories open one span per cache primitive
(``repository.cache.base/Get`` and friends). Until ``setup_tracing`` installs
a provider, OpenTelemetry hands out non-recording spans, so tracing costs
nothing by default.

Usage:
    from cachegraph.observability.tracing import get_tracer

    tracer = get_tracer(__name__)

    with tracer.start_as_current_span("my_operation") as span:
        span.set_attribute("key", "value")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)

from cachegraph.config import settings as default_settings

if TYPE_CHECKING:
    from cachegraph.config import Settings

logger = logging.getLogger(__name__)

# Global tracer provider
_tracer_provider: TracerProvider | None = None
_initialized = False


def setup_tracing(settings: Settings) -> None:
    """Initialize OpenTelemetry tracing.

    Configures:
    - OTLP exporter (if endpoint configured)
    - Console exporter (dev environment without an endpoint)
    - Redis client instrumentation
    """
    global _tracer_provider, _initialized

    if _initialized:
        return

    if not settings.enable_tracing:
        logger.info("Tracing is disabled")
        _initialized = True
        return

    resource = Resource.create(
        {
            "service.name": settings.app_name,
            "service.instance.id": settings.instance_id,
            "deployment.environment": settings.env,
        }
    )
    _tracer_provider = TracerProvider(resource=resource)

    if settings.otlp_endpoint:
        exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint)
        _tracer_provider.add_span_processor(BatchSpanProcessor(exporter))
        logger.info(f"OTLP tracing enabled: {settings.otlp_endpoint}")
    elif settings.env == "dev":
        _tracer_provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console tracing enabled (dev mode)")

    trace.set_tracer_provider(_tracer_provider)

    RedisInstrumentor().instrument()
    logger.debug("Redis instrumentation enabled")

    _initialized = True
    logger.info("OpenTelemetry tracing initialized")


def get_tracer(name: str, enabled: bool | None = None) -> Any:
    """Get a tracer for the given module name.

    Args:
        name: Module name (typically __name__)
        enabled: Overrides ``enable_tracing`` from the settings

    Returns:
        OpenTelemetry tracer, or NoOpTracer if tracing is disabled
    """
    if enabled is None:
        enabled = default_settings.enable_tracing
    if not enabled:
        return NoOpTracer()
    return trace.get_tracer(name)


class NoOpTracer:
    """Tracer that records nothing."""

    def start_as_current_span(self, name: str, **kwargs: Any) -> NoOpSpanContextManager:
        return NoOpSpanContextManager()

    def start_span(self, name: str, **kwargs: Any) -> NoOpSpan:
        return NoOpSpan()


class NoOpSpan:
    """Span that records nothing."""

    def set_attribute(self, key: str, value: Any) -> None:
        pass

    def set_status(self, status: Any, description: str | None = None) -> None:
        pass

    def record_exception(self, exception: BaseException, **kwargs: Any) -> None:
        pass

    def is_recording(self) -> bool:
        return False

    def end(self) -> None:
        pass


class NoOpSpanContextManager:
    def __enter__(self) -> NoOpSpan:
        return NoOpSpan()

    def __exit__(self, *args: Any) -> None:
        pass


def shutdown_tracing() -> None:
    """Flush remaining spans and shut the provider down."""
    global _tracer_provider, _initialized

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        logger.info("OpenTelemetry tracing shutdown complete")

    _tracer_provider = None
    _initialized = False
