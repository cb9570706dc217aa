"""Observability: structured logging and OpenTelemetry tracing."""

from cachegraph.observability.logging import (
    ConsoleFormatter,
    JsonFormatter,
    LogContext,
    configure_logging,
    request_id_var,
)
from cachegraph.observability.tracing import (
    NoOpTracer,
    get_tracer,
    setup_tracing,
    shutdown_tracing,
)

__all__ = [
    # Logging
    "configure_logging",
    "JsonFormatter",
    "ConsoleFormatter",
    "LogContext",
    "request_id_var",
    # Tracing
    "setup_tracing",
    "shutdown_tracing",
    "get_tracer",
    "NoOpTracer",
]
