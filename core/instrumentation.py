"""
OpenTelemetry instrumentation setup.

This module configures OpenTelemetry for distributed tracing
and starts the Prometheus metrics exporter.
"""

import logging
import os
import socket

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.django import DjangoInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Status, StatusCode
from prometheus_client import start_http_server

logger = logging.getLogger(__name__)

__all__ = ["Status", "StatusCode", "get_tracer", "setup_opentelemetry"]


def setup_opentelemetry():
    """
    Configure OpenTelemetry instrumentation.

    Sets up:
    - Distributed tracing (exported via OTLP gRPC)
    - Auto-instrumentation for Django
    - Prometheus metrics server when PROMETHEUS_PORT is set

    Tracing is only configured when OTEL_ENABLED is truthy. Without it,
    the OpenTelemetry API hands out no-op tracers.
    """
    if os.environ.get("OTEL_ENABLED", "").lower() in ("1", "true", "yes"):
        service_name = os.environ.get("OTEL_SERVICE_NAME", "product-catalog")
        service_version = os.environ.get("OTEL_SERVICE_VERSION", "1.0.0")
        environment = os.environ.get("ENVIRONMENT", "development")

        resource = Resource.create(
            {
                "service.name": service_name,
                "service.version": service_version,
                "deployment.environment": environment,
            }
        )

        trace_provider = TracerProvider(resource=resource)
        trace.set_tracer_provider(trace_provider)

        otlp_endpoint = os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT", "http://tempo:4317")
        otlp_exporter = OTLPSpanExporter(
            endpoint=otlp_endpoint,
            insecure=True,  # Use TLS in production
        )
        trace_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

        DjangoInstrumentor().instrument()
        logger.info("OpenTelemetry instrumentation configured", extra={"endpoint": otlp_endpoint})
    else:
        logger.info("OpenTelemetry export disabled (set OTEL_ENABLED=1 to enable)")

    prometheus_port = os.environ.get("PROMETHEUS_PORT")
    if prometheus_port:
        _start_metrics_server(int(prometheus_port))


def _start_metrics_server(port: int):
    """Start the Prometheus metrics server unless the port is already taken."""
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        result = sock.connect_ex(("127.0.0.1", port))
        sock.close()

        if result != 0:
            start_http_server(port, addr="0.0.0.0")
            logger.info("Prometheus metrics server started on 0.0.0.0:%s", port)
        else:
            logger.info("Prometheus metrics server already running on port %s", port)
    except OSError as e:
        logger.warning("Could not start Prometheus metrics server: %s", e)


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer instance for manual instrumentation.

    Args:
        name: Tracer name (usually module name)

    Returns:
        Tracer instance
    """
    return trace.get_tracer(name)
