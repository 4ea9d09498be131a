"""
Distributed Tracing Setup (OpenTelemetry).

Spans are emitted by the sequencer (one per step). Until setup_tracing()
installs a provider, the OpenTelemetry API hands out no-op tracers.
"""

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from codex_config.settings import Settings
from codex_obs.logging import get_logger

logger = get_logger(__name__)


def setup_tracing(settings: Settings) -> bool:
    """
    Setup OpenTelemetry distributed tracing.

    Exports: OTLP (Jaeger/Tempo/Collector)

    Returns:
        bool: True if a tracer provider was installed
    """
    if not settings.OTEL_TRACES_ENABLED:
        return False

    resource = Resource.create(
        {
            "service.name": settings.OTEL_SERVICE_NAME,
            "service.version": "0.1.0",
            "deployment.environment": settings.ENVIRONMENT,
        }
    )

    provider = TracerProvider(resource=resource)
    otlp_exporter = OTLPSpanExporter(endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)
    provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
    trace.set_tracer_provider(provider)

    logger.info("tracing_enabled", service_name=settings.OTEL_SERVICE_NAME)
    return True
