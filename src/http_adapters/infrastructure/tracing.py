"""OpenTelemetry tracing for HTTP adapters."""

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import DEPLOYMENT_ENVIRONMENT, SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SpanExporter

from http_adapters.infrastructure.config import ObservabilityConfig

TRACER_NAME = "http_adapters"
TRACER_VERSION = "0.1.0"


def build_exporter(settings: ObservabilityConfig) -> SpanExporter:
    """OTLP exporter when an endpoint is configured, console otherwise."""
    endpoint = settings.otlp_endpoint
    if not endpoint:
        return ConsoleSpanExporter()
    return OTLPSpanExporter(endpoint=endpoint, insecure=not endpoint.startswith("https://"))


def setup_tracing(settings: ObservabilityConfig) -> trace.Tracer:
    """Install a tracer provider for the read spans, unless tracing is off.

    With tracing disabled the global provider is left as the host set it, so
    an application that already configured OpenTelemetry keeps its exporter.
    """
    if settings.enable_tracing:
        resource = Resource.create(
            {
                SERVICE_NAME: TRACER_NAME,
                SERVICE_VERSION: TRACER_VERSION,
                DEPLOYMENT_ENVIRONMENT: settings.environment,
            }
        )
        provider = TracerProvider(resource=resource)
        provider.add_span_processor(BatchSpanProcessor(build_exporter(settings)))
        trace.set_tracer_provider(provider)

    return get_tracer()


def get_tracer() -> trace.Tracer:
    return trace.get_tracer(TRACER_NAME, TRACER_VERSION)
