"""OpenTelemetry instrumentation for metadata binding.

Tracing is optional and configuration-driven. When it is disabled, or the
OpenTelemetry packages are not installed, every helper here is a no-op.

Usage:
    tracer = configure_tracing(config.tracing)

    with traced_bind("MyComponent") as result_meta:
        ...
        result_meta["applied"] = 3
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generator

from loguru import logger

if TYPE_CHECKING:
    from opentelemetry.trace import Tracer


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class TracingConfig:
    """OpenTelemetry tracing configuration.

    Attributes:
        enabled: Whether tracing is enabled (default: False).
        endpoint: OTLP HTTP endpoint; empty string exports to the console.
        service_name: Service name for traces (default: metabind).
        service_version: Service version for traces.
        sample_rate: Sampling rate 0.0-1.0 (default: 1.0 = all traces).
    """

    enabled: bool = False
    endpoint: str = "http://localhost:4318/v1/traces"
    service_name: str = "metabind"
    service_version: str = "1.0.0"
    sample_rate: float = 1.0


# =============================================================================
# Global State
# =============================================================================

_tracer: "Tracer | None" = None
_warning_logged: bool = False


def get_tracer() -> "Tracer | None":
    """Get the configured tracer, or None if tracing is disabled."""
    return _tracer


def configure_tracing(config: TracingConfig) -> "Tracer | None":
    """Configure OpenTelemetry tracing.

    Args:
        config: TracingConfig with endpoint and settings.

    Returns:
        Configured Tracer instance, or None if disabled/failed.
    """
    global _tracer, _warning_logged

    if not config.enabled:
        logger.debug("Tracing is disabled")
        _tracer = None
        return None

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import (
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
        from opentelemetry.sdk.trace.sampling import ALWAYS_ON, TraceIdRatioBased

        resource = Resource.create(
            {
                "service.name": config.service_name,
                "service.version": config.service_version,
            }
        )

        if config.sample_rate >= 1.0:
            sampler = ALWAYS_ON
        else:
            sampler = TraceIdRatioBased(config.sample_rate)

        provider = TracerProvider(resource=resource, sampler=sampler)

        if config.endpoint:
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
                OTLPSpanExporter,
            )

            exporter = OTLPSpanExporter(endpoint=config.endpoint)
        else:
            exporter = ConsoleSpanExporter()

        provider.add_span_processor(SimpleSpanProcessor(exporter))
        trace.set_tracer_provider(provider)

        _tracer = trace.get_tracer(config.service_name, config.service_version)
        logger.info(
            f"Tracing enabled: endpoint={config.endpoint or 'console'}, "
            f"sample_rate={config.sample_rate}"
        )
        _warning_logged = False
        return _tracer

    except ImportError as e:
        if not _warning_logged:
            logger.warning(
                f"OpenTelemetry packages not installed, tracing disabled: {e}. "
                "Install with: pip install metabind[tracing]"
            )
            _warning_logged = True
        _tracer = None
        return None


def shutdown_tracing() -> None:
    """Shutdown tracing and flush any pending spans."""
    global _tracer

    if _tracer is None:
        return

    from opentelemetry import trace

    provider = trace.get_tracer_provider()
    if hasattr(provider, "shutdown"):
        provider.shutdown()
    logger.debug("Tracing shutdown complete")

    _tracer = None


# =============================================================================
# Bind Instrumentation
# =============================================================================


@contextmanager
def traced_bind(
    target_type: str,
    *,
    tracer: "Tracer | None" = None,
    atomic: bool = False,
) -> Generator[dict[str, Any], None, None]:
    """Context manager for tracing a single bind call.

    Yields:
        Dict the caller fills with "applied" and "skipped" counts.
    """
    active_tracer = tracer or _tracer
    result_meta: dict[str, Any] = {}

    if active_tracer is None:
        yield result_meta
        return

    from opentelemetry.trace import Status, StatusCode

    start_time = time.perf_counter()

    with active_tracer.start_as_current_span("metabind.bind") as span:
        span.set_attribute("metabind.target_type", target_type)
        span.set_attribute("metabind.atomic", atomic)

        try:
            yield result_meta

            span.set_attribute("metabind.latency_ms", (time.perf_counter() - start_time) * 1000)
            span.set_attribute("metabind.bindings_applied", result_meta.get("applied", 0))
            span.set_attribute("metabind.bindings_skipped", result_meta.get("skipped", 0))
            span.set_status(Status(StatusCode.OK))

        except Exception as e:
            span.set_attribute("metabind.latency_ms", (time.perf_counter() - start_time) * 1000)
            span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR, str(e)))
            raise
