"""Monitoring and metrics instrumentation for the triage gateway.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from triage_gateway.monitoring.metrics import (
    fallbacks_total,
    provider_latency_seconds,
    provider_requests_total,
    triage_failures_total,
    unrecognized_values_total,
)

__all__ = [
    "provider_requests_total",
    "provider_latency_seconds",
    "fallbacks_total",
    "triage_failures_total",
    "unrecognized_values_total",
]
