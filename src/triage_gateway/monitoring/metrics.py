"""Custom Prometheus metrics for the triage gateway.

The gateway does not expose an HTTP endpoint itself; the hosting service
serves the default registry. Alert rules should be configured for:
- triage_failures_total (both providers failed)
- fallbacks_total (primary provider instability)
- unrecognized_values_total (providers answering outside the vocabularies)
"""

from prometheus_client import Counter, Histogram

# === Provider Metrics ===

provider_requests_total = Counter(
    "provider_requests_total",
    "Total provider calls by provider, operation and outcome",
    ["provider", "operation", "outcome"],
)
"""
Provider calls counter.

Labels:
- provider: together, openrouter
- operation: classify, summarize
- outcome: success, network, timeout, empty_content, extraction, parse
"""

provider_latency_seconds = Histogram(
    "provider_latency_seconds",
    "Provider call latency in seconds",
    ["provider", "operation"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)

# === Fallback Metrics ===

fallbacks_total = Counter(
    "fallbacks_total",
    "Calls that fell back from the primary to the secondary provider",
    ["operation"],
)
"""
Fallback counter by operation.

Alert thresholds:
- WARN: rate > 10% of total requests
"""

triage_failures_total = Counter(
    "triage_failures_total",
    "Calls where every provider failed and a synthetic result was returned",
    ["operation"],
)

# === Output Quality Metrics ===

unrecognized_values_total = Counter(
    "unrecognized_values_total",
    "Classification values outside the documented vocabulary, accepted as-is",
    ["field"],
)
