"""Prometheus metrics declarations.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never dynamic IDs (item ids, order ids).
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP request metrics ──────────────────────────────────────────

REQUESTS_IN_FLIGHT = Gauge(
    "micro_obs_in_flight_requests",
    "Requests currently being served",
)

REQUESTS_TOTAL = Counter(
    "micro_obs_requests_total",
    "Total HTTP requests",
    ["handler", "method", "code"],
)

REQUEST_DURATION_SECONDS = Histogram(
    "micro_obs_request_duration_seconds",
    "HTTP request latency in seconds",
    ["handler", "method"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 5, 10),
)

RESPONSE_SIZE_BYTES = Histogram(
    "micro_obs_response_size_bytes",
    "HTTP response body size in bytes",
    ["handler"],
    buckets=(1, 5, 10, 50, 100),
)

# ── Key-value engine metrics ──────────────────────────────────────

REDIS_COMMANDS_TOTAL = Counter(
    "micro_obs_redis_commands_total",
    "Redis commands sent",
    ["command", "outcome"],
)

# ── Order pipeline metrics ────────────────────────────────────────

ORDERS_BUILT_TOTAL = Counter(
    "micro_obs_orders_built_total",
    "Order builds by outcome",
    ["outcome"],
)

CATALOG_FETCHES_TOTAL = Counter(
    "micro_obs_catalog_fetches_total",
    "Catalog entry fetches from the item service",
    ["outcome"],
)
