from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

# Upstream API Metrics
UPSTREAM_REQUESTS = Counter(
    "connector_upstream_requests_total",
    "Total number of requests sent to the remote API",
    ["connector", "status"]
)

PAGES_FETCHED = Histogram(
    "connector_pages_fetched",
    "Number of pages fetched per data request",
    ["connector"],
    buckets=[1, 2, 3, 5, 10, 20, 50, 100]
)

# Entry Point Metrics
DATA_REQUESTS = Counter(
    "connector_data_requests_total",
    "Total number of getData calls",
    ["connector", "status"]
)

DATA_LATENCY = Histogram(
    "connector_data_latency_seconds",
    "getData latency in seconds",
    ["connector"],
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0]
)

ROWS_RETURNED = Counter(
    "connector_rows_returned_total",
    "Total number of rows returned to the host",
    ["connector"]
)

def get_metrics():
    """Return latest metrics in Prometheus format."""
    return generate_latest(), CONTENT_TYPE_LATEST
