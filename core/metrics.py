"""
Prometheus metrics for the product catalog.

Custom metrics for catalog operations and request performance.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Catalog metrics
products_created_total = Counter(
    "products_created_total",
    "Total products created, by how the brand logo was matched",
    ["logo_match"],
)

products_updated_total = Counter(
    "products_updated_total",
    "Total products updated",
    ["image_replaced"],
)

products_deleted_total = Counter(
    "products_deleted_total",
    "Total products deleted",
)

# Logo resolution metrics
brand_logo_resolutions_total = Counter(
    "brand_logo_resolutions_total",
    "Brand logo resolutions by matching tier",
    ["tier"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
