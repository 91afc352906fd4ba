"""
Prometheus metrics for the catalog service.
"""

from prometheus_client import Counter

domain_events_published_total = Counter(
    "catalog_domain_events_published_total",
    "Total domain events published on the event bus",
    ["event_type"],
)

domain_event_handler_failures_total = Counter(
    "catalog_domain_event_handler_failures_total",
    "Total domain event handler failures",
    ["event_type", "handler"],
)
