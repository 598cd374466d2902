"""Prometheus metrics for calculation volume, outcomes and schedule lengths"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "card_calculation_total",
    "Total payoff calculations served",
    ["mode", "outcome"],  # outcome: ok | validation_failure | infeasible | horizon_exceeded
)

schedule_length_histogram = Histogram(
    "card_schedule_length_months",
    "Length of emitted amortization schedules",
    ["mode"],
    buckets=[1, 3, 6, 12, 24, 36, 60, 120, 240, 360, 600],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(mode: str, outcome: str, months: Optional[int] = None) -> None:
    """Record one calculation and, when a schedule came out, its length"""
    calculation_counter.labels(mode=mode, outcome=outcome).inc()

    if months is not None:
        schedule_length_histogram.labels(mode=mode).observe(months)
