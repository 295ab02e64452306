"""Prometheus metrics for monitoring calculation volume, rejections, and latency"""

from decimal import Decimal
from typing import Optional
from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "mortgage_calculation_total",
    "Total mortgage calculations performed",
    ["variant"],  # basic | extended
)

energy_label_counter = Counter(
    "mortgage_energy_label_total",
    "Extended calculations by property energy label",
    ["label"],
)

capacity_exceeded_counter = Counter(
    "mortgage_capacity_exceeded_total",
    "Calculations where the loan exceeds the maximum borrowing capacity",
)

monthly_payment_histogram = Histogram(
    "mortgage_monthly_payment",
    "Distribution of computed monthly payments",
    buckets=[250, 500, 1000, 1500, 2000, 3000, 5000, 10000],
)

# Rejected input
rejected_requests_counter = Counter(
    "mortgage_rejected_requests_total",
    "Requests rejected before or by the calculation engine",
    ["reason"],  # validation | precondition
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(
    variant: str,
    monthly_payment: Decimal,
    energy_label: Optional[str] = None,
    exceeds_capacity: Optional[bool] = None,
) -> None:
    """Record calculation metrics for volume and payment distribution"""
    calculation_counter.labels(variant=variant).inc()
    monthly_payment_histogram.observe(float(monthly_payment))

    if energy_label is not None:
        energy_label_counter.labels(label=energy_label).inc()
    if exceeds_capacity:
        capacity_exceeded_counter.inc()
