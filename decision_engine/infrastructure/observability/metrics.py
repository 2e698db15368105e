"""Prometheus metrics for monitoring approval rates and approved amounts"""

from prometheus_client import Counter, Histogram

from decision_engine.domain.models import Decision

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | rejected
)

rejection_counter = Counter(
    "loan_rejection_total",
    "Rejected loan requests by reason",
    ["kind", "tier"],
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # <4000, 4000-7000, 7000+
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def approved_amount_bucket(loan_amount: int) -> str:
    if loan_amount < 4000:
        return "<4000"
    elif loan_amount < 7000:
        return "4000-7000"
    else:
        return "7000+"


def record_decision(decision: Decision) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    if decision.is_approved:
        decision_counter.labels(outcome="approved").inc()
        approved_amount_bucket_counter.labels(bucket=approved_amount_bucket(decision.loan_amount)).inc()
    else:
        decision_counter.labels(outcome="rejected").inc()
        rejection_counter.labels(
            kind=decision.error_kind.value,
            tier=decision.error_kind.tier.value,
        ).inc()
