# -*- coding: utf-8 -*-
"""
Prometheus Metrics - Sustainability Metrics & Lifecycle Modeling Engine

Prometheus metrics for the service facade. Engine functions never record
metrics; only the service does. Every helper is a no-op when
``enable_metrics`` is false in the active configuration.

Metrics:
    1. sustainability_engine_reports_generated_total (Counter)
    2. sustainability_engine_requests_rejected_total (Counter)
    3. sustainability_engine_request_errors_total (Counter)
    4. sustainability_engine_report_duration_seconds (Histogram)
    5. sustainability_engine_completeness_score (Histogram)

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import logging

from prometheus_client import Counter, Histogram

from sustainability_engine.config import get_config

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# 1. Reports generated by format
reports_generated_total = Counter(
    "sustainability_engine_reports_generated_total",
    "Total sustainability reports generated",
    labelnames=["format"],
)

# 2. Requests rejected before report generation
requests_rejected_total = Counter(
    "sustainability_engine_requests_rejected_total",
    "Total requests rejected before report generation",
    labelnames=["reason"],
)

# 3. Unexpected errors
request_errors_total = Counter(
    "sustainability_engine_request_errors_total",
    "Total requests that failed with an unexpected error",
    labelnames=["error_type"],
)

# 4. Report generation duration
report_duration_seconds = Histogram(
    "sustainability_engine_report_duration_seconds",
    "Report generation duration in seconds",
    labelnames=["format"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

# 5. Data completeness distribution
completeness_score = Histogram(
    "sustainability_engine_completeness_score",
    "Data completeness score of incoming requests",
    buckets=(10, 20, 30, 40, 50, 60, 70, 80, 90, 100),
)


# ---------------------------------------------------------------------------
# Helper functions (no-ops when metrics are disabled)
# ---------------------------------------------------------------------------


def _enabled() -> bool:
    return get_config().enable_metrics


def record_report(report_format: str, duration_seconds: float) -> None:
    """Record a generated report.

    Args:
        report_format: Report format ("basic", "detailed", "comprehensive").
        duration_seconds: Generation time in seconds.
    """
    if not _enabled():
        return
    reports_generated_total.labels(format=report_format).inc()
    report_duration_seconds.labels(format=report_format).observe(duration_seconds)


def record_rejection(reason: str) -> None:
    """Record a rejected request.

    Args:
        reason: Rejection reason ("insufficient_data", "invalid_payload").
    """
    if not _enabled():
        return
    requests_rejected_total.labels(reason=reason).inc()


def record_error(error_type: str) -> None:
    """Record an unexpected request failure."""
    if not _enabled():
        return
    request_errors_total.labels(error_type=error_type).inc()


def record_completeness(score: float) -> None:
    if not _enabled():
        return
    completeness_score.observe(score)


__all__ = [
    "reports_generated_total",
    "requests_rejected_total",
    "request_errors_total",
    "report_duration_seconds",
    "completeness_score",
    "record_report",
    "record_rejection",
    "record_error",
    "record_completeness",
]
