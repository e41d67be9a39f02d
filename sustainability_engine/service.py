# -*- coding: utf-8 -*-
"""
Sustainability Service - Sustainability Metrics & Lifecycle Modeling Engine

``SustainabilityService`` is the caller boundary of the engine. It takes a
raw request body through validation, the data completeness gate and report
generation, and wraps the outcome in a :class:`SuggestionsResponse`.

Status codes:
    200  report generated
    400  malformed body, or completeness below ``min_completeness_score``
    500  unexpected failure (logged with traceback)

Usage:
    >>> from sustainability_engine.service import get_service
    >>> response = get_service().process_request({
    ...     "materials": [{"name": "Concrete", "quantity": 100}],
    ...     "transport": [{"distance": 50}],
    ...     "energy": [{"quantity": 500}],
    ...     "options": {"format": "detailed"},
    ... })
    >>> print(response.status_code, response.to_payload()["suggestionsCount"])

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, Optional

from sustainability_engine import constants as c
from sustainability_engine import metrics
from sustainability_engine.config import EngineConfig, get_config
from sustainability_engine.exceptions import PayloadValidationError
from sustainability_engine.models import SuggestionsResponse
from sustainability_engine.provenance import (
    ProvenanceTracker,
    compute_provenance_hash,
    compute_report_hash,
)
from sustainability_engine.report_generation import (
    calculate_data_completeness,
    generate_sustainability_report,
)
from sustainability_engine.validation import ValidatedRequest, validate_request

logger = logging.getLogger(__name__)


# ===================================================================
# SustainabilityService facade
# ===================================================================

# Thread-safe singleton lock
_singleton_lock = threading.Lock()
_singleton_instance: Optional["SustainabilityService"] = None


class SustainabilityService:
    """Facade over validation, the completeness gate and report assembly.

    Attributes:
        config: EngineConfig instance.
        provenance: ProvenanceTracker logging every processed request.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        """Initialize the service.

        Args:
            config: Optional engine config. Uses global config if None.
        """
        self.config = config or get_config()
        self.config.validate()
        self.provenance = ProvenanceTracker()
        self._requests_processed = 0
        self._lock = threading.Lock()
        logger.info("SustainabilityService facade created")

    # ------------------------------------------------------------------
    # Request processing
    # ------------------------------------------------------------------

    def process_request(self, payload: Any) -> SuggestionsResponse:
        """Validate a request body and generate the requested report.

        Args:
            payload: Request body as a mapping or JSON text.

        Returns:
            SuggestionsResponse; never raises for bad input.
        """
        with self._lock:
            self._requests_processed += 1
        try:
            request = validate_request(payload, self.config)
            return self._generate(request)
        except PayloadValidationError as exc:
            logger.warning("Rejected malformed request: %s", exc.message)
            metrics.record_rejection("invalid_payload")
            return SuggestionsResponse(status_code=400, error=exc.message)
        except Exception as exc:
            logger.exception("Sustainability report generation failed")
            metrics.record_error(type(exc).__name__)
            return SuggestionsResponse(
                status_code=500, error=str(exc) or "Unknown error occurred",
            )

    def _generate(self, request: ValidatedRequest) -> SuggestionsResponse:
        completeness = calculate_data_completeness(
            request.materials, request.transport, request.energy,
        )
        metrics.record_completeness(completeness)
        report_format = request.options.format.value
        request_hash = self._request_hash(request)

        if completeness < self.config.min_completeness_score:
            logger.warning(
                "Insufficient data: completeness %.0f below minimum %.0f",
                completeness, self.config.min_completeness_score,
            )
            metrics.record_rejection("insufficient_data")
            if self.config.enable_provenance:
                self.provenance.record(report_format, request_hash, None, 400)
            return SuggestionsResponse(
                status_code=400,
                error=c.INSUFFICIENT_DATA_MESSAGE,
                completeness_score=completeness,
            )

        started = time.perf_counter()
        report = generate_sustainability_report(
            request.materials, request.transport, request.energy, request.options,
        )
        if self.config.enable_provenance:
            report_hash = compute_report_hash(report)
            report = report.model_copy(update={"provenance_hash": report_hash})
            self.provenance.record(report_format, request_hash, report_hash, 200)
        metrics.record_report(report_format, time.perf_counter() - started)

        return SuggestionsResponse(
            status_code=200,
            report=report,
            completeness_score=completeness,
            suggestions_count=len(report.suggestions),
        )

    def _request_hash(self, request: ValidatedRequest) -> str:
        if not self.config.enable_provenance:
            return ""
        return compute_provenance_hash({
            "materials": [m.model_dump(mode="json") for m in request.materials],
            "transport": [t.model_dump(mode="json") for t in request.transport],
            "energy": [e.model_dump(mode="json") for e in request.energy],
            "options": request.options.model_dump(mode="json"),
        })

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_provenance(self) -> ProvenanceTracker:
        """Get the ProvenanceTracker instance."""
        return self.provenance

    def get_metrics(self) -> Dict[str, Any]:
        """Service metric summary.

        Returns:
            Dictionary with request and provenance counts.
        """
        with self._lock:
            requests_processed = self._requests_processed
        return {
            "requests_processed": requests_processed,
            "provenance_entries": self.provenance.entry_count,
            "metrics_enabled": self.config.enable_metrics,
            "provenance_enabled": self.config.enable_provenance,
        }


# ===================================================================
# Thread-safe singleton access
# ===================================================================


def get_service() -> SustainabilityService:
    """Get or create the singleton SustainabilityService instance."""
    global _singleton_instance
    if _singleton_instance is None:
        with _singleton_lock:
            if _singleton_instance is None:
                _singleton_instance = SustainabilityService()
    return _singleton_instance


def configure_service(config: Optional[EngineConfig] = None) -> SustainabilityService:
    """Replace the singleton with a service built from ``config``."""
    global _singleton_instance
    service = SustainabilityService(config=config)
    with _singleton_lock:
        _singleton_instance = service
    logger.info("SustainabilityService configured")
    return service


def reset_service() -> None:
    """Reset the singleton to None (for test teardown)."""
    global _singleton_instance
    with _singleton_lock:
        _singleton_instance = None


__all__ = [
    "SustainabilityService",
    "get_service",
    "configure_service",
    "reset_service",
]
