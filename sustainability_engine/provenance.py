# -*- coding: utf-8 -*-
"""
Report Provenance - Sustainability Metrics & Lifecycle Modeling Engine

SHA-256 fingerprints for generated reports and an in-memory, chain-hashed
log of processed requests for tamper evidence.

Guarantees:
    - Hashes are deterministic SHA-256 over canonical JSON
      (sorted keys, compact separators)
    - Report hashes exclude ``generated_at`` so identical inputs hash
      identically
    - Chain hashing links log entries in sequence from a fixed genesis

Example:
    >>> from sustainability_engine.provenance import ProvenanceTracker
    >>> tracker = ProvenanceTracker()
    >>> chain_hash = tracker.record("basic", request_hash, report_hash, 200)
    >>> assert tracker.verify_chain()

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from sustainability_engine.models import SustainabilityReport

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    """Return current UTC datetime with microseconds zeroed."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def _canonical_json(data: Any) -> str:
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    return json.dumps(data, sort_keys=True, separators=(",", ":"), default=str)


def compute_provenance_hash(data: Any) -> str:
    """SHA-256 of the canonical JSON form of ``data``.

    Args:
        data: Dict, list, scalar or pydantic model.

    Returns:
        Hex-encoded SHA-256 hash.
    """
    return hashlib.sha256(_canonical_json(data).encode("utf-8")).hexdigest()


def compute_report_hash(report: SustainabilityReport) -> str:
    """Hash report content, ignoring the timestamp and any existing hash."""
    content = report.model_dump(
        mode="json", exclude={"generated_at", "provenance_hash"},
    )
    return compute_provenance_hash(content)


class ProvenanceEntry(BaseModel):
    """One processed request in the provenance log."""

    entry_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=_utcnow)
    report_format: str
    request_hash: str
    report_hash: Optional[str] = None
    status_code: int
    chain_hash: str = ""


class ProvenanceTracker:
    """Chain-hashed log of processed requests.

    Attributes:
        _entries: Ordered list of provenance entries.
        _last_chain_hash: Most recent chain hash for linking.
    """

    # Initial chain hash (genesis)
    _GENESIS_HASH = hashlib.sha256(b"sustainability-engine-genesis").hexdigest()

    def __init__(self) -> None:
        self._entries: List[ProvenanceEntry] = []
        self._last_chain_hash: str = self._GENESIS_HASH
        self._lock = threading.Lock()

    def record(
        self,
        report_format: str,
        request_hash: str,
        report_hash: Optional[str],
        status_code: int,
    ) -> str:
        """Append an entry and return its chain hash.

        Args:
            report_format: Requested report format.
            request_hash: Hash of the validated request.
            report_hash: Hash of the generated report, None if rejected.
            status_code: Response status code.

        Returns:
            The new chain hash.
        """
        entry = ProvenanceEntry(
            report_format=report_format,
            request_hash=request_hash,
            report_hash=report_hash,
            status_code=status_code,
        )
        with self._lock:
            chain_hash = self._next_chain_hash(self._last_chain_hash, entry)
            entry.chain_hash = chain_hash
            self._entries.append(entry)
            self._last_chain_hash = chain_hash

        logger.debug(
            "Recorded provenance: %s status=%d %s",
            report_format, status_code, entry.entry_id,
        )
        return chain_hash

    def verify_chain(self) -> bool:
        """Recompute every chain hash from genesis; False if any differ."""
        current = self._GENESIS_HASH
        for entry in self._entries:
            expected = self._next_chain_hash(current, entry)
            if entry.chain_hash != expected:
                logger.warning("Chain verification failed at entry %s", entry.entry_id)
                return False
            current = expected
        return True

    def get_entries(self, limit: int = 100) -> List[ProvenanceEntry]:
        """Most recent entries first."""
        return list(reversed(self._entries))[:limit]

    def export_json(self) -> str:
        """Export all provenance entries as a JSON string."""
        records = [entry.model_dump(mode="json") for entry in self._entries]
        return json.dumps(records, indent=2, default=str)

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    @property
    def last_chain_hash(self) -> str:
        return self._last_chain_hash

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _entry_data(entry: ProvenanceEntry) -> Dict[str, Any]:
        return {
            "format": entry.report_format,
            "request": entry.request_hash,
            "report": entry.report_hash,
            "status": entry.status_code,
            "timestamp": entry.timestamp.isoformat(),
        }

    @classmethod
    def _next_chain_hash(cls, previous: str, entry: ProvenanceEntry) -> str:
        entry_hash = compute_provenance_hash(cls._entry_data(entry))
        combined = f"{previous}:{entry_hash}"
        return hashlib.sha256(combined.encode()).hexdigest()


__all__ = [
    "compute_provenance_hash",
    "compute_report_hash",
    "ProvenanceEntry",
    "ProvenanceTracker",
]
