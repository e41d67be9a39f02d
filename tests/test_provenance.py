# -*- coding: utf-8 -*-
"""Tests for report hashing and the provenance chain."""

import json
from datetime import datetime, timezone

from sustainability_engine.models import SustainabilityReport, SustainabilityScore
from sustainability_engine.provenance import (
    ProvenanceTracker,
    compute_provenance_hash,
    compute_report_hash,
)


def _report(**overrides) -> SustainabilityReport:
    fields = {
        "format": "basic",
        "suggestions": ["Priority: a", "b"],
        "priority_suggestions": ["Priority: a"],
        "score": SustainabilityScore(overall=60, materials=60, transport=60, energy=60),
    }
    fields.update(overrides)
    return SustainabilityReport(**fields)


class TestHashing:
    """compute_provenance_hash / compute_report_hash."""

    def test_hex_sha256(self):
        digest = compute_provenance_hash({"a": 1})
        assert len(digest) == 64
        int(digest, 16)

    def test_key_order_independent(self):
        assert compute_provenance_hash({"a": 1, "b": [1, 2]}) == compute_provenance_hash(
            {"b": [1, 2], "a": 1}
        )

    def test_content_sensitive(self):
        assert compute_provenance_hash({"a": 1}) != compute_provenance_hash({"a": 2})

    def test_report_hash_ignores_timestamp_and_existing_hash(self):
        first = _report(generated_at=datetime(2026, 1, 1, tzinfo=timezone.utc))
        second = _report(
            generated_at=datetime(2026, 6, 1, tzinfo=timezone.utc), provenance_hash="x" * 64,
        )
        assert compute_report_hash(first) == compute_report_hash(second)

    def test_report_hash_tracks_content(self):
        assert compute_report_hash(_report()) != compute_report_hash(_report(project_id="p"))


class TestProvenanceTracker:
    """Chain-hashed provenance log."""

    def test_starts_at_genesis(self):
        tracker = ProvenanceTracker()
        assert tracker.entry_count == 0
        assert tracker.last_chain_hash == ProvenanceTracker._GENESIS_HASH
        assert tracker.verify_chain()

    def test_record_links_entries(self):
        tracker = ProvenanceTracker()
        first = tracker.record("basic", "req-1", "rep-1", 200)
        second = tracker.record("detailed", "req-2", None, 400)

        assert first != second
        assert tracker.last_chain_hash == second
        assert tracker.entry_count == 2
        assert tracker.verify_chain()

    def test_tampering_detected(self):
        tracker = ProvenanceTracker()
        tracker.record("basic", "req-1", "rep-1", 200)
        tracker.record("basic", "req-2", "rep-2", 200)

        tracker._entries[0].status_code = 500
        assert not tracker.verify_chain()

    def test_get_entries_newest_first(self):
        tracker = ProvenanceTracker()
        for i in range(3):
            tracker.record("basic", f"req-{i}", None, 400)

        entries = tracker.get_entries(limit=2)
        assert [e.request_hash for e in entries] == ["req-2", "req-1"]

    def test_export_json(self):
        tracker = ProvenanceTracker()
        tracker.record("comprehensive", "req-1", "rep-1", 200)

        [record] = json.loads(tracker.export_json())
        assert record["report_format"] == "comprehensive"
        assert record["status_code"] == 200
        assert record["chain_hash"] == tracker.last_chain_hash
