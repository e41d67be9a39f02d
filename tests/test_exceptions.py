"""Tests for the Sustainability Engine Exception Hierarchy.

Covers:
- Base exception functionality
- Payload validation and configuration errors
- Exception serialization
- Exception chain formatting

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

import json
from datetime import datetime

import pytest

from sustainability_engine.exceptions import (
    ConfigurationError,
    PayloadValidationError,
    SustainabilityEngineError,
    format_exception_chain,
)


# ==============================================================================
# Base Exception Tests
# ==============================================================================

class TestSustainabilityEngineError:
    """Tests for base SustainabilityEngineError."""

    def test_create_basic_exception(self):
        """Can create basic exception with message."""
        exc = SustainabilityEngineError("Something went wrong")

        assert exc.message == "Something went wrong"
        assert exc.error_code == "SE_SUSTAINABILITY_ENGINE_ERROR"
        assert exc.component is None
        assert exc.context == {}
        assert isinstance(exc.timestamp, datetime)

    def test_create_exception_with_context(self):
        """Explicit error code, component and context are kept."""
        exc = SustainabilityEngineError(
            message="Test error",
            error_code="SE_TEST_001",
            component="report",
            context={"key": "value", "count": 42},
        )

        assert exc.error_code == "SE_TEST_001"
        assert exc.component == "report"
        assert exc.context == {"key": "value", "count": 42}

    def test_exception_str_representation(self):
        """String form carries code, component and message."""
        exc = SustainabilityEngineError("Boom", component="validation")

        text = str(exc)
        assert text.startswith("[SE_SUSTAINABILITY_ENGINE_ERROR]")
        assert "Component: validation" in text
        assert text.endswith("Boom")

    def test_exception_repr(self):
        exc = SustainabilityEngineError("Boom", component="validation")
        assert repr(exc).startswith("SustainabilityEngineError(message='Boom'")

    def test_to_dict(self):
        """Serialises every field."""
        exc = SustainabilityEngineError("Boom", context={"a": 1})
        data = exc.to_dict()

        assert data["error_type"] == "SustainabilityEngineError"
        assert data["error_code"] == "SE_SUSTAINABILITY_ENGINE_ERROR"
        assert data["message"] == "Boom"
        assert data["context"] == {"a": 1}
        assert "timestamp" in data
        assert "traceback" in data

    def test_to_json_is_parseable(self):
        exc = SustainabilityEngineError("Boom", context={"when": datetime(2026, 1, 1)})
        parsed = json.loads(exc.to_json())

        assert parsed["message"] == "Boom"
        assert parsed["context"]["when"].startswith("2026-01-01")

    def test_can_be_raised_and_caught(self):
        with pytest.raises(SustainabilityEngineError) as exc_info:
            raise SustainabilityEngineError("raised")
        assert exc_info.value.message == "raised"


# ==============================================================================
# Subclass Tests
# ==============================================================================

class TestPayloadValidationError:
    """Tests for PayloadValidationError."""

    def test_error_code(self):
        exc = PayloadValidationError("Bad body")
        assert exc.error_code == "SE_PAYLOAD_VALIDATION_ERROR"
        assert isinstance(exc, SustainabilityEngineError)

    def test_invalid_fields_in_context(self):
        """Invalid fields are merged into the context."""
        exc = PayloadValidationError(
            "Bad body",
            component="validation",
            context={"received_type": "list"},
            invalid_fields={"materials": "must be a list"},
        )

        assert exc.component == "validation"
        assert exc.context["received_type"] == "list"
        assert exc.context["invalid_fields"] == {"materials": "must be a list"}

    def test_no_invalid_fields_leaves_context_empty(self):
        exc = PayloadValidationError("Bad body")
        assert exc.context == {}


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_config_key_and_component(self):
        exc = ConfigurationError(
            "min_completeness_score must be within [0, 100]",
            config_key="min_completeness_score",
            context={"value": 120},
        )

        assert exc.error_code == "SE_CONFIGURATION_ERROR"
        assert exc.component == "config"
        assert exc.context == {"value": 120, "config_key": "min_completeness_score"}


# ==============================================================================
# Utility Tests
# ==============================================================================

class TestFormatExceptionChain:
    """Tests for format_exception_chain."""

    def test_single_exception(self):
        text = format_exception_chain(ValueError("plain"))
        assert text == "ValueError: plain"

    def test_chained_exceptions(self):
        """Engine errors show context; causes follow in order."""
        try:
            try:
                raise ValueError("root cause")
            except ValueError as cause:
                raise PayloadValidationError(
                    "Request body is not valid JSON", context={"reason": "x"},
                ) from cause
        except PayloadValidationError as exc:
            text = format_exception_chain(exc)

        lines = text.splitlines()
        assert lines[0].startswith("[SE_PAYLOAD_VALIDATION_ERROR]")
        assert lines[1] == "  Context: {'reason': 'x'}"
        assert lines[2] == "ValueError: root cause"
