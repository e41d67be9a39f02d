"""Sustainability Engine Exception Hierarchy.

This module provides the exception hierarchy for the sustainability engine
with rich error context for debugging, monitoring, and caller feedback.

Exception Hierarchy:
    SustainabilityEngineError (base)
    ├── PayloadValidationError
    └── ConfigurationError

Insufficient data is not an exception: it is reported through the data
completeness score. Malformed optional fields are not exceptions either:
they are dropped at the validation boundary and replaced by defaults.

All exceptions include rich context:
- error_code: Unique error identifier
- component: Name of the engine component that raised the error
- context: Dictionary with error-specific details
- timestamp: When the error occurred
- traceback: Stack at the point the error was created

Example:
    >>> from sustainability_engine.exceptions import PayloadValidationError
    >>> raise PayloadValidationError(
    ...     message="Request body must be a JSON object",
    ...     component="validation",
    ...     context={"received_type": "list"}
    ... )

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from typing import Any, Dict, Optional
from datetime import datetime
import traceback as tb
import json
import re


# ==============================================================================
# Base Exception
# ==============================================================================

class SustainabilityEngineError(Exception):
    """Base exception for all sustainability engine errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error identifier (e.g., "SE_PAYLOAD_VALIDATION_ERROR")
        component: Engine component that raised the error (optional)
        context: Dictionary with error-specific details
        timestamp: When the error occurred
        traceback_str: Stack trace for debugging
    """

    # Base error code prefix
    ERROR_PREFIX = "SE"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        component: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize exception with rich context.

        Args:
            message: Human-readable error message
            error_code: Unique error identifier (auto-generated if not provided)
            component: Engine component that raised the error
            context: Dictionary with error-specific details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._generate_error_code()
        self.component = component
        self.context = context or {}
        self.timestamp = datetime.now()
        self.traceback_str = "".join(tb.format_stack()[:-1])

    def _generate_error_code(self) -> str:
        """Generate error code based on exception class.

        Returns:
            Error code like "SE_CONFIGURATION_ERROR"
        """
        class_name = self.__class__.__name__
        # Convert CamelCase to SCREAMING_SNAKE_CASE
        error_type = re.sub(r'(?<!^)(?=[A-Z])', '_', class_name).upper()
        return f"{self.ERROR_PREFIX}_{error_type}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization.

        Returns:
            Dictionary with all error details
        """
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "component": self.component,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "traceback": self.traceback_str,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    def __str__(self) -> str:
        """String representation with error code and message."""
        parts = [f"[{self.error_code}]"]
        if self.component:
            parts.append(f"Component: {self.component}")
        parts.append(self.message)
        return " - ".join(parts)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"component='{self.component}')"
        )


# ==============================================================================
# Request / Configuration Exceptions
# ==============================================================================

class PayloadValidationError(SustainabilityEngineError):
    """Request payload has the wrong shape.

    Raised when the request body is not an object, when a record list is
    not a list, or when report options cannot be parsed.

    Example:
        >>> raise PayloadValidationError(
        ...     message="Invalid report options",
        ...     invalid_fields={"format": "unknown value 'pdf'"}
        ... )
    """

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        invalid_fields: Optional[Dict[str, str]] = None,
    ):
        """Initialize payload validation error.

        Args:
            message: Error message
            component: Engine component
            context: Error context
            invalid_fields: Dictionary of field_name -> reason
        """
        if invalid_fields:
            context = context or {}
            context["invalid_fields"] = invalid_fields
        super().__init__(message, component=component, context=context)


class ConfigurationError(SustainabilityEngineError):
    """Engine configuration is invalid.

    Example:
        >>> raise ConfigurationError(
        ...     message="min_completeness_score must be within [0, 100]",
        ...     config_key="min_completeness_score",
        ...     context={"value": 120}
        ... )
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if config_key:
            context = context or {}
            context["config_key"] = config_key
        super().__init__(message, component="config", context=context)


# ==============================================================================
# Exception Utilities
# ==============================================================================

def format_exception_chain(exc: Exception) -> str:
    """Format exception chain for logging/display.

    Args:
        exc: Exception to format

    Returns:
        Formatted string with full exception chain
    """
    lines = []
    current = exc

    while current is not None:
        if isinstance(current, SustainabilityEngineError):
            lines.append(str(current))
            lines.append(f"  Context: {current.context}")
        else:
            lines.append(f"{type(current).__name__}: {current}")

        # Get cause
        current = getattr(current, "__cause__", None)

    return "\n".join(lines)


__all__ = [
    "SustainabilityEngineError",
    "PayloadValidationError",
    "ConfigurationError",
    "format_exception_chain",
]
