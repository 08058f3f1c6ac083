"""
Salon error types.

The style engine raises nothing of its own: exceptions from caller-supplied
predicates and stylers propagate unchanged. These types cover the edges of
the package that do validate input (configuration, condition factories).
"""
from __future__ import annotations
from typing import Any, Optional


class SalonError(Exception):
    """Base exception for the salon package."""

    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(SalonError, ValueError):
    """Invalid configuration value."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class InvalidConditionError(SalonError, ValueError):
    """A condition factory was called with unusable arguments."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("INVALID_CONDITION", message, details)
