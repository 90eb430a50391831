"""Structured error taxonomy for the scrawn SDK.

``PricingExpressionError`` is the pricing DSL's single error kind and is kept
outside the taxonomy; it is wrapped as ``ScrawnValidationError`` when it
surfaces through request building.
"""

from __future__ import annotations


class ScrawnError(Exception):
    """Base class for all scrawn SDK exceptions."""

    def __init__(self, error_code: str, category: str, explanation: str, actionable: bool = True):
        self.error_code = error_code
        self.category = category
        self.explanation = explanation
        self.actionable = actionable
        super().__init__(f"[{self.category}:{self.error_code}] {self.explanation}")


class ScrawnValidationError(ScrawnError):
    def __init__(self, explanation: str, actionable: bool = True):
        super().__init__("VALIDATION_ERROR", "VALIDATION", explanation, actionable)


class ScrawnConfigError(ScrawnError):
    def __init__(self, explanation: str, actionable: bool = True):
        super().__init__("CONFIG_ERROR", "CONFIG", explanation, actionable)


class PricingExpressionError(ValueError):
    """Raised when a pricing expression violates a construction-time rule."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
