"""Exception hierarchy for textcal.

Rendering itself is total over well-formed input; these exceptions report
caller errors detected while validating configuration, resolving locale
names or checking layout contracts.
"""

from typing import Any, Optional


class TextCalError(Exception):
    """Base exception for all textcal errors.

    Args:
        message: Human-readable error description
        details: Optional dictionary containing additional error context

    Example:
        >>> raise TextCalError("Rendering failed", {"year": 2022})
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(TextCalError):
    """Raised when settings are inconsistent, e.g. an empty or out-of-range year span."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.field_name = field_name
        self.field_value = field_value

        error_details = details or {}
        if field_name:
            error_details["field_name"] = field_name
        if field_value is not None:
            error_details["field_value"] = str(field_value)

        super().__init__(message, error_details)


class LocaleNotAvailableError(TextCalError):
    """Raised when weekday and month names cannot be loaded for a locale."""

    def __init__(self, locale_name: str, reason: str = "") -> None:
        self.locale_name = locale_name
        details = {"locale": locale_name}
        if reason:
            details["reason"] = reason
        super().__init__(f"Locale '{locale_name}' is not available", details)


class RenderError(TextCalError):
    """Raised when month blocks violate the layout contract."""
