"""Service-level exceptions surfaced by the web layer."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a request is rejected before reaching the store."""


class UnknownStaffError(LookupError):
    """Raised when a staff id is not present in the store."""
