"""
exceptions.py
=============
TRANSPORTDESK — Hierarchical Exception System

All application exceptions inherit from TransportDeskError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
TransportDeskError
├── DatabaseError
│   └── StorageError
├── ValidationError
│   ├── InvalidValueError
│   └── TransportValidationError
├── ServiceError
│   ├── NumberingError
│   └── ExportError
└── ConfigurationError
"""
from __future__ import annotations

from typing import Optional


# ─── Root ────────────────────────────────────────────────────────────────────

class TransportDeskError(Exception):
    """Base exception for all TRANSPORTDESK errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "ORDER_NOT_FOUND"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Database ────────────────────────────────────────────────────────────────

class DatabaseError(TransportDeskError):
    """Raised when a database operation fails unexpectedly."""


class StorageError(DatabaseError):
    """Raised when a storage slot cannot be read or written."""

    def __init__(self, key: str = "", message: str = "", **kwargs):
        if not message:
            message = f"Storage slot '{key}' is unavailable" if key else "Storage unavailable"
        super().__init__(message, **kwargs)
        self.key = key


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(TransportDeskError):
    """Raised when user-provided data fails validation."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InvalidValueError(ValidationError):
    """Raised when a field value is out of range or has an invalid format."""

    def __init__(self, field: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid value for field '{field}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, field=field, **kwargs)
        self.value = value
        self.reason = reason


class TransportValidationError(ValidationError):
    """
    Raised when a transport order draft is rejected.

    ``reason`` is a member of services.transport_validator.RejectionReason;
    ``code`` mirrors its value so the error can be logged without the enum.
    Delivery-level rejections also carry the position and id of the
    offending delivery.
    """

    def __init__(
        self,
        reason,
        message: str,
        *,
        delivery_index: Optional[int] = None,
        delivery_id: Optional[str] = None,
        **kwargs,
    ):
        kwargs.setdefault("code", getattr(reason, "value", str(reason)))
        super().__init__(message, **kwargs)
        self.reason = reason
        self.delivery_index = delivery_index
        self.delivery_id = delivery_id


# ─── Service ─────────────────────────────────────────────────────────────────

class ServiceError(TransportDeskError):
    """Base for errors raised by the service layer."""


class NumberingError(ServiceError):
    """Raised when an order code cannot be allocated."""


class ExportError(ServiceError):
    """Raised when a spreadsheet export fails."""


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(TransportDeskError):
    """Raised when the application configuration is invalid or incomplete."""
