"""Error Hierarchy: typed, categorized exceptions for every dashboard failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - http_status is the status the API answers with when the error escapes a service
    - ParseError and quota-classified ProviderError are recovered inside services
      and never reach the client
    - to_response() produces the REST envelope used by the global handlers

Design Decisions:
    - Single hierarchy with DashboardError base: one FastAPI handler catches all
    - UpstreamError mirrors the statistics agency status instead of a fixed 500
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    TRANSPORT = "transport"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    detail: str | None = None
    upstream_status: int | None = None
    debug_info: dict[str, Any] | None = None


class DashboardError(Exception):
    """Base exception for all dashboard API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.context.detail:
            body["detail"] = self.context.detail
        return {"error": body}


# ─── Configuration ──────────────────────────────────────────────

class ConfigurationError(DashboardError):
    """Required setting (e.g. the Gemini credential) is missing."""
    def __init__(self, message: str, setting: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.setting = setting


# ─── Generative provider ────────────────────────────────────────

class ProviderError(DashboardError):
    """Gemini answered with a non-success HTTP status."""
    def __init__(
        self,
        message: str,
        provider_status: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream_status = provider_status
        super().__init__(
            message, "PROVIDER_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, 500,
        )
        self.provider_status = provider_status


class EmptyProviderResponseError(DashboardError):
    """Gemini answered successfully but with no usable text."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Empty Gemini response", "EMPTY_PROVIDER_RESPONSE",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.ERROR, context, 502,
        )


class ParseError(DashboardError):
    """Structured output from Gemini could not be turned into series."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid structured output: {reason}", "PARSE_ERROR",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.WARNING, context, 502,
        )
        self.reason = reason


class GenerationError(DashboardError):
    """Unexpected failure while serving a generation endpoint."""
    def __init__(self, message: str, detail: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.detail = detail
        super().__init__(
            message, "GENERATION_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


# ─── Statistics agency / network ────────────────────────────────

class UpstreamError(DashboardError):
    """Statistics agency answered with a non-success HTTP status."""
    def __init__(
        self,
        upstream_status: int,
        message: str = "IBGE fetch failed",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream_status = upstream_status
        super().__init__(
            message, "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, upstream_status,
        )
        self.upstream_status = upstream_status


class TransportError(DashboardError):
    """Network failure (connect, read, timeout) reaching an upstream."""
    def __init__(self, message: str, target: str, context: ErrorContext | None = None):
        super().__init__(
            message, "TRANSPORT_ERROR", ErrorCategory.TRANSPORT,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.target = target
