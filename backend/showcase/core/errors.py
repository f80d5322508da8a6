"""Error Hierarchy — typed, categorized exceptions for all Showcase failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are reported to the caller; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope; to_function_response() the serverless-function envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ShowcaseError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Errors are reported, never recovered: no retry hints, no compensation hooks
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    site_id: str | None = None
    purchase_id: str | None = None
    payment_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ShowcaseError(Exception):
    """Base exception for all Showcase errors."""

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
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "site_id": self.context.site_id,
                    "purchase_id": self.context.purchase_id,
                    "payment_id": self.context.payment_id,
                },
            }
        }

    def to_function_response(self) -> dict:
        """Convert to the flat envelope returned by /functions/* handlers."""
        return {"error": self.context.user_message or self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class FormValidationError(ShowcaseError):
    """Submitted form breaks a rule that depends on the stored row (partial edits)."""
    def __init__(self, field_name: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field_name = field_name


class SiteNotAvailableError(ShowcaseError):
    """Purchase attempted on a site that is not `available`."""
    def __init__(self, site_id: str, status: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.site_id = site_id
        super().__init__(
            f"Site '{site_id}' is not available for purchase (status: {status})",
            "SITE_NOT_AVAILABLE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.status = status


class ResourceNotFoundError(ShowcaseError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class AuthenticationError(ShowcaseError):
    """Missing or rejected bearer token."""
    def __init__(self, message: str = "Authentication required", context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(ShowcaseError):
    """Authenticated user lacks the required role."""
    def __init__(self, role: str, context: ErrorContext | None = None):
        super().__init__(
            f"Role '{role}' required",
            "PERMISSION_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.role = role


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ShowcaseError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class ExternalServiceError(ShowcaseError):
    """Call to a third-party API (payment, email, content, auth) failed."""
    def __init__(
        self,
        service: str,
        message: str,
        code: str = "EXTERNAL_API_ERROR",
        upstream_status: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{service} API error: {message}",
            code, ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.service = service
        self.upstream_status = upstream_status


class PaymentProviderError(ExternalServiceError):
    """Lygos rejected or failed to create the payment product."""
    def __init__(
        self, message: str, upstream_status: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "Lygos", message, "PAYMENT_PROVIDER_ERROR", upstream_status, context,
        )


class EmailDeliveryError(ExternalServiceError):
    """Resend rejected or failed to send an email."""
    def __init__(
        self, message: str, upstream_status: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "Resend", message, "EMAIL_DELIVERY_ERROR", upstream_status, context,
        )


class ContentAPIError(ExternalServiceError):
    """WordPress content API returned a non-2xx response or was unreachable."""
    def __init__(
        self, message: str, upstream_status: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "WordPress", message, "CONTENT_API_ERROR", upstream_status, context,
        )
