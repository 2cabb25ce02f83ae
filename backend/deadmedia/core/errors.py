"""Error Hierarchy — typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - http_status is the only signal sent to the client (error responses have no body)
    - 404 vs 500 is decided by exception type, never by message text

Design Decisions:
    - Single hierarchy with DeadMediaError base: FastAPI global handler catches all (ADR: uniform error mapping)
    - StoreError is a DeadMediaError, not a bare Exception: fault-injection failures
      go through the same handler as every other domain failure
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    STORE = "store"
    INTERNAL = "internal"


class DeadMediaError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class MediaNotFoundError(DeadMediaError):
    """No record carries the requested id."""
    def __init__(self, media_id: int | str):
        super().__init__(
            f"Cannot find media with id {media_id}",
            "MEDIA_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.media_id = media_id


class PeerUnavailableError(DeadMediaError):
    """Transfer target did not answer the existence probe."""
    def __init__(self, target: str):
        super().__init__(
            f"Transfer target {target} is unreachable",
            "PEER_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, 421,
        )
        self.target = target


# ─── Server Errors (500-level) ──────────────────────────────────

class InvalidPaginationError(DeadMediaError):
    """limit/offset query parameter is not a non-negative integer."""
    def __init__(self, parameter: str, raw_value: str):
        super().__init__(
            f"Invalid {parameter} parameter: {raw_value!r}",
            "INVALID_PAGINATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 500,
        )
        self.parameter = parameter
        self.raw_value = raw_value


class InvalidTransferError(DeadMediaError):
    """Transfer source or target is not a usable URL."""
    def __init__(self, message: str):
        super().__init__(
            message, "INVALID_TRANSFER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 500,
        )


class TransferFailedError(DeadMediaError):
    """Peer refused or failed the remote creation."""
    def __init__(self, message: str, target: str):
        super().__init__(
            f"Transfer to {target} failed: {message}",
            "TRANSFER_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, 500,
        )
        self.target = target


class StoreError(DeadMediaError):
    """Store operation failed (forced-error mode or internal fault)."""
    def __init__(self, operation: str):
        super().__init__(
            f"Store {operation} failed",
            "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
