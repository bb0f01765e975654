"""Domain-specific exceptions. Pure domain layer, no telemetry."""

from audit_otel.core.errors import AuditOtelError


class DomainError(AuditOtelError):
    """Base for all domain-layer errors."""


class EventReadError(DomainError):
    """Raised when the audit log file cannot be opened or fully read."""


class EventDecodeError(DomainError):
    """Raised when the audit log bytes are not JSON or not shaped like an audit event."""
