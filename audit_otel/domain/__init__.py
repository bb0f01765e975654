"""Domain layer: the audit event schema, log attribute model, exceptions. No OpenTelemetry."""

from audit_otel.domain.exceptions import (
    DomainError,
    EventDecodeError,
    EventReadError,
)
from audit_otel.domain.models import AttributeKind, LogAttribute
from audit_otel.domain.schemas import AuditEvent, ObjectReference, UserInfo

__all__ = [
    "AttributeKind",
    "AuditEvent",
    "DomainError",
    "EventDecodeError",
    "EventReadError",
    "LogAttribute",
    "ObjectReference",
    "UserInfo",
]
