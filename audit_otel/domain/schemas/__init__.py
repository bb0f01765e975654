"""Domain schemas. The decoded audit event."""

from audit_otel.domain.schemas.audit_event import (
    AuditEvent,
    ObjectReference,
    UserInfo,
)

__all__ = [
    "AuditEvent",
    "ObjectReference",
    "UserInfo",
]
