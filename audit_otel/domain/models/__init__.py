"""Domain models. Log attribute variant."""

from audit_otel.domain.models.log_attribute import AttributeKind, LogAttribute

__all__ = [
    "AttributeKind",
    "LogAttribute",
]
