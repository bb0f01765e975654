# Application layer: load the audit event and project it into log attributes.

from audit_otel.application.attribute_mapper import (
    ATTRIBUTE_KEYS,
    attributes_to_record_extra,
    map_to_attributes,
)
from audit_otel.application.event_loader import load_event

__all__ = [
    "ATTRIBUTE_KEYS",
    "attributes_to_record_extra",
    "load_event",
    "map_to_attributes",
]
