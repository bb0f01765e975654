"""Audit event to log attribute projection. Pure and total; no validation of field contents."""

from typing import Dict, List, Sequence

from audit_otel.domain.models.log_attribute import LogAttribute
from audit_otel.domain.schemas.audit_event import AuditEvent

# Emission order of the mapped keys.
ATTRIBUTE_KEYS = (
    "audit.level",
    "audit.auditID",
    "audit.stage",
    "audit.requestURI",
    "audit.verb",
    "audit.user.username",
    "audit.user.uid",
    "audit.user.groups",
    "audit.sourceIPs",
    "audit.userAgent",
    "audit.objectRef.uid",
    "audit.objectRef.resource",
    "audit.objectRef.name",
    "audit.objectRef.namespace",
    "audit.objectRef.apiGroup",
    "audit.objectRef.apiVersion",
    "audit.objectRef.resourceVersion",
    "audit.requestObject",
    "audit.responseObject",
    "audit.responseStatus",
    "audit.requestReceivedTimestamp",
    "audit.stageTimestamp",
)


def map_to_attributes(event: AuditEvent) -> List[LogAttribute]:
    """
    Project the fixed audit fields into attributes, in ATTRIBUTE_KEYS order.
    user.groups and sourceIPs are joined with "," (lossy if an element contains a comma).
    """
    user = event.user
    ref = event.object_ref
    return [
        LogAttribute.string("audit.level", event.level),
        LogAttribute.string("audit.auditID", event.audit_id),
        LogAttribute.string("audit.stage", event.stage),
        LogAttribute.string("audit.requestURI", event.request_uri),
        LogAttribute.string("audit.verb", event.verb),
        LogAttribute.string("audit.user.username", user.username),
        LogAttribute.string("audit.user.uid", user.uid),
        LogAttribute.joined("audit.user.groups", user.groups),
        LogAttribute.joined("audit.sourceIPs", event.source_ips),
        LogAttribute.string("audit.userAgent", event.user_agent),
        LogAttribute.string("audit.objectRef.uid", ref.uid),
        LogAttribute.string("audit.objectRef.resource", ref.resource),
        LogAttribute.string("audit.objectRef.name", ref.name),
        LogAttribute.string("audit.objectRef.namespace", ref.namespace),
        LogAttribute.string("audit.objectRef.apiGroup", ref.api_group),
        LogAttribute.string("audit.objectRef.apiVersion", ref.api_version),
        LogAttribute.string("audit.objectRef.resourceVersion", ref.resource_version),
        LogAttribute.document("audit.requestObject", event.request_object),
        LogAttribute.document("audit.responseObject", event.response_object),
        LogAttribute.document("audit.responseStatus", event.response_status),
        LogAttribute.timestamp("audit.requestReceivedTimestamp", event.request_received_timestamp),
        LogAttribute.timestamp("audit.stageTimestamp", event.stage_timestamp),
    ]


def attributes_to_record_extra(attributes: Sequence[LogAttribute]) -> Dict[str, str]:
    """Flatten attributes into the mapping passed as the log record's extra. Order preserved."""
    return {attr.key: attr.render() for attr in attributes}
