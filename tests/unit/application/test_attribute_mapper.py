"""Attribute mapper tests: key set and order, joins, minimal input, rendering."""

from audit_otel.application.attribute_mapper import (
    ATTRIBUTE_KEYS,
    attributes_to_record_extra,
    map_to_attributes,
)
from audit_otel.domain.models.log_attribute import AttributeKind
from audit_otel.domain.schemas.audit_event import AuditEvent


def test_mapping_produces_every_key_once_in_order(sample_event):
    """Exactly the fixed key set, each present once, in emission order."""
    attrs = map_to_attributes(AuditEvent.model_validate(sample_event))
    keys = [a.key for a in attrs]
    assert keys == list(ATTRIBUTE_KEYS)
    assert len(keys) == len(set(keys)) == 22
    assert all(k.startswith("audit.") for k in keys)


def test_mapping_values(sample_event):
    extra = attributes_to_record_extra(map_to_attributes(AuditEvent.model_validate(sample_event)))
    assert extra["audit.level"] == "Metadata"
    assert extra["audit.auditID"] == "abc-123"
    assert extra["audit.stage"] == "ResponseComplete"
    assert extra["audit.requestURI"] == "/api/v1/namespaces/default/pods/web-0"
    assert extra["audit.verb"] == "get"
    assert extra["audit.user.username"] == "alice"
    assert extra["audit.user.uid"] == "u-1"
    assert extra["audit.user.groups"] == "system:masters,system:authenticated"
    assert extra["audit.sourceIPs"] == "10.0.0.1,10.0.0.2"
    assert extra["audit.userAgent"] == "kubectl/v1.30.2"
    assert extra["audit.objectRef.uid"] == "pod-uid-1"
    assert extra["audit.objectRef.resource"] == "pods"
    assert extra["audit.objectRef.name"] == "web-0"
    assert extra["audit.objectRef.namespace"] == "default"
    assert extra["audit.objectRef.apiGroup"] == ""
    assert extra["audit.objectRef.apiVersion"] == "v1"
    assert extra["audit.objectRef.resourceVersion"] == "42"
    assert extra["audit.requestObject"] == '{"kind":"DeleteOptions","apiVersion":"v1"}'
    assert extra["audit.responseObject"] == ""
    assert extra["audit.responseStatus"] == '{"metadata":{},"code":200}'
    assert extra["audit.requestReceivedTimestamp"] == "2024-06-11T09:14:02.518233Z"
    assert extra["audit.stageTimestamp"] == "2024-06-11T09:14:02.521907Z"


def test_extra_preserves_order(sample_event):
    extra = attributes_to_record_extra(map_to_attributes(AuditEvent.model_validate(sample_event)))
    assert list(extra) == list(ATTRIBUTE_KEYS)


def test_attribute_kinds(sample_event):
    """Multi-valued fields are joined, embedded documents opaque, timestamps tagged."""
    kinds = {a.key: a.kind for a in map_to_attributes(AuditEvent.model_validate(sample_event))}
    assert kinds["audit.user.groups"] == AttributeKind.JOINED
    assert kinds["audit.sourceIPs"] == AttributeKind.JOINED
    assert kinds["audit.requestObject"] == AttributeKind.DOCUMENT
    assert kinds["audit.responseObject"] == AttributeKind.DOCUMENT
    assert kinds["audit.responseStatus"] == AttributeKind.DOCUMENT
    assert kinds["audit.requestReceivedTimestamp"] == AttributeKind.TIMESTAMP
    assert kinds["audit.stageTimestamp"] == AttributeKind.TIMESTAMP
    assert kinds["audit.verb"] == AttributeKind.STRING


def test_groups_join():
    event = AuditEvent.model_validate({"user": {"groups": ["a", "b"]}})
    extra = attributes_to_record_extra(map_to_attributes(event))
    assert extra["audit.user.groups"] == "a,b"


def test_empty_groups_join_to_empty_string():
    event = AuditEvent.model_validate({"user": {"username": "a", "groups": []}})
    extra = attributes_to_record_extra(map_to_attributes(event))
    assert extra["audit.user.groups"] == ""


def test_minimal_event_maps_to_zero_values(minimal_event):
    """Minimal input: no failure, empty strings for everything unset."""
    extra = attributes_to_record_extra(map_to_attributes(AuditEvent.model_validate(minimal_event)))
    assert list(extra) == list(ATTRIBUTE_KEYS)
    assert extra["audit.level"] == "Metadata"
    assert extra["audit.auditID"] == "abc-123"
    assert extra["audit.verb"] == "get"
    unset = set(ATTRIBUTE_KEYS) - {"audit.level", "audit.auditID", "audit.stage", "audit.verb"}
    assert all(extra[k] == "" for k in unset)


def test_mapping_does_not_validate_contents():
    """Unknown verbs and malformed IPs pass straight through."""
    event = AuditEvent.model_validate({"verb": "frobnicate", "sourceIPs": ["999.1", ""]})
    extra = attributes_to_record_extra(map_to_attributes(event))
    assert extra["audit.verb"] == "frobnicate"
    assert extra["audit.sourceIPs"] == "999.1,"


def test_mapping_is_deterministic(sample_event):
    event = AuditEvent.model_validate(sample_event)
    assert map_to_attributes(event) == map_to_attributes(event)


def test_fields_outside_the_projection_are_ignored(sample_event):
    sample_event["annotations"] = {"authorization.k8s.io/decision": "allow"}
    sample_event["impersonatedUser"] = {"username": "root"}
    extra = attributes_to_record_extra(map_to_attributes(AuditEvent.model_validate(sample_event)))
    assert "root" not in extra.values()
    assert list(extra) == list(ATTRIBUTE_KEYS)


def test_null_group_maps_to_empty_entry():
    """A null list element decodes as "" and keeps its slot in the joined value."""
    event = AuditEvent.model_validate_json('{"user":{"groups":["a",null]}}')
    extra = attributes_to_record_extra(map_to_attributes(event))
    assert extra["audit.user.groups"] == "a,"


def test_null_source_ip_maps_to_empty_entry():
    event = AuditEvent.model_validate_json('{"sourceIPs":[null,"10.0.0.1"]}')
    extra = attributes_to_record_extra(map_to_attributes(event))
    assert extra["audit.sourceIPs"] == ",10.0.0.1"
