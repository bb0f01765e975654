"""Pydantic schema for Kubernetes audit events (audit.k8s.io/v1 Event). Read-only after decode."""

from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _nulls_to_empty(value: Any) -> Any:
    """Null elements of a string list decode as "" instead of failing the event."""
    if isinstance(value, list):
        return ["" if item is None else item for item in value]
    return value


class _AuditModel(BaseModel):
    """
    Permissive decoding: unknown keys are ignored, missing or null keys fall back
    to the field default ("" for strings, () for sequences, None for documents).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class UserInfo(_AuditModel):
    """Authenticated user that made the request."""

    username: str = ""
    uid: str = ""
    groups: Tuple[str, ...] = ()
    extra: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)

    @field_validator("groups", mode="before")
    @classmethod
    def null_groups_to_empty(cls, v: Any) -> Any:
        return _nulls_to_empty(v)

    @field_validator("extra", mode="before")
    @classmethod
    def null_extra_values_to_empty(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {k: _nulls_to_empty(items) for k, items in v.items() if items is not None}
        return v


class ObjectReference(_AuditModel):
    """Object the request targeted."""

    resource: str = ""
    namespace: str = ""
    name: str = ""
    uid: str = ""
    api_group: str = Field("", alias="apiGroup")
    api_version: str = Field("", alias="apiVersion")
    resource_version: str = Field("", alias="resourceVersion")
    subresource: str = ""


class AuditEvent(_AuditModel):
    """
    One audit record as written by the API server's log backend.
    requestObject/responseObject are arbitrary JSON; responseStatus is a metav1.Status object.
    """

    kind: str = ""
    api_version: str = Field("", alias="apiVersion")
    level: str = ""
    audit_id: str = Field("", alias="auditID")
    stage: str = ""
    request_uri: str = Field("", alias="requestURI")
    verb: str = ""
    user: UserInfo = Field(default_factory=UserInfo)
    impersonated_user: Optional[UserInfo] = Field(None, alias="impersonatedUser")
    source_ips: Tuple[str, ...] = Field((), alias="sourceIPs")
    user_agent: str = Field("", alias="userAgent")
    object_ref: ObjectReference = Field(default_factory=ObjectReference, alias="objectRef")
    response_status: Optional[Dict[str, Any]] = Field(None, alias="responseStatus")
    request_object: Optional[Any] = Field(None, alias="requestObject")
    response_object: Optional[Any] = Field(None, alias="responseObject")
    request_received_timestamp: Optional[datetime] = Field(None, alias="requestReceivedTimestamp")
    stage_timestamp: Optional[datetime] = Field(None, alias="stageTimestamp")
    annotations: Dict[str, str] = Field(default_factory=dict)

    @field_validator("source_ips", mode="before")
    @classmethod
    def null_source_ips_to_empty(cls, v: Any) -> Any:
        return _nulls_to_empty(v)
