"""Shared fixtures: sample audit events, audit log files, settings, in-memory exporter."""

import json
import os

import pytest
from opentelemetry.sdk._logs.export import InMemoryLogRecordExporter

from audit_otel.config.settings import AppSettings, get_settings


def _sample_event() -> dict:
    return {
        "kind": "Event",
        "apiVersion": "audit.k8s.io/v1",
        "level": "Metadata",
        "auditID": "abc-123",
        "stage": "ResponseComplete",
        "requestURI": "/api/v1/namespaces/default/pods/web-0",
        "verb": "get",
        "user": {
            "username": "alice",
            "uid": "u-1",
            "groups": ["system:masters", "system:authenticated"],
        },
        "sourceIPs": ["10.0.0.1", "10.0.0.2"],
        "userAgent": "kubectl/v1.30.2",
        "objectRef": {
            "resource": "pods",
            "namespace": "default",
            "name": "web-0",
            "uid": "pod-uid-1",
            "apiGroup": "",
            "apiVersion": "v1",
            "resourceVersion": "42",
        },
        "responseStatus": {"metadata": {}, "code": 200},
        "requestObject": {"kind": "DeleteOptions", "apiVersion": "v1"},
        "requestReceivedTimestamp": "2024-06-11T09:14:02.518233Z",
        "stageTimestamp": "2024-06-11T09:14:02.521907Z",
    }


@pytest.fixture
def sample_event() -> dict:
    return _sample_event()


@pytest.fixture
def minimal_event() -> dict:
    return {"level": "Metadata", "auditID": "abc-123", "stage": "ResponseComplete", "verb": "get"}


@pytest.fixture
def write_audit_log(tmp_path):
    """Write a payload (dict or raw str) to an audit log file and return its path."""

    def _write(payload, name: str = "audit.log"):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def audit_log(write_audit_log, sample_event):
    return write_audit_log(sample_event)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Tests never pick up AUDIT_OTEL_* from the environment or the settings cache."""
    for key in list(os.environ):
        if key.upper().startswith("AUDIT_OTEL_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings():
    def _make(**overrides) -> AppSettings:
        # Long delay so only size-triggered exports and explicit flushes happen.
        overrides.setdefault("schedule_delay_millis", 60000)
        return AppSettings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def memory_exporter():
    return InMemoryLogRecordExporter()


@pytest.fixture
def exported_records(memory_exporter):
    """Log records the exporter has received, unwrapped from their resource and scope."""

    def _records() -> list:
        return [item.log_record for item in memory_exporter.get_finished_logs()]

    return _records
