"""Telemetry layer: OpenTelemetry resource, exporters and the log pipeline. No audit semantics."""

from audit_otel.telemetry.exceptions import SetupError, ShutdownError, TelemetryError
from audit_otel.telemetry.exporters import ExporterKind, build_exporter
from audit_otel.telemetry.pipeline import LogPipeline, build_pipeline
from audit_otel.telemetry.resource import SCHEMA_URL, build_resource, merge_resources

__all__ = [
    "ExporterKind",
    "LogPipeline",
    "SCHEMA_URL",
    "SetupError",
    "ShutdownError",
    "TelemetryError",
    "build_exporter",
    "build_pipeline",
    "build_resource",
    "merge_resources",
]
