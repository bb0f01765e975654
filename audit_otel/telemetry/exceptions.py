"""Telemetry-layer exceptions. Typed, wrap the SDK's own errors."""

from audit_otel.core.errors import AuditOtelError


class TelemetryError(AuditOtelError):
    """Base for all telemetry-layer errors."""


class SetupError(TelemetryError):
    """Raised when the resource or the log pipeline cannot be built. Fatal before any logging."""


class ShutdownError(TelemetryError):
    """Raised when the pipeline fails to flush or release the exporter at the end of the run."""
