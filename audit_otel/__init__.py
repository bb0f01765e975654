"""Emit a Kubernetes audit event as one OpenTelemetry log record."""

__version__ = "0.1.0"
