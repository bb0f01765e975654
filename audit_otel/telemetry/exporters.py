"""Log record exporters: pretty-printed console (default) or OTLP over HTTP."""

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Optional, TextIO

from opentelemetry.exporter.otlp.proto.http._log_exporter import OTLPLogExporter
from opentelemetry.sdk._logs.export import ConsoleLogRecordExporter, LogRecordExporter

from audit_otel.telemetry.exceptions import SetupError

if TYPE_CHECKING:
    from audit_otel.config.settings import AppSettings


class ExporterKind(str, Enum):
    """Where finished log records are sent."""

    CONSOLE = "console"
    OTLP_HTTP = "otlp_http"


def console_exporter(out: Optional[TextIO] = None, indent: Optional[int] = 4) -> ConsoleLogRecordExporter:
    """Console exporter writing one indented JSON document per record."""

    def formatter(record) -> str:
        return record.to_json(indent=indent) + os.linesep

    return ConsoleLogRecordExporter(out=out or sys.stdout, formatter=formatter)


def otlp_http_exporter(endpoint: Optional[str] = None) -> OTLPLogExporter:
    """OTLP/HTTP exporter. Without an endpoint the exporter reads OTEL_EXPORTER_OTLP_* itself."""
    if endpoint:
        return OTLPLogExporter(endpoint=endpoint)
    return OTLPLogExporter()


def build_exporter(settings: "AppSettings", out: Optional[TextIO] = None) -> LogRecordExporter:
    """Build the exporter selected by settings.exporter. Raises SetupError."""
    kind = ExporterKind(settings.exporter)
    try:
        if kind is ExporterKind.CONSOLE:
            return console_exporter(out=out, indent=settings.console_indent)
        if kind is ExporterKind.OTLP_HTTP:
            return otlp_http_exporter(settings.otlp_endpoint)
    except (TypeError, ValueError) as e:
        raise SetupError(f"cannot build {kind.value} log exporter: {e}") from e
    raise SetupError(f"unsupported log exporter: {kind.value}")
