# audit_otel/main.py

import logging
import sys
from time import time_ns
from typing import Optional

from opentelemetry._logs import LogRecord, SeverityNumber

from audit_otel.application.attribute_mapper import (
    attributes_to_record_extra,
    map_to_attributes,
)
from audit_otel.application.event_loader import load_event
from audit_otel.config.logging import configure_logging
from audit_otel.config.settings import AppSettings, get_settings
from audit_otel.core.context import audit_id_ctx
from audit_otel.core.errors import AuditOtelError
from audit_otel.telemetry.pipeline import LogPipeline, build_pipeline
from audit_otel.telemetry.resource import build_resource

logger = logging.getLogger(__name__)

# Severity of the emitted record: ERROR (OTel SeverityNumber 17).
EMIT_SEVERITY = SeverityNumber.ERROR
EMIT_SEVERITY_TEXT = "ERROR"


def emit_event(pipeline: LogPipeline, settings: AppSettings) -> None:
    """Load the audit event and emit it as one record on the pipeline."""
    otel_logger = pipeline.get_logger(settings.logger_name)
    event = load_event(settings.audit_log_path)
    audit_id_ctx.set(event.audit_id or None)
    attributes = map_to_attributes(event)
    otel_logger.emit(
        LogRecord(
            timestamp=time_ns(),
            severity_number=EMIT_SEVERITY,
            severity_text=EMIT_SEVERITY_TEXT,
            body=settings.message,
            attributes=attributes_to_record_extra(attributes),
        )
    )
    logger.info("audit event emitted (%d attributes)", len(attributes))


def run(settings: AppSettings, pipeline: Optional[LogPipeline] = None) -> None:
    """
    Build resource and pipeline (SetupError aborts before any logging), then emit
    the event. The pipeline is shut down exactly once on every exit path; a
    shutdown failure is logged and does not replace a load/decode error.
    """
    if pipeline is None:
        resource = build_resource(settings)
        pipeline = build_pipeline(resource, settings)
    with pipeline:
        emit_event(pipeline, settings)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        run(settings)
    except AuditOtelError as e:
        logger.error("%s: %s", type(e).__name__, e.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
