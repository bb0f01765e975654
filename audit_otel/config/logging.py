# audit_otel/config/logging.py

import json
import logging
from datetime import datetime, timezone

from audit_otel.core.context import audit_id_ctx

_HANDLER_NAME = "audit_otel.diagnostics"


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "audit_id": audit_id_ctx.get(),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def configure_logging(log_level: str):
    """Diagnostics go to stderr; stdout belongs to the console exporter."""
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)
