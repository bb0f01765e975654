# audit_otel/core/context.py

import contextvars

audit_id_ctx = contextvars.ContextVar("audit_id", default=None)
