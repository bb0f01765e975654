"""Read one audit event from disk. Blocking, whole-file read."""

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from audit_otel.domain.exceptions import EventDecodeError, EventReadError
from audit_otel.domain.schemas.audit_event import AuditEvent

logger = logging.getLogger(__name__)


def load_event(path: Union[str, Path]) -> AuditEvent:
    """
    Read the file at path and decode it as a single JSON audit event.
    Raises EventReadError if the file cannot be read, EventDecodeError if the
    bytes are not a JSON object of the expected shape.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise EventReadError(f"cannot read audit event from {path}: {e.strerror or e}") from e

    try:
        event = AuditEvent.model_validate_json(raw)
    except ValidationError as e:
        raise EventDecodeError(f"cannot decode audit event from {path}: {_first_error(e)}") from e

    logger.debug("loaded audit event %s from %s (%d bytes)", event.audit_id, path, len(raw))
    return event


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first.get('msg')}"
    return str(first.get("msg"))
