"""Log attribute model. A keyed, tagged value rendered exhaustively by kind."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence

# Separator for multi-valued fields. Elements containing it are not escaped.
JOIN_SEPARATOR = ","


class AttributeKind(str, Enum):
    """What the attribute value holds; decides how it is rendered."""

    STRING = "string"
    JOINED = "joined"  # sequence of strings, rendered as one delimited string
    DOCUMENT = "document"  # embedded JSON document, passed through opaque
    TIMESTAMP = "timestamp"


def _render_string(value: str) -> str:
    return value


def _render_joined(value: Sequence[str]) -> str:
    return JOIN_SEPARATOR.join(value)


def _render_document(value: Optional[Any]) -> str:
    if value is None:
        return ""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def _render_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    rendered = value.astimezone(timezone.utc).isoformat(timespec="microseconds")
    return rendered.replace("+00:00", "Z")


_RENDERERS: Dict[AttributeKind, Callable[[Any], str]] = {
    AttributeKind.STRING: _render_string,
    AttributeKind.JOINED: _render_joined,
    AttributeKind.DOCUMENT: _render_document,
    AttributeKind.TIMESTAMP: _render_timestamp,
}


@dataclass(frozen=True)
class LogAttribute:
    """
    One (key, value) pair attached to the emitted record.
    Keys are dotted paths under the "audit." namespace.
    """

    key: str
    kind: AttributeKind
    value: Any

    @classmethod
    def string(cls, key: str, value: str) -> "LogAttribute":
        return cls(key=key, kind=AttributeKind.STRING, value=value)

    @classmethod
    def joined(cls, key: str, value: Sequence[str]) -> "LogAttribute":
        return cls(key=key, kind=AttributeKind.JOINED, value=tuple(value))

    @classmethod
    def document(cls, key: str, value: Optional[Any]) -> "LogAttribute":
        return cls(key=key, kind=AttributeKind.DOCUMENT, value=value)

    @classmethod
    def timestamp(cls, key: str, value: Optional[datetime]) -> "LogAttribute":
        return cls(key=key, kind=AttributeKind.TIMESTAMP, value=value)

    def render(self) -> str:
        """Render the value as the string carried on the log record."""
        return _RENDERERS[self.kind](self.value)
