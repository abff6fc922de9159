from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, TextIO


class StructuredLogger:
    """Writes one JSON object per log event.

    Output goes to ``stream`` when given, otherwise to whatever
    ``sys.stderr`` is at the time of the call.
    """

    def __init__(self, component: str | None = None, stream: TextIO | None = None) -> None:
        self._component = component
        self._stream = stream

    def info(self, message: str, **fields: Any) -> None:
        self._emit("info", message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit("warning", message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._emit("error", message, fields)

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "message": message,
            "fields": fields,
        }
        if self._component:
            payload["component"] = self._component
        stream = self._stream if self._stream is not None else sys.stderr
        print(json.dumps(payload, sort_keys=True, default=str), file=stream)
