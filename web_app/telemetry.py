"""JSON-lines record of what the workspace converted and translated.

Each line carries the event name, the history kind and direction, and a
length plus sha256 of the text instead of the text itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import hashlib
import json
import logging
import logging.handlers
import os
from pathlib import Path
import queue
from typing import Final

from convert_logic.application.sync_engine import TranslationRun
from convert_logic.models import HistoryEntry

EVENTS_LOGGER: Final[str] = "vnconv.events"
LOG_DIR_ENV: Final[str] = "VNCONV_LOG_DIR"
LOG_ENABLED_ENV: Final[str] = "VNCONV_LOGGING"

logger = logging.getLogger(__name__)


def log_path() -> Path:
    override = os.environ.get(LOG_DIR_ENV, "").strip()
    base = Path(override) if override else Path.home() / ".vnconv" / "logs"
    return base / "vnconv.log"


def text_meta(value: str) -> dict[str, object]:
    digest = hashlib.sha256(value.encode("utf-8")).hexdigest() if value else ""
    return {"text_len": len(value), "text_hash": digest}


@dataclass(slots=True)
class EventLog:
    events: logging.Logger | None = None
    listener: logging.handlers.QueueListener | None = None

    @classmethod
    def open(cls, path: Path | None = None) -> "EventLog":
        if os.environ.get(LOG_ENABLED_ENV, "1").strip() == "0":
            return cls()
        path = path or log_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as exc:
            logger.warning("Event log disabled, cannot open %s: %s", path, exc)
            return cls()
        handler.setFormatter(logging.Formatter("%(message)s"))
        records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
        events = logging.getLogger(EVENTS_LOGGER)
        events.setLevel(logging.INFO)
        events.propagate = False
        events.handlers.clear()
        events.addHandler(logging.handlers.QueueHandler(records))
        listener = logging.handlers.QueueListener(records, handler)
        listener.start()
        return cls(events=events, listener=listener)

    def server(self, event: str, host: str, port: int) -> None:
        self._write(logging.INFO, event, host=host, port=port)

    def conversion(self, entry: HistoryEntry) -> None:
        self._write(
            logging.INFO,
            "convert.submit",
            kind=entry.kind.value,
            direction=entry.inputs["direction"],
            **text_meta(entry.inputs["text"]),
        )

    def translation(self, direction: str, run: TranslationRun | None) -> None:
        if run is None:
            self._write(logging.INFO, "translate.skipped", direction=direction)
            return
        fields = {
            "kind": run.entry.kind.value,
            "direction": direction,
            **text_meta(run.outcome.text),
        }
        failure = run.outcome.failure
        if failure is None:
            self._write(logging.INFO, "translate.done", **fields)
            return
        self._write(
            logging.ERROR,
            "translate.failed",
            error_type=type(failure).__name__,
            error=str(failure),
            **fields,
        )

    def close(self) -> None:
        if self.listener is not None:
            self.listener.stop()
            for handler in self.listener.handlers:
                handler.close()
            self.listener = None
        if self.events is not None:
            self.events.handlers.clear()
            self.events = None

    def _write(self, level: int, event: str, **fields: object) -> None:
        if self.events is None:
            return
        line = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "event": event,
            **fields,
        }
        self.events.log(level, json.dumps(line, ensure_ascii=False))
