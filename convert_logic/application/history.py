from __future__ import annotations

from collections import deque
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType

from convert_logic.models import HistoryEntry, HistoryKind


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _default_entries() -> deque[HistoryEntry]:
    return deque()


@dataclass(slots=True)
class HistoryLog:
    clock: Callable[[], datetime] = _utc_now
    _entries: deque[HistoryEntry] = field(default_factory=_default_entries)
    _last_id: int = 0

    def append(
        self,
        kind: HistoryKind,
        inputs: Mapping[str, str],
        outputs: Mapping[str, str],
    ) -> HistoryEntry:
        timestamp = self.clock()
        entry = HistoryEntry(
            id=self._next_id(timestamp),
            kind=kind,
            inputs=MappingProxyType(dict(inputs)),
            outputs=MappingProxyType(dict(outputs)),
            timestamp=timestamp,
        )
        self._entries.appendleft(entry)
        return entry

    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _next_id(self, timestamp: datetime) -> int:
        # Millisecond timestamps collide for back-to-back appends.
        candidate = int(timestamp.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate
