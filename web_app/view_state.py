from __future__ import annotations

from datetime import datetime

from convert_logic.application.sync_engine import ConverterState, TranslatorState
from convert_logic.models import ConvertDirection, HistoryEntry, HistoryKind

TIME_FORMAT = "%H:%M:%S"

_DIRECTION_LABELS = {
    ConvertDirection.TCVN3_TO_UNICODE.value: "TCVN3 → Unicode",
    ConvertDirection.UNICODE_TO_TCVN3.value: "Unicode → TCVN3",
}
_KIND_LABELS = {
    HistoryKind.CHINESE_VIETNAMESE: "Trung → Việt",
    HistoryKind.VIETNAMESE_CHINESE: "Việt → Trung",
}
# (input key, output key) shown in the history list.
_SUMMARY_KEYS = {
    HistoryKind.ENCODING_TRANSLATE: ("text", "text"),
    HistoryKind.CHINESE_VIETNAMESE: ("chinese", "vietnamese_unicode"),
    HistoryKind.VIETNAMESE_CHINESE: ("vietnamese_unicode", "chinese"),
}


def converter_payload(state: ConverterState) -> dict[str, object]:
    return {
        "tcvn3_input": state.tcvn3_input,
        "unicode_output": state.unicode_output,
        "unicode_input": state.unicode_input,
        "tcvn3_output": state.tcvn3_output,
        "can_submit_tcvn3": bool(state.tcvn3_input.strip()),
        "can_submit_unicode": bool(state.unicode_input.strip()),
    }


def translator_payload(state: TranslatorState) -> dict[str, object]:
    return {
        "chinese": state.chinese,
        "unicode": state.vietnamese_unicode,
        "tcvn3": state.vietnamese_tcvn3,
        "is_translating": state.is_translating,
    }


def history_payload(entries: list[HistoryEntry]) -> list[dict[str, object]]:
    return [_history_item(entry) for entry in entries]


def history_label(entry: HistoryEntry) -> str:
    if entry.kind is HistoryKind.ENCODING_TRANSLATE:
        direction = entry.inputs.get("direction", "")
        return _DIRECTION_LABELS.get(direction, direction)
    return _KIND_LABELS[entry.kind]


def format_time(value: datetime) -> str:
    return value.astimezone().strftime(TIME_FORMAT)


def _history_item(entry: HistoryEntry) -> dict[str, object]:
    input_key, output_key = _SUMMARY_KEYS[entry.kind]
    return {
        "id": entry.id,
        "kind": entry.kind.value,
        "label": history_label(entry),
        "input": entry.inputs[input_key],
        "output": entry.outputs[output_key],
        "inputs": dict(entry.inputs),
        "outputs": dict(entry.outputs),
        "timestamp": format_time(entry.timestamp),
    }
