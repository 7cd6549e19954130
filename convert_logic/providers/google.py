from __future__ import annotations

import json
from typing import TypeAlias
from urllib.parse import quote_plus

from convert_logic.errors import ResponseShapeFailure, TransportFailure
from convert_logic.http import AsyncFetcher, FetchError, FetchStatusError

GOOGLE_TRANSLATE_BASE_URL = "https://translate.googleapis.com/translate_a/single"

JsonValue: TypeAlias = (
    dict[str, "JsonValue"] | list["JsonValue"] | str | int | float | bool | None
)


def build_google_url(
    text: str,
    source_lang: str,
    target_lang: str,
    base_url: str = GOOGLE_TRANSLATE_BASE_URL,
) -> str:
    encoded = quote_plus(text)
    params = f"client=gtx&sl={source_lang}&tl={target_lang}&dt=t&q={encoded}"
    return f"{base_url}?{params}"


async def translate_google(
    text: str,
    source_lang: str,
    target_lang: str,
    fetcher: AsyncFetcher,
    base_url: str = GOOGLE_TRANSLATE_BASE_URL,
) -> str:
    url = build_google_url(text, source_lang, target_lang, base_url)
    try:
        payload = await fetcher(url)
    except FetchStatusError as exc:
        raise TransportFailure(str(exc), status_code=exc.status_code) from exc
    except FetchError as exc:
        raise TransportFailure(str(exc)) from exc
    return parse_google_payload(payload)


def parse_google_payload(payload: str) -> str:
    try:
        raw_payload: JsonValue = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ResponseShapeFailure(f"Invalid JSON payload: {exc.msg}") from exc
    if not isinstance(raw_payload, list) or not raw_payload:
        raise ResponseShapeFailure("Expected a non-empty JSON array")
    sentences = raw_payload[0]
    if not isinstance(sentences, list):
        raise ResponseShapeFailure("Expected a list of translated sentences")
    chunks: list[str] = []
    for item in sentences:
        chunk = _sentence_chunk(item)
        if chunk is not None:
            chunks.append(chunk)
    return "".join(chunks)


def _sentence_chunk(item: JsonValue) -> str | None:
    if not isinstance(item, list) or not item:
        raise ResponseShapeFailure("Unexpected sentence entry")
    # Trailing transliteration rows carry None in the translated slot.
    chunk = item[0]
    if chunk is None:
        return None
    if not isinstance(chunk, str):
        raise ResponseShapeFailure("Translated chunk is not a string")
    return chunk
