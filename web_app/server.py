from __future__ import annotations

import json
from typing import TypeVar

from aiohttp import web

from convert_logic.application.sync_engine import (
    ConverterField,
    SyncEngine,
    TranslatorField,
)
from convert_logic.http import AsyncFetcher
from convert_logic.models import Encoding
from web_app.config import AppConfig
from web_app.services import AppServices
from web_app.templates import HTML_TEMPLATE
from web_app.view_state import (
    converter_payload,
    history_payload,
    translator_payload,
)

SERVICES_KEY = web.AppKey("services", AppServices)

_CONVERTER_FIELDS = {item.value: item for item in ConverterField}
_TRANSLATOR_FIELDS = {item.value: item for item in TranslatorField}
_PANELS = {"tcvn3": Encoding.TCVN3, "unicode": Encoding.UNICODE}

ChoiceT = TypeVar("ChoiceT")


def create_app(config: AppConfig, fetcher: AsyncFetcher | None = None) -> web.Application:
    app = web.Application()

    async def start_services(app: web.Application) -> None:
        services = AppServices.create(config, fetcher=fetcher)
        services.events.server("app.started", config.server.host, config.server.port)
        app[SERVICES_KEY] = services

    async def stop_services(app: web.Application) -> None:
        services = app[SERVICES_KEY]
        services.events.server("app.stopped", config.server.host, config.server.port)
        await services.close()

    app.on_startup.append(start_services)
    app.on_cleanup.append(stop_services)
    app.router.add_get("/", index)
    app.router.add_get("/api/state", get_state)
    app.router.add_post("/api/converter/edit", converter_edit)
    app.router.add_post("/api/converter/submit", converter_submit)
    app.router.add_post("/api/translator/edit", translator_edit)
    app.router.add_post("/api/translator/translate", translator_translate)
    app.router.add_post("/api/transcode", transcode)
    return app


async def index(request: web.Request) -> web.Response:
    del request
    return web.Response(text=HTML_TEMPLATE, content_type="text/html")


async def get_state(request: web.Request) -> web.Response:
    return web.json_response(_state_payload(_engine(request)))


async def converter_edit(request: web.Request) -> web.Response:
    data = await _read_json(request)
    target = _choice(data, "field", _CONVERTER_FIELDS)
    engine = _engine(request)
    engine.edit_converter(target, _text(data, "text"))
    return web.json_response(_state_payload(engine))


async def converter_submit(request: web.Request) -> web.Response:
    data = await _read_json(request)
    panel = _choice(data, "panel", _PANELS)
    engine = _engine(request)
    entry = engine.submit_converter(panel)
    if entry is not None:
        request.app[SERVICES_KEY].events.conversion(entry)
    return web.json_response(_state_payload(engine))


async def translator_edit(request: web.Request) -> web.Response:
    data = await _read_json(request)
    target = _choice(data, "field", _TRANSLATOR_FIELDS)
    engine = _engine(request)
    engine.edit_translator(target, _text(data, "text"))
    return web.json_response(_state_payload(engine))


async def translator_translate(request: web.Request) -> web.Response:
    data = await _read_json(request)
    direction = _text(data, "direction")
    engine = _engine(request)
    if direction == "zh-vi":
        run = await engine.translate_chinese_to_vietnamese()
    elif direction == "vi-zh":
        run = await engine.translate_vietnamese_to_chinese()
    else:
        raise _bad_request(f"Unknown direction: {direction!r}")
    request.app[SERVICES_KEY].events.translation(direction, run)
    payload = _state_payload(engine)
    payload["status"] = "skipped" if run is None else "done"
    return web.json_response(payload)


async def transcode(request: web.Request) -> web.Response:
    data = await _read_json(request)
    text = _text(data, "text")
    source = _text(data, "source") or "utf8"
    target = _text(data, "target") or "utf8"
    codec = request.app[SERVICES_KEY].codec
    raw = codec.encode(text, source).value
    converted = codec.convert_encoding(raw, source, target).value
    if isinstance(converted, str):
        converted = converted.encode("utf-8")
    return web.json_response(
        {
            "hex": converted.hex(" "),
            "text": codec.decode(converted, target).value,
        }
    )


def _engine(request: web.Request) -> SyncEngine:
    return request.app[SERVICES_KEY].engine


def _state_payload(engine: SyncEngine) -> dict[str, object]:
    return {
        "converter": converter_payload(engine.converter_state),
        "translator": translator_payload(engine.translator_state),
        "history": history_payload(engine.history.entries()),
    }


async def _read_json(request: web.Request) -> dict[str, object]:
    try:
        payload: object = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise _bad_request("Request body is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise _bad_request("Request body must be a JSON object")
    return payload


def _text(data: dict[str, object], key: str) -> str:
    value = data.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _bad_request(f"Field {key!r} must be a string")
    return value


def _choice(data: dict[str, object], key: str, choices: dict[str, ChoiceT]) -> ChoiceT:
    value = _text(data, key)
    if value not in choices:
        raise _bad_request(f"Unknown {key}: {value!r}")
    return choices[value]


def _bad_request(message: str) -> web.HTTPBadRequest:
    return web.HTTPBadRequest(
        text=json.dumps({"error": message}, ensure_ascii=False),
        content_type="application/json",
    )
