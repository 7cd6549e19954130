from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
import json

from aiohttp import test_utils

from convert_logic.http import AsyncFetcher, FetchStatusError
from web_app.config import load_config
from web_app.server import create_app

Scenario = Callable[[test_utils.TestClient], Awaitable[None]]


def _payload(text: str) -> str:
    return json.dumps([[[text, "source", None, None, 10]]])


async def _echo_fetcher(url: str) -> str:
    return _payload("Xin chào")


def _run(scenario: Scenario, fetcher: AsyncFetcher = _echo_fetcher) -> None:
    async def runner() -> None:
        app = create_app(load_config(), fetcher=fetcher)
        async with test_utils.TestClient(test_utils.TestServer(app)) as client:
            await scenario(client)

    asyncio.run(runner())


def test_index_serves_the_page() -> None:
    async def scenario(client: test_utils.TestClient) -> None:
        response = await client.get("/")
        body = await response.text()
        assert response.status == 200
        assert "Chuyển đổi TCVN3" in body

    _run(scenario)


def test_initial_state_is_empty() -> None:
    async def scenario(client: test_utils.TestClient) -> None:
        data = await (await client.get("/api/state")).json()
        assert data["converter"]["tcvn3_input"] == ""
        assert data["translator"]["is_translating"] is False
        assert data["history"] == []

    _run(scenario)


def test_converter_submit_flow() -> None:
    async def scenario(client: test_utils.TestClient) -> None:
        edited = await client.post(
            "/api/converter/edit", json={"field": "tcvn3_input", "text": "Xin chµo"}
        )
        edited_data = await edited.json()
        assert edited_data["converter"]["unicode_output"] == ""
        assert edited_data["converter"]["can_submit_tcvn3"] is True

        submitted = await client.post("/api/converter/submit", json={"panel": "tcvn3"})
        data = await submitted.json()
        assert data["converter"]["unicode_output"] == "Xin chào"
        assert data["history"][0]["label"] == "TCVN3 → Unicode"
        assert data["history"][0]["input"] == "Xin chµo"
        assert data["history"][0]["output"] == "Xin chào"

    _run(scenario)


def test_translator_edit_keeps_views_in_sync() -> None:
    async def scenario(client: test_utils.TestClient) -> None:
        response = await client.post(
            "/api/translator/edit", json={"field": "unicode", "text": "Tiếng Việt"}
        )
        data = await response.json()
        assert data["translator"]["tcvn3"] == "TiÕng ViÖt"

    _run(scenario)


def test_translate_chinese_to_vietnamese() -> None:
    async def scenario(client: test_utils.TestClient) -> None:
        await client.post("/api/translator/edit", json={"field": "chinese", "text": "你好"})
        response = await client.post(
            "/api/translator/translate", json={"direction": "zh-vi"}
        )
        data = await response.json()
        assert data["status"] == "done"
        assert data["translator"]["unicode"] == "Xin chào"
        assert data["translator"]["tcvn3"] == "Xin chµo"
        assert data["history"][0]["kind"] == "chinese_vietnamese"

    _run(scenario)


def test_failed_translation_is_silent() -> None:
    async def failing(url: str) -> str:
        raise FetchStatusError(f"Failed to fetch {url}", status_code=502)

    async def scenario(client: test_utils.TestClient) -> None:
        await client.post("/api/translator/edit", json={"field": "chinese", "text": "你好"})
        response = await client.post(
            "/api/translator/translate", json={"direction": "zh-vi"}
        )
        data = await response.json()
        assert response.status == 200
        assert data["status"] == "done"
        assert data["translator"]["unicode"] == "你好"

    _run(scenario, failing)


def test_translate_without_text_is_skipped() -> None:
    async def scenario(client: test_utils.TestClient) -> None:
        response = await client.post(
            "/api/translator/translate", json={"direction": "vi-zh"}
        )
        data = await response.json()
        assert data["status"] == "skipped"
        assert data["history"] == []

    _run(scenario)


def test_transcode_preview() -> None:
    async def scenario(client: test_utils.TestClient) -> None:
        response = await client.post(
            "/api/transcode", json={"text": "你好", "source": "utf8", "target": "gbk"}
        )
        data = await response.json()
        assert data["hex"] == "你好".encode("gbk").hex(" ")
        assert data["text"] == "你好"

    _run(scenario)


def test_malformed_requests_are_rejected() -> None:
    async def scenario(client: test_utils.TestClient) -> None:
        not_json = await client.post("/api/converter/edit", data="{")
        assert not_json.status == 400
        assert "error" in await not_json.json()

        not_utf8 = await client.post(
            "/api/converter/edit",
            data=b'{"field":"tcvn3_input","text":"\xff\xfe"}',
            headers={"Content-Type": "application/json"},
        )
        assert not_utf8.status == 400
        assert "error" in await not_utf8.json()

        bad_field = await client.post(
            "/api/translator/edit", json={"field": "klingon", "text": "x"}
        )
        assert bad_field.status == 400

        bad_text = await client.post(
            "/api/converter/edit", json={"field": "tcvn3_input", "text": 5}
        )
        assert bad_text.status == 400

        bad_direction = await client.post(
            "/api/translator/translate", json={"direction": "en-fr"}
        )
        assert bad_direction.status == 400

        not_object = await client.post("/api/converter/submit", json=["tcvn3"])
        assert not_object.status == 400

    _run(scenario)
