from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

import aiohttp

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 6.1; Win64; x64)"

AsyncFetcher = Callable[[str], Awaitable[str]]


class FetchError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class FetchTimeoutError(FetchError):
    pass


class FetchStatusError(FetchError):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


async def fetch_text_async(
    url: str,
    session: aiohttp.ClientSession,
    timeout: float | None = None,
) -> str:
    request_kwargs: dict[str, object] = {"headers": {"User-Agent": DEFAULT_USER_AGENT}}
    if timeout is not None:
        request_kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)
    try:
        async with session.get(url, **request_kwargs) as response:
            payload = await response.text(errors="replace")
            if not 200 <= response.status < 300:
                raise FetchStatusError(
                    f"Failed to fetch {url}: HTTP {response.status}",
                    status_code=response.status,
                )
            return payload
    except FetchStatusError:
        raise
    except asyncio.TimeoutError as exc:
        raise FetchTimeoutError(f"Failed to fetch {url}") from exc
    except Exception as exc:
        raise FetchError(f"Failed to fetch {url}") from exc


def build_async_fetcher(
    session: aiohttp.ClientSession,
    timeout: float | None = None,
) -> AsyncFetcher:
    async def fetch(url: str) -> str:
        return await fetch_text_async(url, session, timeout)

    return fetch
