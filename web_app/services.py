from __future__ import annotations

from dataclasses import dataclass, field

import aiohttp

from convert_logic.adapters.codec import CodecAdapter
from convert_logic.adapters.translation import TranslationAdapter
from convert_logic.application.history import HistoryLog
from convert_logic.application.sync_engine import SyncEngine
from convert_logic.http import AsyncFetcher, build_async_fetcher
from web_app.config import AppConfig
from web_app.telemetry import EventLog


@dataclass(slots=True)
class AppServices:
    codec: CodecAdapter
    translator: TranslationAdapter
    history: HistoryLog
    engine: SyncEngine
    session: aiohttp.ClientSession | None = None
    events: EventLog = field(default_factory=EventLog)

    @classmethod
    def create(
        cls, config: AppConfig, fetcher: AsyncFetcher | None = None
    ) -> "AppServices":
        """Wire the adapters, the engine and the event log.

        Without an explicit ``fetcher`` an aiohttp session is opened; call
        from inside the running event loop and ``close()`` on shutdown.
        """
        session: aiohttp.ClientSession | None = None
        if fetcher is None:
            session = aiohttp.ClientSession()
            fetcher = build_async_fetcher(
                session, timeout=config.translation.timeout_seconds
            )
        codec = CodecAdapter()
        translator = TranslationAdapter(
            fetcher=fetcher, endpoint=config.translation.endpoint
        )
        history = HistoryLog()
        engine = SyncEngine(codec=codec, translator=translator, history=history)
        return cls(
            codec=codec,
            translator=translator,
            history=history,
            engine=engine,
            session=session,
            events=EventLog.open(),
        )

    async def close(self) -> None:
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None
        self.events.close()
