from __future__ import annotations

from dataclasses import dataclass
import logging

from convert_logic.errors import TranslationFailure
from convert_logic.http import AsyncFetcher
from convert_logic.models import TranslationOutcome
from convert_logic.providers.google import GOOGLE_TRANSLATE_BASE_URL, translate_google

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TranslationAdapter:
    fetcher: AsyncFetcher
    endpoint: str = GOOGLE_TRANSLATE_BASE_URL

    async def translate(
        self, text: str, source_lang: str, target_lang: str
    ) -> TranslationOutcome:
        if not text or not text.strip():
            logger.debug("Skipping translation of blank text")
            return TranslationOutcome(text="", requested=False)
        try:
            translated = await translate_google(
                text, source_lang, target_lang, self.fetcher, self.endpoint
            )
        except TranslationFailure as exc:
            logger.warning(
                "Translation %s -> %s failed (%s): %s",
                source_lang,
                target_lang,
                exc.__class__.__name__,
                exc,
            )
            return TranslationOutcome(text=text, failure=exc)
        return TranslationOutcome(text=translated)
