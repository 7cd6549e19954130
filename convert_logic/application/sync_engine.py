from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
import logging

from convert_logic.adapters.codec import CodecAdapter
from convert_logic.adapters.translation import TranslationAdapter
from convert_logic.application.history import HistoryLog
from convert_logic.models import (
    ConvertDirection,
    EncodedText,
    Encoding,
    HistoryEntry,
    HistoryKind,
    TranslationOutcome,
    TranslationPair,
)

CHINESE_LANG = "zh"
VIETNAMESE_LANG = "vi"

logger = logging.getLogger(__name__)


class ConverterField(Enum):
    TCVN3_INPUT = "tcvn3_input"
    UNICODE_OUTPUT = "unicode_output"
    UNICODE_INPUT = "unicode_input"
    TCVN3_OUTPUT = "tcvn3_output"


class TranslatorField(Enum):
    CHINESE = "chinese"
    VIETNAMESE_UNICODE = "unicode"
    VIETNAMESE_TCVN3 = "tcvn3"


@dataclass(frozen=True, slots=True)
class ConverterState:
    tcvn3_input: str = ""
    unicode_output: str = ""
    unicode_input: str = ""
    tcvn3_output: str = ""


@dataclass(frozen=True, slots=True)
class TranslatorState:
    chinese: str = ""
    vietnamese_unicode: str = ""
    vietnamese_tcvn3: str = ""
    is_translating: bool = False

    def as_pair(self) -> TranslationPair:
        return TranslationPair(
            chinese=self.chinese,
            vietnamese_unicode=EncodedText.unicode(self.vietnamese_unicode),
            vietnamese_tcvn3=EncodedText.tcvn3(self.vietnamese_tcvn3),
        )


@dataclass(frozen=True, slots=True)
class ConverterSubmission:
    state: ConverterState
    direction: ConvertDirection
    source: str
    output: str


@dataclass(frozen=True, slots=True)
class TranslationRun:
    outcome: TranslationOutcome
    pair: TranslationPair
    entry: HistoryEntry


# Converter screen: edits never propagate, only an explicit submit converts.


def edit_converter(
    state: ConverterState, target: ConverterField, text: str
) -> ConverterState:
    return replace(state, **{target.value: text})


def submit_converter(
    state: ConverterState, panel: Encoding, codec: CodecAdapter
) -> ConverterSubmission | None:
    if panel is Encoding.TCVN3:
        source = state.tcvn3_input
        if not source.strip():
            return None
        output = codec.to_unicode(source).value
        return ConverterSubmission(
            state=replace(state, unicode_output=output),
            direction=ConvertDirection.TCVN3_TO_UNICODE,
            source=source,
            output=output,
        )
    source = state.unicode_input
    if not source.strip():
        return None
    output = codec.to_tcvn3(source).value
    return ConverterSubmission(
        state=replace(state, tcvn3_output=output),
        direction=ConvertDirection.UNICODE_TO_TCVN3,
        source=source,
        output=output,
    )


# Translator screen: every edit of a Vietnamese view resyncs the other one.


def edit_translator(
    state: TranslatorState, target: TranslatorField, text: str, codec: CodecAdapter
) -> TranslatorState:
    if target is TranslatorField.VIETNAMESE_TCVN3:
        return replace(
            state,
            vietnamese_tcvn3=text,
            vietnamese_unicode=codec.to_unicode(text).value,
        )
    if target is TranslatorField.VIETNAMESE_UNICODE:
        return replace(
            state,
            vietnamese_unicode=text,
            vietnamese_tcvn3=codec.to_tcvn3(text).value,
        )
    return replace(state, chinese=text)


def begin_translation(state: TranslatorState) -> TranslatorState:
    return replace(state, is_translating=True)


def finish_translation(state: TranslatorState) -> TranslatorState:
    return replace(state, is_translating=False)


def apply_vietnamese_result(
    state: TranslatorState, translated: str, codec: CodecAdapter
) -> TranslatorState:
    return replace(
        state,
        vietnamese_unicode=translated,
        vietnamese_tcvn3=codec.to_tcvn3(translated).value,
    )


def prepare_chinese_source(
    state: TranslatorState, codec: CodecAdapter
) -> tuple[TranslatorState, str] | None:
    """Pick the Vietnamese text to translate into Chinese.

    A non-empty TCVN3 view wins and overwrites the Unicode view with its
    conversion; otherwise the Unicode view is used as typed. A winning view
    that holds only whitespace means there is nothing to translate.
    """
    if state.vietnamese_tcvn3:
        source = codec.to_unicode(state.vietnamese_tcvn3).value
        if not source.strip():
            return None
        return replace(state, vietnamese_unicode=source), source
    if state.vietnamese_unicode.strip():
        return state, state.vietnamese_unicode
    return None


def apply_chinese_result(
    state: TranslatorState,
    translated: str,
    tcvn3_before: str,
    codec: CodecAdapter,
) -> TranslatorState:
    # A TCVN3 view that was filled before the trigger is kept as is.
    if tcvn3_before:
        return replace(state, chinese=translated)
    return replace(
        state,
        chinese=translated,
        vietnamese_tcvn3=codec.to_tcvn3(state.vietnamese_unicode).value,
    )


@dataclass(slots=True)
class SyncEngine:
    codec: CodecAdapter
    translator: TranslationAdapter
    history: HistoryLog
    converter_state: ConverterState = field(default_factory=ConverterState)
    translator_state: TranslatorState = field(default_factory=TranslatorState)

    @property
    def is_translating(self) -> bool:
        return self.translator_state.is_translating

    def edit_converter(self, target: ConverterField, text: str) -> ConverterState:
        self.converter_state = edit_converter(self.converter_state, target, text)
        return self.converter_state

    def submit_converter(self, panel: Encoding) -> HistoryEntry | None:
        submission = submit_converter(self.converter_state, panel, self.codec)
        if submission is None:
            return None
        self.converter_state = submission.state
        return self.history.append(
            HistoryKind.ENCODING_TRANSLATE,
            inputs={"direction": submission.direction.value, "text": submission.source},
            outputs={"direction": submission.direction.value, "text": submission.output},
        )

    def edit_translator(self, target: TranslatorField, text: str) -> TranslatorState:
        self.translator_state = edit_translator(
            self.translator_state, target, text, self.codec
        )
        return self.translator_state

    async def translate_chinese_to_vietnamese(self) -> TranslationRun | None:
        state = self.translator_state
        if state.is_translating or not state.chinese.strip():
            return None
        source = state.chinese
        self.translator_state = begin_translation(state)
        try:
            outcome = await self.translator.translate(
                source, CHINESE_LANG, VIETNAMESE_LANG
            )
            self.translator_state = apply_vietnamese_result(
                self.translator_state, outcome.text, self.codec
            )
            current = self.translator_state
            entry = self.history.append(
                HistoryKind.CHINESE_VIETNAMESE,
                inputs={"chinese": source},
                outputs={
                    "vietnamese_unicode": current.vietnamese_unicode,
                    "vietnamese_tcvn3": current.vietnamese_tcvn3,
                },
            )
        finally:
            self.translator_state = finish_translation(self.translator_state)
        return TranslationRun(
            outcome=outcome,
            pair=self.translator_state.as_pair(),
            entry=entry,
        )

    async def translate_vietnamese_to_chinese(self) -> TranslationRun | None:
        state = self.translator_state
        if state.is_translating:
            return None
        prepared = prepare_chinese_source(state, self.codec)
        if prepared is None:
            logger.debug("Nothing to translate into Chinese")
            return None
        state, source = prepared
        tcvn3_before = state.vietnamese_tcvn3
        self.translator_state = begin_translation(state)
        try:
            outcome = await self.translator.translate(
                source, VIETNAMESE_LANG, CHINESE_LANG
            )
            self.translator_state = apply_chinese_result(
                self.translator_state, outcome.text, tcvn3_before, self.codec
            )
            current = self.translator_state
            entry = self.history.append(
                HistoryKind.VIETNAMESE_CHINESE,
                inputs={
                    "vietnamese_unicode": source,
                    "vietnamese_tcvn3": current.vietnamese_tcvn3,
                },
                outputs={"chinese": current.chinese},
            )
        finally:
            self.translator_state = finish_translation(self.translator_state)
        return TranslationRun(
            outcome=outcome,
            pair=self.translator_state.as_pair(),
            entry=entry,
        )
