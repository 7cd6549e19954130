from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from convert_logic.errors import CodecFailure, TranslationFailure

ValueT = TypeVar("ValueT", str, bytes)


class Encoding(Enum):
    TCVN3 = "tcvn3"
    UNICODE = "unicode"


@dataclass(frozen=True, slots=True)
class EncodedText:
    content: str
    encoding: Encoding

    @classmethod
    def tcvn3(cls, content: str) -> "EncodedText":
        return cls(content=content, encoding=Encoding.TCVN3)

    @classmethod
    def unicode(cls, content: str) -> "EncodedText":
        return cls(content=content, encoding=Encoding.UNICODE)

    @property
    def is_empty(self) -> bool:
        return not self.content


@dataclass(frozen=True, slots=True)
class TranslationPair:
    chinese: str
    vietnamese_unicode: EncodedText
    vietnamese_tcvn3: EncodedText


class HistoryKind(Enum):
    ENCODING_TRANSLATE = "encoding_translate"
    CHINESE_VIETNAMESE = "chinese_vietnamese"
    VIETNAMESE_CHINESE = "vietnamese_chinese"


class ConvertDirection(Enum):
    TCVN3_TO_UNICODE = "tcvn3-to-unicode"
    UNICODE_TO_TCVN3 = "unicode-to-tcvn3"


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    id: int
    kind: HistoryKind
    inputs: Mapping[str, str]
    outputs: Mapping[str, str]
    timestamp: datetime


@dataclass(frozen=True, slots=True)
class CodecResult(Generic[ValueT]):
    """Outcome of a codec call.

    ``value`` is always renderable: on failure it holds the fallback chosen
    by the adapter and ``failure`` holds the reason.
    """

    value: ValueT
    failure: CodecFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass(frozen=True, slots=True)
class TranslationOutcome:
    text: str
    failure: TranslationFailure | None = None
    requested: bool = True

    @property
    def ok(self) -> bool:
        return self.failure is None
