from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging

from convert_logic.codec import tcvn3, transcode
from convert_logic.codec.transcode import ByteSource
from convert_logic.errors import CodecFailure
from convert_logic.models import CodecResult

logger = logging.getLogger(__name__)

TextCodec = Callable[[str, str], str]


@dataclass(frozen=True, slots=True)
class CodecAdapter:
    """Error-safe front for the TCVN3 table and the byte codecs.

    The TCVN3 pair falls back to the unconverted input; the byte family
    falls back to an empty value.
    """

    to_unicode_fn: TextCodec = tcvn3.to_unicode
    to_tcvn3_fn: TextCodec = tcvn3.to_tcvn3

    def to_unicode(self, text: str | None) -> CodecResult[str]:
        if not text:
            return CodecResult(value="")
        try:
            return CodecResult(value=self.to_unicode_fn(text, tcvn3.TCVN3_TAG))
        except CodecFailure as exc:
            logger.warning("TCVN3 to Unicode conversion failed: %s", exc)
            return CodecResult(value=text, failure=exc)

    def to_tcvn3(self, text: str | None) -> CodecResult[str]:
        if not text:
            return CodecResult(value="")
        try:
            return CodecResult(value=self.to_tcvn3_fn(text, tcvn3.UNICODE_TAG))
        except CodecFailure as exc:
            logger.warning("Unicode to TCVN3 conversion failed: %s", exc)
            return CodecResult(value=text, failure=exc)

    def decode(self, data: ByteSource, encoding: str) -> CodecResult[str]:
        try:
            return CodecResult(value=transcode.decode(data, encoding))
        except CodecFailure as exc:
            logger.warning("Decoding from %s failed: %s", encoding, exc)
            return CodecResult(value="", failure=exc)

    def encode(self, text: str, encoding: str) -> CodecResult[bytes]:
        try:
            return CodecResult(value=transcode.encode(text, encoding))
        except CodecFailure as exc:
            logger.warning("Encoding to %s failed: %s", encoding, exc)
            return CodecResult(value=b"", failure=exc)

    def decode_gbk(self, data: ByteSource) -> CodecResult[str]:
        return self.decode(data, transcode.GBK)

    def encode_gbk(self, text: str) -> CodecResult[bytes]:
        return self.encode(text, transcode.GBK)

    def decode_windows_1252(self, data: ByteSource) -> CodecResult[str]:
        return self.decode(data, transcode.WINDOWS_1252)

    def encode_windows_1252(self, text: str) -> CodecResult[bytes]:
        return self.encode(text, transcode.WINDOWS_1252)

    def convert_encoding(
        self, data: ByteSource, source_encoding: str, target_encoding: str
    ) -> CodecResult:
        try:
            converted = transcode.convert_encoding(
                data, source_encoding, target_encoding
            )
        except CodecFailure as exc:
            logger.warning(
                "Conversion %s -> %s failed: %s", source_encoding, target_encoding, exc
            )
            empty: str | bytes = "" if isinstance(data, str) else b""
            return CodecResult(value=empty, failure=exc)
        if isinstance(converted, (bytearray, memoryview)):
            converted = bytes(converted)
        return CodecResult(value=converted)
