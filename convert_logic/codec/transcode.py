from __future__ import annotations

from typing import Final, TypeAlias

from convert_logic.errors import CodecFailure, UnsupportedEncodingError

ByteSource: TypeAlias = str | bytes | bytearray | memoryview

UTF8: Final[str] = "utf8"
GBK: Final[str] = "gbk"
WINDOWS_1252: Final[str] = "windows-1252"

# Public encoding name -> Python codec name.
_CODECS: Final[dict[str, str]] = {
    UTF8: "utf-8",
    GBK: "gbk",
    WINDOWS_1252: "cp1252",
}
_ALIASES: Final[dict[str, str]] = {
    "utf-8": UTF8,
    "utf8": UTF8,
    "gbk": GBK,
    "cp936": GBK,
    "windows-1252": WINDOWS_1252,
    "windows1252": WINDOWS_1252,
    "cp1252": WINDOWS_1252,
}

SUPPORTED_ENCODINGS: Final[tuple[str, ...]] = tuple(_CODECS)


def normalize_encoding(name: str) -> str:
    key = name.strip().casefold().replace("_", "-")
    canonical = _ALIASES.get(key)
    if canonical is None:
        raise UnsupportedEncodingError(name)
    return canonical


def to_bytes(data: ByteSource) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise CodecFailure(f"Expected text or bytes, got {type(data).__name__}")


def decode(data: ByteSource, encoding: str) -> str:
    codec = _CODECS[normalize_encoding(encoding)]
    raw = to_bytes(data)
    try:
        return raw.decode(codec)
    except UnicodeDecodeError as exc:
        raise CodecFailure(f"Cannot decode {len(raw)} bytes as {encoding}") from exc


def encode(text: str, encoding: str) -> bytes:
    codec = _CODECS[normalize_encoding(encoding)]
    if not isinstance(text, str):
        raise CodecFailure(f"Expected text, got {type(text).__name__}")
    try:
        return text.encode(codec)
    except UnicodeEncodeError as exc:
        raise CodecFailure(f"Cannot encode text as {encoding}") from exc


def convert_encoding(
    data: ByteSource, source_encoding: str, target_encoding: str
) -> ByteSource:
    source = normalize_encoding(source_encoding)
    target = normalize_encoding(target_encoding)
    if source == target:
        return data
    pivot = decode(data, source)
    return encode(pivot, target)
