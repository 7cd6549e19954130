from __future__ import annotations

from typing import Final
import unicodedata

from convert_logic.errors import CodecFailure, CodecTableError, UnsupportedEncodingError

TCVN3_TAG: Final[str] = "tcvn3"
UNICODE_TAG: Final[str] = "unicode"

# TCVN 5712:1993 (VN3) single-byte codes, stored as the Latin-1 character
# each byte is displayed as, paired with the Unicode character it stands for.
_TCVN3_PAIRS: Final[tuple[tuple[int, str], ...]] = (
    (0xA1, "Ă"),
    (0xA2, "Â"),
    (0xA3, "Ê"),
    (0xA4, "Ô"),
    (0xA5, "Ơ"),
    (0xA6, "Ư"),
    (0xA7, "Đ"),
    (0xA8, "ă"),
    (0xA9, "â"),
    (0xAA, "ê"),
    (0xAB, "ô"),
    (0xAC, "ơ"),
    (0xAD, "ư"),
    (0xAE, "đ"),
    (0xB5, "à"),
    (0xB6, "ả"),
    (0xB7, "ã"),
    (0xB8, "á"),
    (0xB9, "ạ"),
    (0xBB, "ằ"),
    (0xBC, "ẳ"),
    (0xBD, "ẵ"),
    (0xBE, "ắ"),
    (0xC6, "ặ"),
    (0xC7, "ầ"),
    (0xC8, "ẩ"),
    (0xC9, "ẫ"),
    (0xCA, "ấ"),
    (0xCB, "ậ"),
    (0xCC, "è"),
    (0xCE, "ẻ"),
    (0xCF, "ẽ"),
    (0xD0, "é"),
    (0xD1, "ẹ"),
    (0xD2, "ề"),
    (0xD3, "ể"),
    (0xD4, "ễ"),
    (0xD5, "ế"),
    (0xD6, "ệ"),
    (0xD7, "ì"),
    (0xD8, "ỉ"),
    (0xDC, "ĩ"),
    (0xDD, "í"),
    (0xDE, "ị"),
    (0xDF, "ò"),
    (0xE1, "ỏ"),
    (0xE2, "õ"),
    (0xE3, "ó"),
    (0xE4, "ọ"),
    (0xE5, "ồ"),
    (0xE6, "ổ"),
    (0xE7, "ỗ"),
    (0xE8, "ố"),
    (0xE9, "ộ"),
    (0xEA, "ờ"),
    (0xEB, "ở"),
    (0xEC, "ỡ"),
    (0xED, "ớ"),
    (0xEE, "ợ"),
    (0xEF, "ù"),
    (0xF1, "ủ"),
    (0xF2, "ũ"),
    (0xF3, "ú"),
    (0xF4, "ụ"),
    (0xF5, "ừ"),
    (0xF6, "ử"),
    (0xF7, "ữ"),
    (0xF8, "ứ"),
    (0xF9, "ự"),
    (0xFA, "ỳ"),
    (0xFB, "ỷ"),
    (0xFC, "ỹ"),
    (0xFD, "ý"),
    (0xFE, "ỵ"),
)


def _build_tables(
    pairs: tuple[tuple[int, str], ...],
) -> tuple[dict[int, str], dict[int, str]]:
    decode_table: dict[int, str] = {}
    encode_table: dict[int, str] = {}
    for code, char in pairs:
        if not 0x80 <= code <= 0xFF or len(char) != 1:
            raise CodecTableError(f"Malformed TCVN3 entry: {code:#x} -> {char!r}")
        if code in decode_table or ord(char) in encode_table:
            raise CodecTableError(f"Duplicate TCVN3 entry: {code:#x} -> {char!r}")
        decode_table[code] = char
        encode_table[ord(char)] = chr(code)
    # VN3 has no capital toned glyphs; capitals are typeset with the
    # lowercase codes in an uppercase font.
    for code, char in pairs:
        upper = char.upper()
        if upper != char and ord(upper) not in encode_table:
            encode_table[ord(upper)] = chr(code)
    return decode_table, encode_table


_DECODE_TABLE, _ENCODE_TABLE = _build_tables(_TCVN3_PAIRS)


def to_unicode(text: str, from_encoding: str = TCVN3_TAG) -> str:
    _require_text(text)
    tag = _normalize_tag(from_encoding)
    if tag == UNICODE_TAG:
        return text
    return text.translate(_DECODE_TABLE)


def to_tcvn3(text: str, from_encoding: str = UNICODE_TAG) -> str:
    _require_text(text)
    tag = _normalize_tag(from_encoding)
    if tag == TCVN3_TAG:
        return text
    return unicodedata.normalize("NFC", text).translate(_ENCODE_TABLE)


def _normalize_tag(tag: str) -> str:
    normalized = tag.strip().casefold()
    if normalized not in (TCVN3_TAG, UNICODE_TAG):
        raise UnsupportedEncodingError(tag)
    return normalized


def _require_text(value: object) -> None:
    if not isinstance(value, str):
        raise CodecFailure(f"Expected text, got {type(value).__name__}")
