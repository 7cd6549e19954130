from __future__ import annotations

import unicodedata

import pytest

from convert_logic.codec.tcvn3 import to_tcvn3, to_unicode
from convert_logic.errors import CodecFailure, UnsupportedEncodingError

SAMPLES = [
    ("Xin chµo", "Xin chào"),
    ("TiÕng ViÖt", "Tiếng Việt"),
    ("nh©n d©n", "nhân dân"),
    ("H\xe5 Ch\xdd Minh", "Hồ Chí Minh"),
    ("l\xeai gi\xedi thi\xd6u", "lời giới thiệu"),
    ("§\xb5 N½ng", "Đà Nẵng"),
    ("n\xadíc", "nước"),
]


@pytest.mark.parametrize(("tcvn3", "expected"), SAMPLES)
def test_tcvn3_words_decode_to_unicode(tcvn3: str, expected: str) -> None:
    assert to_unicode(tcvn3) == expected


@pytest.mark.parametrize(("tcvn3", "unicode"), SAMPLES)
def test_valid_tcvn3_survives_round_trip(tcvn3: str, unicode: str) -> None:
    assert to_tcvn3(unicode) == tcvn3
    assert to_tcvn3(to_unicode(tcvn3)) == tcvn3


def test_ascii_passes_through_unchanged() -> None:
    text = "Hello, world! 123"
    assert to_unicode(text) == text
    assert to_tcvn3(text) == text


def test_decomposed_unicode_is_composed_before_encoding() -> None:
    decomposed = unicodedata.normalize("NFD", "Việt")
    assert to_tcvn3(decomposed) == "ViÖt"


def test_capital_toned_letters_use_lowercase_codes() -> None:
    assert to_tcvn3("ÁO") == "¸O"
    assert to_tcvn3("Ă Â Đ") == "¡ ¢ §"


def test_matching_source_tag_is_identity() -> None:
    assert to_unicode("Xin chào", "unicode") == "Xin chào"
    assert to_tcvn3("Xin chµo", "tcvn3") == "Xin chµo"


def test_unknown_source_tag_is_rejected() -> None:
    with pytest.raises(UnsupportedEncodingError):
        to_unicode("abc", "vni")


def test_non_text_input_is_a_codec_failure() -> None:
    with pytest.raises(CodecFailure):
        to_tcvn3(b"abc")  # type: ignore[arg-type]
