from __future__ import annotations

import argparse
import asyncio
import json

import aiohttp

from convert_logic.adapters.codec import CodecAdapter
from convert_logic.adapters.translation import TranslationAdapter
from convert_logic.codec.transcode import SUPPORTED_ENCODINGS
from convert_logic.http import build_async_fetcher
from convert_logic.models import CodecResult, TranslationOutcome
from web_app.config import AppConfig, load_config
from web_app.main import run

DEFAULT_SOURCE = "zh"
DEFAULT_TARGET = "vi"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert Vietnamese text between TCVN3 and Unicode."
    )
    parser.add_argument(
        "--format",
        choices=("lines", "json"),
        default="lines",
        help="Output format.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    to_unicode = commands.add_parser("to-unicode", help="TCVN3 text to Unicode.")
    to_unicode.add_argument("text")

    to_tcvn3 = commands.add_parser("to-tcvn3", help="Unicode text to TCVN3.")
    to_tcvn3.add_argument("text")

    transcode = commands.add_parser(
        "transcode", help="Re-encode text bytes between byte encodings."
    )
    transcode.add_argument("text")
    transcode.add_argument("--source", choices=SUPPORTED_ENCODINGS, default="utf8")
    transcode.add_argument("--target", choices=SUPPORTED_ENCODINGS, default="utf8")

    translate = commands.add_parser("translate", help="Machine-translate text.")
    translate.add_argument("text")
    translate.add_argument("--source", default=DEFAULT_SOURCE)
    translate.add_argument("--target", default=DEFAULT_TARGET)

    commands.add_parser("serve", help="Start the browser UI.")
    return parser


def _print_codec(result: CodecResult, output_format: str) -> None:
    value = result.value
    if isinstance(value, bytes):
        value = value.hex(" ")
    if output_format == "json":
        payload = {
            "value": value,
            "ok": result.ok,
            "error": str(result.failure) if result.failure else None,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    print(value)


def _print_translation(outcome: TranslationOutcome, output_format: str) -> None:
    if output_format == "json":
        payload = {
            "text": outcome.text,
            "ok": outcome.ok,
            "error": str(outcome.failure) if outcome.failure else None,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    print(outcome.text)


async def _run_translate(
    text: str, source: str, target: str, config: AppConfig
) -> TranslationOutcome:
    async with aiohttp.ClientSession() as session:
        adapter = TranslationAdapter(
            fetcher=build_async_fetcher(
                session, timeout=config.translation.timeout_seconds
            ),
            endpoint=config.translation.endpoint,
        )
        return await adapter.translate(text, source, target)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    codec = CodecAdapter()

    if args.command == "to-unicode":
        _print_codec(codec.to_unicode(args.text), args.format)
    elif args.command == "to-tcvn3":
        _print_codec(codec.to_tcvn3(args.text), args.format)
    elif args.command == "transcode":
        raw = codec.encode(args.text, args.source).value
        _print_codec(
            codec.convert_encoding(raw, args.source, args.target), args.format
        )
    elif args.command == "translate":
        outcome = asyncio.run(
            _run_translate(args.text, args.source, args.target, load_config())
        )
        _print_translation(outcome, args.format)
    else:
        run(load_config())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
