from __future__ import annotations

import argparse
from pathlib import Path

from . import catalog
from .client import VoiceRSSClient
from .config import settings
from .exceptions import VoiceRSSError
from .logging_utils import get_logger
from .services import VoiceRSSTTSService


logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="VoiceRSS text-to-speech CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    synth = sub.add_parser("synthesize", help="Synthesize text to an audio file")
    synth.add_argument("--text", required=True, help="Text to synthesize")
    synth.add_argument("--out", required=True, help="Output audio file path")
    synth.add_argument("--locale", default=None, help="Locale tag, e.g. en-us")
    synth.add_argument("--voice", default=None, help="Voice name within the locale")
    synth.add_argument(
        "--format",
        default=None,
        help="Audio format (MP3, OGG, AAC)",
    )
    synth.add_argument(
        "--api-key",
        default=None,
        help="VoiceRSS API key (defaults to VOICERSS_API_KEY)",
    )

    voices = sub.add_parser("voices", help="List voices")
    voices.add_argument("--locale", default=None, help="Only list this locale")

    sub.add_parser("locales", help="List supported locales")
    sub.add_parser("formats", help="List supported audio formats")
    return parser


def _synthesize(args: argparse.Namespace) -> int:
    service = VoiceRSSTTSService(
        client=VoiceRSSClient(),
        api_key=args.api_key or settings.api_key,
        default_locale=settings.default_locale,
        default_format=settings.default_format,
    )
    stream, fmt = service.synthesize(
        args.text,
        locale=args.locale,
        voice=args.voice,
        audio_format=args.format,
    )
    out_path = Path(args.out)
    written = 0
    with stream, out_path.open("wb") as fh:
        for chunk in stream:
            fh.write(chunk)
            written += len(chunk)
    logger.info("Wrote %s (%d bytes, %s)", out_path, written, fmt.mime_type)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.command == "voices":
        if args.locale:
            names = sorted(catalog.available_voices(args.locale))
        else:
            names = sorted(catalog.available_voices())
        for name in names:
            print(name)
        return 0
    if args.command == "locales":
        for locale in sorted(catalog.available_locales()):
            print(locale)
        return 0
    if args.command == "formats":
        for fmt in sorted(catalog.available_audio_formats()):
            print(fmt)
        return 0

    try:
        return _synthesize(args)
    except (ValueError, VoiceRSSError) as exc:
        logger.error("Synthesis failed: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
