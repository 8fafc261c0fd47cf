# scripts/download_bible.py
"""Download a translation from bible-api.com into the canonical layout.

Usage: python -m scripts.download_bible <translation>
Example: python -m scripts.download_bible oeb-us

Safe to re-run: chapters already on disk are never downloaded again.
"""
import logging
import sys

from config import Config
from converters.bible_api import TRANSLATIONS, download_translation
from storage import get_store
from utils.rate_limit import RateLimitedClient, RateLimiter


def print_usage(stream=None):
    print("Usage: python -m scripts.download_bible <translation>", file=stream)
    print(f"Available translations: {', '.join(TRANSLATIONS)}", file=stream)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    if not args:
        print_usage()
        return 0

    translation_id = args[0]
    if len(args) > 1 or translation_id not in TRANSLATIONS:
        print(f"Unknown translation: {' '.join(args)}", file=sys.stderr)
        print_usage(sys.stderr)
        return 1

    # One limiter per run, so nothing carries over between runs
    with RateLimitedClient(RateLimiter.from_config()) as client:
        summary = download_translation(translation_id, get_store(), client=client)
    summary.log()
    return 0 if summary.ok else 1


if __name__ == '__main__':
    sys.exit(main())
