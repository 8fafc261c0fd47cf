# scripts/convert_scrollmapper.py
"""Convert translations from the scrollmapper/bible_databases JSON export.

Usage: python -m scripts.convert_scrollmapper [translation]
With no argument every configured translation is converted.
"""
import logging
import sys

from config import Config
from converters.scrollmapper import TRANSLATIONS, convert_all
from storage import get_store


def print_usage(stream=None):
    print("Usage: python -m scripts.convert_scrollmapper [translation]", file=stream)
    print(f"Available translations: {', '.join(t.id for t in TRANSLATIONS)}", file=stream)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    selected = TRANSLATIONS
    if args:
        selected = [t for t in TRANSLATIONS if t.id == args[0]]
        if len(args) > 1 or not selected:
            print(f"Unknown translation: {' '.join(args)}", file=sys.stderr)
            print_usage(sys.stderr)
            return 1

    summaries = convert_all(Config.SCROLLMAPPER_SOURCE_DIR, get_store(), translations=selected)
    for summary in summaries:
        summary.log()
    return 0 if all(s.ok for s in summaries) else 1


if __name__ == '__main__':
    sys.exit(main())
