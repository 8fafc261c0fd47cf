# scripts/convert_usfm.py
"""Convert USFM editions (World English Bible, Open English Bible).

Usage: python -m scripts.convert_usfm [translation]
With no argument every configured edition is converted.
"""
import logging
import sys

from config import Config
from converters.usfm import TRANSLATIONS, convert_usfm
from storage import get_store

SOURCE_DIRS = {
    'web': Config.WEB_USFM_DIR,
    'oeb-us': Config.OEB_USFM_DIR,
}


def print_usage(stream=None):
    print("Usage: python -m scripts.convert_usfm [translation]", file=stream)
    print(f"Available translations: {', '.join(TRANSLATIONS)}", file=stream)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    selected = list(TRANSLATIONS)
    if args:
        if len(args) > 1 or args[0] not in TRANSLATIONS:
            print(f"Unknown translation: {' '.join(args)}", file=sys.stderr)
            print_usage(sys.stderr)
            return 1
        selected = [args[0]]

    store = get_store()
    summaries = [convert_usfm(TRANSLATIONS[t], SOURCE_DIRS[t], store) for t in selected]
    for summary in summaries:
        summary.log()
    return 0 if all(s.ok for s in summaries) else 1


if __name__ == '__main__':
    sys.exit(main())
