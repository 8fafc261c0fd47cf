# scripts/convert_kjv1611.py
"""Convert the KJV 1611 per-book JSON files.

Usage: python -m scripts.convert_kjv1611 [source_dir]
Default source: {BIBLE_DATA_DIR}/kjv-1611/Bible-kjv-1611-main
"""
import logging
import sys

from config import Config
from converters.kjv1611 import convert_book_files
from storage import get_store


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    if len(args) > 1:
        print("Usage: python -m scripts.convert_kjv1611 [source_dir]", file=sys.stderr)
        return 1

    source_dir = args[0] if args else Config.KJV1611_SOURCE_DIR
    summary = convert_book_files(source_dir, get_store())
    summary.log()
    return 0 if summary.ok else 1


if __name__ == '__main__':
    sys.exit(main())
