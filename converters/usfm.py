# converters/usfm.py
"""USFM book files (eBible.org WEB, Open English Bible) -> canonical chapters.

Each *.usfm file is identified by its \\id line, so differing filename
numbering schemes between editions do not matter. Files whose \\id is not
a Bible book (front matter, glossary) are ignored.
"""
import logging
from pathlib import Path

from models.bible import Testament, TranslationConfig
from utils.book_map import USFM_BOOKS, USFM_BY_ID
from utils.manifest import ManifestBuilder
from utils.usfm import merge_duplicate_chapters, parse_usfm, read_book_code
from .base import ConversionSummary, SourceFormatError, write_book

logger = logging.getLogger(__name__)

NON_TEXT_BOOKS = {'FRT', 'BAK', 'GLO', 'XXA', 'XXB', 'XXC', 'XXD', 'INT', 'CNC', 'TDX', 'OTH'}

TRANSLATIONS = {
    'web': TranslationConfig(
        id='web',
        name='World English Bible',
        license='Public Domain',
        has_apocrypha=True,
    ),
    'oeb-us': TranslationConfig(
        id='oeb-us',
        name='Open English Bible (US)',
        license='CC0 / Public Domain',
    ),
}

# Display names that differ from the shared USFM table
NAME_OVERRIDES = {
    'oeb-us': {'sng': 'Song of Songs'},
}


def index_source_files(source_dir):
    """Map \\id code -> file path for every .usfm file in source_dir."""
    files = {}
    for path in sorted(Path(source_dir).glob('*.usfm')):
        try:
            code = read_book_code(path.read_text(encoding='utf-8-sig'))
        except UnicodeDecodeError as e:
            raise SourceFormatError(path, f"not UTF-8 text ({e})") from e
        if code is None:
            logger.warning(f"SKIP: {path.name} has no \\id line")
        elif code in NON_TEXT_BOOKS:
            logger.info(f"SKIP: {path.name} ({code} is not Bible text)")
        elif code not in USFM_BY_ID:
            logger.warning(f"UNKNOWN: '{code}' in {path.name} has no usfm mapping, skipping")
        elif code in files:
            logger.warning(f"DUPLICATE: {path.name} repeats {code} from {files[code].name}, skipping")
        else:
            files[code] = path
    return files


def convert_usfm(config, source_dir, store):
    summary = ConversionSummary(config.id)
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        logger.error(f"ERROR: {source_dir} not found")
        summary.error = f"{source_dir}: not found"
        return summary

    logger.info(f"Converting {config.name} from {source_dir}...")
    overrides = NAME_OVERRIDES.get(config.id, {})
    builder = ManifestBuilder(config.id, config.name, config.license, config.language)

    try:
        files = index_source_files(source_dir)
        for book in USFM_BOOKS:
            path = files.get(book.usfm_id)
            if path is None:
                # Partial editions (the OEB Old Testament) simply lack some books
                logger.debug(f"MISSING: {book.name} ({book.usfm_id})")
                continue

            if book.testament is Testament.DEUTEROCANON and not config.has_apocrypha:
                logger.info(f"SKIP: {book.name} (deuterocanon not included in {config.id})")
                summary.skipped += 1
                continue

            name = overrides.get(book.book_id, book.name)
            chapters = merge_duplicate_chapters(parse_usfm(path.read_text(encoding='utf-8-sig')))
            chapters = [(number, verses) for number, verses in chapters if verses]
            if not chapters:
                logger.warning(f"SKIP: {name} - no chapters parsed from {path.name}")
                summary.skipped += 1
                continue

            written = write_book(store, summary, config.id, book.book_id, name, chapters, path.name)
            builder.add_book(book.book_id, name, written, book.testament)
            logger.info(f"  {name} -> {book.book_id}/ ({written} chapters)")
    except SourceFormatError as e:
        logger.error(f"Failed to parse {e.source}: {e.reason}")
        summary.error = str(e)
        return summary

    manifest = builder.write(store)
    summary.books = len(manifest.books)
    logger.info(f"Done! {summary.books} books, {summary.converted} chapter files -> {store.translation_dir(config.id)}")
    return summary
