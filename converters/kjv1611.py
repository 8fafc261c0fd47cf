# converters/kjv1611.py
"""Per-book JSON files (aruljohn/Bible-kjv-1611) -> canonical chapters.

Input:  {source_dir}/{BookName}.json, one document per book
Output: {output}/kjv1611/{bookId}/{chapter}.json + manifest.json
"""
import logging
from pathlib import Path

from models.bible import TranslationConfig
from schemas.bible_schemas import SourceBook
from utils.book_map import KJV1611_BOOKS
from utils.manifest import ManifestBuilder
from .base import ConversionSummary, SourceFormatError, load_source, write_book

logger = logging.getLogger(__name__)

KJV1611 = TranslationConfig(
    id='kjv1611',
    name='King James Version (1611)',
    license='Public Domain',
    has_apocrypha=True,
)


def convert_book_files(source_dir, store, translation=KJV1611, book_map=KJV1611_BOOKS):
    """Convert a directory of one-file-per-book JSON documents.

    Books are visited in book_map declaration order. A missing file skips
    that book and a bad chapter skips only that chapter. A file that is not
    valid JSON of the expected shape stops the translation: chapters already
    written stay, but no manifest is written and summary.error is set. Files
    whose name is not in book_map are reported, never converted.
    """
    source_dir = Path(source_dir)
    summary = ConversionSummary(translation.id)
    builder = ManifestBuilder(translation.id, translation.name, translation.license, translation.language)

    logger.info(f"Converting {translation.name} from {source_dir}...")

    try:
        for source_name in book_map:
            mapping = book_map.lookup(source_name)
            source_path = source_dir / f"{source_name}.json"

            if not source_path.is_file():
                logger.warning(f"SKIP: {source_path.name} not found")
                summary.skipped += 1
                continue

            source_book = load_source(source_path, SourceBook)

            written = write_book(
                store, summary, translation.id, mapping.book_id, source_name,
                [(c.chapter, [(v.verse, v.text) for v in c.verses]) for c in source_book.chapters],
                source_path.name,
            )
            builder.add_book(mapping.book_id, source_name, written, mapping.testament)
            logger.info(f"  {source_name} -> {mapping.book_id}/ ({written} chapters)")

        for path in sorted(source_dir.glob("*.json")):
            if path.stem not in book_map:
                book_map.resolve(path.stem, path.name)
                summary.skipped += 1
    except SourceFormatError as e:
        logger.error(f"Failed to parse {e.source}: {e.reason}")
        summary.error = str(e)
        return summary

    manifest = builder.write(store)
    summary.books = len(manifest.books)
    logger.info(f"Done! {summary.books} books, {summary.converted} chapter files -> {store.translation_dir(translation.id)}")
    return summary
