# converters/scrollmapper.py
"""Whole-translation JSON files (scrollmapper/bible_databases) -> canonical chapters.

Input:  {source_dir}/{sourceFile}.json, all books of a translation in one document
Output: {output}/{id}/{bookId}/{chapter}.json + manifest.json

To convert more translations from the same dataset, add a record to
TRANSLATIONS. The `id` becomes the folder name under the output root.
"""
import logging
from pathlib import Path

from models.bible import TranslationConfig
from schemas.bible_schemas import MultiBookSource
from utils.book_map import SCROLLMAPPER_BOOKS
from utils.manifest import ManifestBuilder
from .base import ConversionSummary, SourceFormatError, load_source, write_book

logger = logging.getLogger(__name__)

TRANSLATIONS = [
    TranslationConfig(
        source='DRC',
        id='dra',
        name='Douay-Rheims American Edition',
        license='Public Domain',
        has_apocrypha=True,
    ),
]


def convert_translation(config, source_dir, store, book_map=SCROLLMAPPER_BOOKS):
    source_path = Path(source_dir) / f"{config.source}.json"
    summary = ConversionSummary(config.id)

    if not source_path.is_file():
        logger.error(f"ERROR: {source_path.name} not found")
        summary.error = f"{source_path}: not found"
        return summary

    canon = "with deuterocanon" if config.has_apocrypha else "protestant canon"
    logger.info(f"Converting {config.name} ({config.source}, {canon})...")

    builder = ManifestBuilder(config.id, config.name, config.license, config.language)
    try:
        source = load_source(source_path, MultiBookSource)
        for book in source.books:
            mapping = book_map.resolve(book.name, source_path.name)
            if mapping is None:
                summary.skipped += 1
                continue
            if builder.has_book(mapping.book_id):
                logger.warning(f"DUPLICATE: '{book.name}' maps to {mapping.book_id}, already converted, skipping")
                summary.skipped += 1
                continue

            written = write_book(
                store, summary, config.id, mapping.book_id, book.name,
                [(c.chapter, [(v.verse, v.text) for v in c.verses]) for c in book.chapters],
                source_path.name,
            )
            builder.add_book(mapping.book_id, book.name, written, mapping.testament)
            logger.info(f"  {book.name} -> {mapping.book_id}/ ({written} chapters)")
    except SourceFormatError as e:
        logger.error(f"Failed to parse {e.source}: {e.reason}")
        summary.error = str(e)
        return summary

    manifest = builder.write(store)
    summary.books = len(manifest.books)
    logger.info(f"Done! {summary.books} books, {summary.converted} chapter files -> {store.translation_dir(config.id)}")
    return summary


def convert_all(source_dir, store, translations=None, book_map=SCROLLMAPPER_BOOKS):
    """Convert each configured translation; one failure does not stop the rest."""
    return [
        convert_translation(config, source_dir, store, book_map=book_map)
        for config in (translations if translations is not None else TRANSLATIONS)
    ]
