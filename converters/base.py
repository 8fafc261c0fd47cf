# converters/base.py
import json
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from schemas.bible_schemas import ChapterRecord

logger = logging.getLogger(__name__)


class SourceFormatError(Exception):
    """An upstream document could not be parsed into its expected shape."""

    def __init__(self, source, reason):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"{self.source}: {reason}")


@dataclass
class ConversionSummary:
    translation: str
    converted: int = 0     # chapter files written this run
    skipped: int = 0       # books or chapters intentionally not written
    unavailable: int = 0   # chapters the upstream reports as absent
    failed: int = 0        # chapters that could not be fetched or built
    books: int = 0         # books in the written manifest
    error: str = None      # set when the whole translation was aborted

    @property
    def ok(self):
        return self.error is None

    def log(self):
        logger.info(f"Summary for {self.translation}:")
        logger.info(f"   Converted: {self.converted} chapters")
        logger.info(f"   Skipped: {self.skipped}")
        logger.info(f"   Unavailable: {self.unavailable} chapters")
        logger.info(f"   Failed: {self.failed} chapters")
        logger.info(f"   Books in manifest: {self.books}")
        if self.error:
            logger.error(f"   Aborted: {self.error}")


def load_source(path, model):
    """Read an upstream JSON document and validate it against `model`.

    Raises SourceFormatError naming the file on bad JSON or wrong shape.
    """
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise SourceFormatError(path, f"invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise SourceFormatError(path, f"not UTF-8 text ({e})") from e
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise SourceFormatError(path, f"unexpected structure ({e.error_count()} errors: {e.errors()[0]['msg']})") from e


def build_chapter(translation, book_id, book_name, chapter, verses, source=None):
    """Build a canonical ChapterRecord from (number, text) pairs."""
    try:
        return ChapterRecord(
            translation=translation,
            book=book_id,
            bookName=book_name,
            chapter=chapter,
            verses=[{'number': number, 'text': text} for number, text in verses],
        )
    except ValidationError as e:
        raise SourceFormatError(source or f"{book_name} {chapter}", f"invalid chapter ({e.errors()[0]['msg']})") from e


def write_book(store, summary, translation, book_id, book_name, chapters, source):
    """Write the (number, verses) chapters of one book and return how many landed.

    A chapter that fails validation, or repeats a chapter number already
    written, is logged and counted as failed; the rest of the book goes on.
    """
    written = set()
    for number, verses in chapters:
        label = f"{source} ({book_name} {number})"
        if number in written:
            logger.warning(f"DUPLICATE: {label} repeats an earlier chapter, skipping")
            summary.failed += 1
            continue
        try:
            record = build_chapter(translation, book_id, book_name, number, verses, source=label)
        except SourceFormatError as e:
            logger.error(f"FAILED: {e.source}: {e.reason}")
            summary.failed += 1
            continue
        store.write_chapter(record)
        written.add(number)

    summary.converted += len(written)
    return len(written)
