# converters/bible_api.py
"""Chapter-by-chapter download from bible-api.com -> canonical chapters.

Output: {output}/{translation}/{bookId}/{chapter}.json + manifest.json

- Rate-limited through a RateLimiter owned by this run
- Resumable: a chapter whose file already exists is never requested again
- 404 means the translation lacks that chapter; it is not retried
- Other HTTP errors and network failures are logged and left for the
  next run to pick up
"""
import logging
from urllib.parse import quote

import requests
from pydantic import ValidationError

from config import Config
from models.bible import TranslationConfig
from schemas.bible_schemas import ApiChapterResponse
from utils.book_map import BIBLE_API_OUTLINE
from utils.manifest import ManifestBuilder
from utils.rate_limit import RateLimitedClient
from .base import ConversionSummary, SourceFormatError, build_chapter

logger = logging.getLogger(__name__)

TRANSLATIONS = {
    'oeb-us': TranslationConfig(id='oeb-us', name='Open English Bible (US)', license='CC0 / Public Domain'),
    'web': TranslationConfig(id='web', name='World English Bible', license='Public Domain'),
}


def chapter_url(base, api_name, chapter, translation_id):
    return f"{base}/{quote(api_name)}+{chapter}?translation={translation_id}"


class BibleApiDownloader:
    def __init__(self, translation, store, client=None, base_url=None, outline=BIBLE_API_OUTLINE):
        self.translation = translation
        self.store = store
        self.client = client or RateLimitedClient()
        self.base_url = (base_url or Config.BIBLE_API_BASE).rstrip('/')
        self.outline = outline
        self.summary = ConversionSummary(translation.id)

    def fetch_chapter(self, book, chapter):
        """Fetch and write one chapter. Returns True if a file was written."""
        label = f"{book.display_name} {chapter}"
        url = chapter_url(self.base_url, book.api_name, chapter, self.translation.id)

        try:
            response = self.client.request(url)
        except requests.RequestException as e:
            logger.error(f"  FAILED: {label} - {e}")
            self.summary.failed += 1
            return False

        if response.status_code == 404:
            logger.warning(f"  UNAVAILABLE: {label} - not in {self.translation.id}")
            self.summary.unavailable += 1
            return False
        if not 200 <= response.status_code < 300:
            logger.error(f"  FAILED: {label} - HTTP {response.status_code}")
            self.summary.failed += 1
            return False

        try:
            data = ApiChapterResponse.model_validate(response.json())
            record = build_chapter(
                self.translation.id,
                book.book_id,
                book.display_name,
                chapter,
                [(v.verse, v.text.strip()) for v in data.verses],
                source=url,
            )
        except (ValueError, ValidationError, SourceFormatError) as e:
            # ValueError covers a body that is not JSON at all
            logger.error(f"  FAILED: {label} - unexpected response ({e})")
            self.summary.failed += 1
            return False

        self.store.write_chapter(record)
        self.summary.converted += 1
        logger.info(f"  OK: {label} ({len(record.verses)} verses)")
        return True

    def download_book(self, book):
        """Fetch every missing chapter of a book; return chapters on disk."""
        for chapter in range(1, book.chapters + 1):
            if self.store.chapter_exists(self.translation.id, book.book_id, chapter):
                self.summary.skipped += 1
                continue
            self.fetch_chapter(book, chapter)
        return self.store.count_chapters(self.translation.id, book.book_id, book.chapters)

    def run(self):
        t = self.translation
        logger.info(f"Downloading {t.name} ({t.id})")
        logger.info(f"   Output: {self.store.translation_dir(t.id)}")

        builder = ManifestBuilder(t.id, t.name, t.license, t.language)
        for book in self.outline:
            on_disk = self.download_book(book)
            if on_disk:
                builder.add_book(book.book_id, book.display_name, on_disk, book.testament)

        manifest = builder.write(self.store)
        self.summary.books = len(manifest.books)
        return self.summary


def download_translation(translation_id, store, client=None, base_url=None):
    translation = TRANSLATIONS.get(translation_id)
    if translation is None:
        raise KeyError(translation_id)
    return BibleApiDownloader(translation, store, client=client, base_url=base_url).run()
