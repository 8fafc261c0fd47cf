# utils/manifest.py
import logging

from schemas.bible_schemas import BookEntry, Manifest

logger = logging.getLogger(__name__)


class ManifestBuilder:
    """Collects the books a converter run actually produced.

    Books are kept in the order they are added. A book with no surviving
    chapters is left out; a partially available book is kept with its
    true count.
    """

    def __init__(self, translation, name, license, language='en'):
        self.translation = translation
        self.name = name
        self.license = license
        self.language = language
        self.books = []

    def has_book(self, book_id):
        return any(b.id == book_id for b in self.books)

    def add_book(self, book_id, name, chapters, testament):
        if chapters <= 0:
            logger.warning(f"{name} ({book_id}) produced no chapters, leaving it out of the manifest")
            return None
        if self.has_book(book_id):
            raise ValueError(f"Book {book_id} added to the {self.translation} manifest twice")
        entry = BookEntry(id=book_id, name=name, chapters=chapters, testament=testament)
        self.books.append(entry)
        return entry

    @property
    def total_chapters(self):
        return sum(b.chapters for b in self.books)

    def build(self):
        return Manifest(
            translation=self.translation,
            name=self.name,
            language=self.language,
            license=self.license,
            books=list(self.books),
        )

    def write(self, store):
        manifest = self.build()
        path = store.write_manifest(manifest)
        logger.info(f"Manifest written to: {path} ({len(manifest.books)} books)")
        return manifest
