# storage.py
import json
import logging
import os
from pathlib import Path

from config import Config

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = 'manifest.json'


class BibleStore:
    """The per-translation output tree.

    Layout: {root}/{translation}/{book}/{chapter}.json plus
    {root}/{translation}/manifest.json.
    """

    def __init__(self, root):
        self.root = Path(root)

    def translation_dir(self, translation):
        return self.root / translation

    def book_dir(self, translation, book):
        return self.translation_dir(translation) / book

    def chapter_path(self, translation, book, chapter):
        return self.book_dir(translation, book) / f"{chapter}.json"

    def manifest_path(self, translation):
        return self.translation_dir(translation) / MANIFEST_FILENAME

    def chapter_exists(self, translation, book, chapter):
        return self.chapter_path(translation, book, chapter).is_file()

    def count_chapters(self, translation, book, nominal):
        """Count chapter files 1..nominal that are actually on disk."""
        return sum(1 for c in range(1, nominal + 1) if self.chapter_exists(translation, book, c))

    def ensure_book_dir(self, translation, book):
        path = self.book_dir(translation, book)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def write_chapter(self, record):
        self.ensure_book_dir(record.translation, record.book)
        path = self.chapter_path(record.translation, record.book, record.chapter)
        self._write_json(path, record.to_json(), indent=None)
        return path

    def write_manifest(self, manifest):
        path = self.manifest_path(manifest.translation)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._write_json(path, manifest.to_json(), indent=2)
        return path

    def read_json(self, path):
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def list_translations(self):
        if not self.root.is_dir():
            return []
        return sorted(p.name for p in self.root.iterdir() if (p / MANIFEST_FILENAME).is_file())

    def _write_json(self, path, data, indent):
        # Write then rename so an interrupted run never leaves a truncated
        # file that a resumed download would treat as complete.
        tmp_path = path.with_name(path.name + '.tmp')
        separators = None if indent else (',', ':')
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=indent, separators=separators)
            if indent:
                f.write('\n')
        os.replace(tmp_path, path)


_store_instance = None


def get_store():
    """Get the shared store rooted at Config.OUTPUT_DIR."""
    global _store_instance
    if _store_instance is None:
        logger.info(f"Using Bible output directory: {Config.OUTPUT_DIR}")
        _store_instance = BibleStore(Config.OUTPUT_DIR)
    return _store_instance
