# utils/bible_loader.py
"""Reads the generated corpus back as validated canonical records."""
import json
import logging
import re

from pydantic import ValidationError

from schemas.bible_schemas import ChapterRecord, Manifest
from storage import get_store

logger = logging.getLogger(__name__)

# Translation and book ids end up in filesystem paths
_SAFE_ID = re.compile(r'^[a-z0-9][a-z0-9\-]*$')


def _is_safe(value):
    return bool(_SAFE_ID.match(value or ''))


def _load(path, model):
    if not path.is_file():
        return None
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return model.model_validate(json.load(f))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Could not load {path}: {str(e)}")
        return None


def load_manifest(translation, store=None):
    """Return the Manifest for a translation, or None if it does not exist."""
    if not _is_safe(translation):
        return None
    store = store or get_store()
    return _load(store.manifest_path(translation), Manifest)


def load_chapter(translation, book, chapter, store=None):
    """Return one ChapterRecord, or None if the chapter file is absent."""
    if not (_is_safe(translation) and _is_safe(book)) or int(chapter) < 1:
        return None
    store = store or get_store()
    return _load(store.chapter_path(translation, book, int(chapter)), ChapterRecord)


def list_translations(store=None):
    """Summaries of every translation that has a manifest, sorted by id."""
    store = store or get_store()
    translations = []
    for translation in store.list_translations():
        manifest = load_manifest(translation, store)
        if manifest is None:
            continue
        translations.append({
            'translation': manifest.translation,
            'name': manifest.name,
            'language': manifest.language,
            'license': manifest.license,
            'books': len(manifest.books),
        })
    return translations
