import pytest

from models.bible import Testament
from schemas.bible_schemas import ChapterRecord
from utils.bible_loader import load_chapter, load_manifest
from utils.manifest import ManifestBuilder


@pytest.fixture
def corpus(shared_store):
    record = ChapterRecord(translation='web', book='jhn', bookName='John', chapter=3,
                           verses=[{'number': 16, 'text': 'For God so loved the world'}])
    shared_store.write_chapter(record)
    builder = ManifestBuilder('web', 'World English Bible', 'Public Domain')
    builder.add_book('jhn', 'John', 21, Testament.NEW)
    builder.write(shared_store)
    return shared_store


@pytest.fixture
def client(corpus):
    from app import create_app
    app = create_app()
    app.config['TESTING'] = True
    return app.test_client()


def test_loader_reads_back_records(corpus):
    manifest = load_manifest('web', corpus)
    assert manifest.books[0].testament is Testament.NEW
    chapter = load_chapter('web', 'jhn', 3, corpus)
    assert chapter.book_name == 'John'
    assert load_chapter('web', 'jhn', 4, corpus) is None
    assert load_manifest('../web', corpus) is None


def test_loader_returns_none_for_corrupt_file(corpus):
    corpus.chapter_path('web', 'jhn', 5).write_text('{"translation": ', encoding='utf-8')
    assert load_chapter('web', 'jhn', 5, corpus) is None


def test_list_translations(client):
    response = client.get('/api/bible/translations')
    assert response.status_code == 200
    assert response.get_json() == [{
        'translation': 'web',
        'name': 'World English Bible',
        'language': 'en',
        'license': 'Public Domain',
        'books': 1,
    }]


def test_get_manifest(client):
    response = client.get('/api/bible/web/manifest')
    assert response.status_code == 200
    assert response.get_json()['books'] == [{'id': 'jhn', 'name': 'John', 'chapters': 21, 'testament': 'NT'}]
    assert client.get('/api/bible/kjv/manifest').status_code == 404


def test_get_chapter(client):
    response = client.get('/api/bible/web/jhn/3')
    assert response.status_code == 200
    body = response.get_json()
    assert body['bookName'] == 'John'
    assert body['verses'] == [{'number': 16, 'text': 'For God so loved the world'}]
    assert client.get('/api/bible/web/jhn/99').status_code == 404


def test_health_reports_translations(client):
    body = client.get('/health').get_json()
    assert body['status'] == 'healthy'
    assert body['translations'] == 1


def test_blueprint_leaves_logging_setup_to_the_app(monkeypatch):
    import importlib
    import logging
    import routes.bible

    calls = []
    monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))
    importlib.reload(routes.bible)

    assert calls == []


def test_gunicorn_settings_follow_config():
    import runpy
    from pathlib import Path
    from config import Config

    settings = runpy.run_path(str(Path(__file__).resolve().parent.parent / 'gunicorn.conf.py'))

    assert settings['bind'] == f"0.0.0.0:{Config.PORT}"
    assert settings['loglevel'] == Config.LOG_LEVEL.lower()
