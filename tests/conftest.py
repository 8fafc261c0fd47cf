import json

import pytest
import requests

import storage
from storage import BibleStore


class FakeClock:
    def __init__(self, start=0.0):
        self.time = start
        self.sleeps = []

    def now(self):
        return self.time

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.time += seconds

    def advance(self, seconds):
        self.time += seconds


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Stands in for requests.Session; answers GETs from a routing function."""

    def __init__(self, route):
        self.route = route
        self.urls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.urls.append(url)
        result = self.route(url)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True


def api_chapter(book_name, chapter, verse_count=3):
    return {
        'reference': f"{book_name} {chapter}",
        'verses': [
            {
                'book_id': book_name[:3].upper(),
                'book_name': book_name,
                'chapter': chapter,
                'verse': v,
                'text': f" {book_name} {chapter}:{v} text\n",
            }
            for v in range(1, verse_count + 1)
        ],
        'text': '',
        'translation_id': 'web',
    }


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


def source_chapters(count, verses=2, start=1):
    return [
        {
            'chapter': c,
            'verses': [{'verse': v, 'text': f"chapter {c} verse {v}"} for v in range(1, verses + 1)],
        }
        for c in range(start, start + count)
    ]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path):
    return BibleStore(tmp_path / 'bibles')


@pytest.fixture
def shared_store(store, monkeypatch):
    """Point the process-wide store (used by routes and scripts) at tmp_path."""
    monkeypatch.setattr(storage, '_store_instance', store)
    return store


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection reset by peer")
