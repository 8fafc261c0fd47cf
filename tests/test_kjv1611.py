import json
import logging

from conftest import source_chapters, write_json
from converters.kjv1611 import KJV1611, convert_book_files
from models.bible import Testament
from utils.book_map import BookNameMap

SMALL_MAP = BookNameMap('kjv1611', {
    'Genesis': ('gen', Testament.OLD),
    '1 Samuel': ('1sa', Testament.OLD),
    'Tobit': ('tob', Testament.DEUTEROCANON),
    'Jude': ('jud', Testament.NEW),
})


def read(path):
    return json.loads(path.read_text(encoding='utf-8'))


def test_book_with_three_chapters_becomes_three_files(tmp_path, store):
    source = tmp_path / 'kjv'
    write_json(source / '1 Samuel.json', {'book': '1 Samuel', 'chapter-count': '3', 'chapters': source_chapters(3)})

    summary = convert_book_files(source, store, book_map=SMALL_MAP)

    assert summary.ok
    assert summary.converted == 3
    for c in (1, 2, 3):
        chapter = read(store.root / 'kjv1611' / '1sa' / f"{c}.json")
        assert chapter == {
            'translation': 'kjv1611',
            'book': '1sa',
            'bookName': '1 Samuel',
            'chapter': c,
            'verses': [
                {'number': 1, 'text': f"chapter {c} verse 1"},
                {'number': 2, 'text': f"chapter {c} verse 2"},
            ],
        }
    manifest = read(store.manifest_path('kjv1611'))
    assert manifest['books'] == [{'id': '1sa', 'name': '1 Samuel', 'chapters': 3, 'testament': 'OT'}]
    assert manifest['name'] == KJV1611.name


def test_missing_book_files_are_skipped_with_a_warning(tmp_path, store, caplog):
    source = tmp_path / 'kjv'
    write_json(source / 'Genesis.json', {'book': 'Genesis', 'chapters': source_chapters(2)})
    write_json(source / 'Jude.json', {'book': 'Jude', 'chapters': source_chapters(1)})

    summary = convert_book_files(source, store, book_map=SMALL_MAP)

    assert summary.ok
    assert summary.skipped == 2
    assert 'SKIP: 1 Samuel.json not found' in caplog.text
    assert 'SKIP: Tobit.json not found' in caplog.text
    manifest = read(store.manifest_path('kjv1611'))
    # Declaration order, not directory order
    assert [b['id'] for b in manifest['books']] == ['gen', 'jud']


def test_chapters_keep_source_order_and_verse_gaps(tmp_path, store):
    source = tmp_path / 'kjv'
    write_json(source / 'Jude.json', {'book': 'Jude', 'chapters': [
        {'chapter': 1, 'verses': [{'verse': 1, 'text': 'a'}, {'verse': 3, 'text': 'c'}]},
    ]})

    convert_book_files(source, store, book_map=SMALL_MAP)

    chapter = read(store.root / 'kjv1611' / 'jud' / '1.json')
    assert [v['number'] for v in chapter['verses']] == [1, 3]


def test_malformed_document_aborts_translation_naming_the_file(tmp_path, store, caplog):
    source = tmp_path / 'kjv'
    write_json(source / 'Genesis.json', {'book': 'Genesis', 'chapters': source_chapters(1)})
    (source / '1 Samuel.json').write_text('{"book": "1 Samuel", "chapters": [', encoding='utf-8')

    with caplog.at_level(logging.ERROR):
        summary = convert_book_files(source, store, book_map=SMALL_MAP)

    assert not summary.ok
    assert '1 Samuel.json' in summary.error
    assert '1 Samuel.json' in caplog.text
    # Work done before the failure is kept, but no manifest is written
    assert (store.root / 'kjv1611' / 'gen' / '1.json').is_file()
    assert not store.manifest_path('kjv1611').exists()


def test_wrong_structure_is_not_coerced(tmp_path, store):
    source = tmp_path / 'kjv'
    write_json(source / 'Genesis.json', {'book': 'Genesis', 'chapters': [{'chapter': 1, 'verses': 'none'}]})

    summary = convert_book_files(source, store, book_map=SMALL_MAP)

    assert not summary.ok
    assert 'Genesis.json' in summary.error
    assert not (store.root / 'kjv1611' / 'gen' / '1.json').exists()


def test_rerun_produces_identical_output(tmp_path, store):
    source = tmp_path / 'kjv'
    write_json(source / 'Genesis.json', {'book': 'Genesis', 'chapters': source_chapters(4)})
    write_json(source / 'Tobit.json', {'book': 'Tobit', 'chapters': source_chapters(2)})

    convert_book_files(source, store, book_map=SMALL_MAP)
    first_manifest = store.manifest_path('kjv1611').read_bytes()
    first_chapter = (store.root / 'kjv1611' / 'gen' / '4.json').read_bytes()

    convert_book_files(source, store, book_map=SMALL_MAP)

    assert store.manifest_path('kjv1611').read_bytes() == first_manifest
    assert (store.root / 'kjv1611' / 'gen' / '4.json').read_bytes() == first_chapter
    assert read(store.manifest_path('kjv1611'))['books'][1] == {
        'id': 'tob', 'name': 'Tobit', 'chapters': 2, 'testament': 'DC',
    }


def test_bad_chapter_does_not_stop_later_books(tmp_path, store):
    samuel = source_chapters(3)
    samuel[2]['verses'] = [{'verse': 2, 'text': 'b'}, {'verse': 1, 'text': 'a'}]
    source = tmp_path / 'kjv'
    write_json(source / '1 Samuel.json', {'book': '1 Samuel', 'chapters': samuel})
    write_json(source / 'Jude.json', {'book': 'Jude', 'chapters': source_chapters(1)})

    summary = convert_book_files(source, store, book_map=SMALL_MAP)

    assert summary.ok
    assert summary.failed == 1
    assert read(store.manifest_path('kjv1611'))['books'] == [
        {'id': '1sa', 'name': '1 Samuel', 'chapters': 2, 'testament': 'OT'},
        {'id': 'jud', 'name': 'Jude', 'chapters': 1, 'testament': 'NT'},
    ]


def test_unmapped_book_file_is_reported(tmp_path, store, caplog):
    source = tmp_path / 'kjv'
    write_json(source / 'Genesis.json', {'book': 'Genesis', 'chapters': source_chapters(1)})
    write_json(source / 'Laodiceans.json', {'book': 'Laodiceans', 'chapters': source_chapters(1)})

    summary = convert_book_files(source, store, book_map=SMALL_MAP)

    assert summary.ok
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("'Laodiceans'" in w and 'Laodiceans.json' in w for w in warnings)
    assert not (store.root / 'kjv1611' / 'lao').exists()
    assert [b['id'] for b in read(store.manifest_path('kjv1611'))['books']] == ['gen']
