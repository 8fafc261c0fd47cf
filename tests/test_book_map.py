import logging

from models.bible import BookMapping, Testament
from utils.book_map import (
    BIBLE_API_OUTLINE,
    KJV1611_BOOKS,
    SCROLLMAPPER_BOOKS,
    USFM_BOOKS,
    USFM_BY_ID,
    BookNameMap,
)


def test_each_convention_resolves_its_own_spelling():
    assert KJV1611_BOOKS.lookup('1 Samuel') == BookMapping('1sa', Testament.OLD)
    assert SCROLLMAPPER_BOOKS.lookup('I Samuel') == BookMapping('1sa', Testament.OLD)
    assert USFM_BY_ID['1SA'].book_id == '1sa'


def test_conventions_do_not_leak_into_each_other():
    assert KJV1611_BOOKS.lookup('I Samuel') is None
    assert SCROLLMAPPER_BOOKS.lookup('1 Samuel') is None


def test_shared_names_map_identically():
    assert KJV1611_BOOKS.lookup('Song of Solomon') == SCROLLMAPPER_BOOKS.lookup('Song of Solomon')
    assert KJV1611_BOOKS.lookup('Song of Solomon').book_id == 'sng'


def test_aliases_collapse_to_one_book_id():
    assert SCROLLMAPPER_BOOKS.lookup('Revelation').book_id == 'rev'
    assert SCROLLMAPPER_BOOKS.lookup('Revelation of John').book_id == 'rev'
    assert SCROLLMAPPER_BOOKS.lookup('Ecclesiasticus').book_id == 'sir'


def test_book_ids_are_three_lowercase_characters():
    ids = {m.book_id for m in (KJV1611_BOOKS.lookup(n) for n in KJV1611_BOOKS)}
    ids |= {m.book_id for m in (SCROLLMAPPER_BOOKS.lookup(n) for n in SCROLLMAPPER_BOOKS)}
    ids |= {b.book_id for b in BIBLE_API_OUTLINE}
    ids |= {b.book_id for b in USFM_BOOKS}
    for book_id in ids:
        assert len(book_id) == 3
        assert book_id == book_id.lower()


def test_book_ids_agree_on_testament_across_tables():
    testaments = {}
    tables = [
        [KJV1611_BOOKS.lookup(n) for n in KJV1611_BOOKS],
        [SCROLLMAPPER_BOOKS.lookup(n) for n in SCROLLMAPPER_BOOKS],
        [BookMapping(b.book_id, b.testament) for b in BIBLE_API_OUTLINE],
        [BookMapping(b.book_id, b.testament) for b in USFM_BOOKS],
    ]
    for table in tables:
        for mapping in table:
            assert testaments.setdefault(mapping.book_id, mapping.testament) == mapping.testament


def test_api_outline_is_protestant_canon():
    assert len(BIBLE_API_OUTLINE) == 66
    assert {b.testament for b in BIBLE_API_OUTLINE} == {Testament.OLD, Testament.NEW}
    assert sum(b.chapters for b in BIBLE_API_OUTLINE) == 1189
    assert len({b.book_id for b in BIBLE_API_OUTLINE}) == 66


def test_skip_list_is_not_reported_as_unknown(caplog):
    caplog.set_level(logging.INFO)
    assert SCROLLMAPPER_BOOKS.is_skipped('Laodiceans')
    assert SCROLLMAPPER_BOOKS.resolve('Laodiceans', 'DRC.json') is None
    assert 'SKIP: Laodiceans' in caplog.text
    assert 'UNKNOWN' not in caplog.text


def test_unknown_name_warns_with_book_and_file(caplog):
    table = BookNameMap('test', {'Genesis': ('gen', Testament.OLD)})
    assert table.resolve('Genesys', 'BAD.json') is None
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert 'Genesys' in warnings[0].getMessage()
    assert 'BAD.json' in warnings[0].getMessage()


def test_declaration_order_is_preserved():
    names = list(KJV1611_BOOKS)
    assert names[0] == 'Genesis'
    assert names[-1] == 'Revelation'
    assert names.index('Malachi') < names.index('Tobit') < names.index('Matthew')
