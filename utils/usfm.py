# utils/usfm.py
"""Minimal USFM reader: chapters and verse text, nothing else.

Markers handled:
    \\c n          start of chapter n
    \\v n text     verse n
    \\p \\q \\m ... paragraph/poetry markers, text continues the current verse
    \\s \\mt ...    headings and book titles, dropped
    \\f...\\f*      footnotes, dropped
    \\x...\\x*      cross references, dropped
    \\w word|strong="H1234"\\w*   reduced to the word
"""
import re

SKIP_TAGS = {
    '\\id', '\\ide', '\\h', '\\mt', '\\mt1', '\\mt2', '\\mt3',
    '\\rem', '\\s', '\\s1', '\\s2', '\\s3',
    '\\toc1', '\\toc2', '\\toc3',
    '\\ip', '\\is', '\\is1', '\\is2',
    '\\r', '\\d', '\\sp',
    '\\cl', '\\cp',
}

CONTINUATION_TAGS = {
    '\\p', '\\q', '\\q1', '\\q2', '\\q3',
    '\\m', '\\b', '\\pi', '\\pi2', '\\nb',
    '\\li', '\\li1', '\\li2', '\\li3',
    '\\pm', '\\pmo', '\\pmc',
    '\\qr', '\\qc', '\\qs',
    '\\mi',
}

_FOOTNOTE = re.compile(r'\\f\s.*?\\f\*')
_CROSS_REF = re.compile(r'\\x\s.*?\\x\*')
_WORD_WITH_ATTRS = re.compile(r'\\\+?w\s+([^|\\]+)\|[^\\]*\\\+?w\*')
_WORD = re.compile(r'\\\+?w\s+([^\\]+?)\\\+?w\*')
_CLOSING_TAG = re.compile(r'\\\+?[a-z]+\d?\*')
_OPENING_TAG = re.compile(r'\\\+?[a-z]+\d?\s?')
_WHITESPACE = re.compile(r'\s+')
_LEADING_NUMBER = re.compile(r'(\d+)')


def strip_inline_tags(text):
    text = _FOOTNOTE.sub('', text)
    text = _CROSS_REF.sub('', text)
    text = _WORD_WITH_ATTRS.sub(r'\1', text)
    text = _WORD.sub(r'\1', text)
    text = _CLOSING_TAG.sub('', text)
    text = _OPENING_TAG.sub(' ', text)
    return _WHITESPACE.sub(' ', text).strip()


def read_book_code(content):
    """Return the \\id code of a USFM document (e.g. 'GEN'), or None."""
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if line.startswith('\\id '):
            parts = line.split()
            return parts[1].upper() if len(parts) > 1 else None
    return None


def _leading_number(token):
    # Verse bridges like "\v 1-2" are numbered by their first verse
    match = _LEADING_NUMBER.match(token)
    return int(match.group(1)) if match else 0


def parse_usfm(content):
    """Parse USFM text into [(chapter_number, [(verse_number, text), ...]), ...].

    Chapters come back in document order; a chapter number may appear more
    than once if the document repeats a \\c marker.
    """
    chapters = []
    current_verses = None
    verse_num = 0
    verse_text = ''

    def save_verse():
        if verse_num > 0 and current_verses is not None:
            cleaned = _WHITESPACE.sub(' ', verse_text).strip()
            if cleaned:
                current_verses.append((verse_num, cleaned))

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith('\\c '):
            save_verse()
            verse_num, verse_text = 0, ''
            number = _leading_number(line[3:].strip())
            if number > 0:
                current_verses = []
                chapters.append((number, current_verses))
            else:
                current_verses = None
            continue

        if line.startswith('\\v '):
            save_verse()
            number, _, rest = line[3:].strip().partition(' ')
            verse_num = _leading_number(number)
            verse_text = strip_inline_tags(rest) if rest else ''
            continue

        first_token = line.split(' ')[0]
        if first_token in SKIP_TAGS:
            continue

        if first_token in CONTINUATION_TAGS:
            after_tag = line[len(first_token):].strip()
            if after_tag and verse_num > 0:
                verse_text += ' ' + strip_inline_tags(after_tag)
            continue

        if verse_num > 0:
            verse_text += ' ' + strip_inline_tags(line)

    save_verse()
    return chapters


def merge_duplicate_chapters(chapters):
    """Collapse repeated chapter numbers, keeping the version with most verses.

    Returned in ascending chapter order.
    """
    merged = {}
    for number, verses in chapters:
        existing = merged.get(number)
        if existing is None or len(verses) > len(existing):
            merged[number] = verses
    return sorted(merged.items())
