# utils/book_map.py
"""Static name -> BookId tables, one per upstream naming convention.

The tables are deliberately kept apart even where two sources spell a book
the same way. Each lookup either resolves exactly or reports "unknown";
nothing here guesses.
"""
import logging

from models.bible import BookMapping, OutlineBook, Testament, UsfmBook

logger = logging.getLogger(__name__)

OT = Testament.OLD
DC = Testament.DEUTEROCANON
NT = Testament.NEW


class BookNameMap:
    def __init__(self, source, entries, skip=()):
        self.source = source
        self._entries = {name: BookMapping(book_id, testament) for name, (book_id, testament) in entries.items()}
        self.skip = frozenset(skip)

    def __contains__(self, name):
        return name in self._entries

    def __iter__(self):
        # Declaration order
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def lookup(self, name):
        """Return the BookMapping for an upstream name, or None if unknown."""
        return self._entries.get(name)

    def is_skipped(self, name):
        return name in self.skip

    def resolve(self, name, source_file=None):
        """Lookup that logs skip-listed and unknown names.

        Returns None for both; the caller omits the book either way.
        """
        if self.is_skipped(name):
            logger.info(f"SKIP: {name} (not in supported canon)")
            return None
        mapping = self.lookup(name)
        if mapping is None:
            where = f" in {source_file}" if source_file else ""
            logger.warning(f"UNKNOWN: '{name}'{where} has no {self.source} mapping, skipping")
        return mapping


# Filenames (without .json) of the aruljohn/Bible-kjv-1611 dataset, one book per file
KJV1611_BOOKS = BookNameMap('kjv1611', {
    'Genesis': ('gen', OT),
    'Exodus': ('exo', OT),
    'Leviticus': ('lev', OT),
    'Numbers': ('num', OT),
    'Deuteronomy': ('deu', OT),
    'Joshua': ('jos', OT),
    'Judges': ('jdg', OT),
    'Ruth': ('rut', OT),
    '1 Samuel': ('1sa', OT),
    '2 Samuel': ('2sa', OT),
    '1 Kings': ('1ki', OT),
    '2 Kings': ('2ki', OT),
    '1 Chronicles': ('1ch', OT),
    '2 Chronicles': ('2ch', OT),
    'Ezra': ('ezr', OT),
    'Nehemiah': ('neh', OT),
    'Esther': ('est', OT),
    'Job': ('job', OT),
    'Psalms': ('psa', OT),
    'Proverbs': ('pro', OT),
    'Ecclesiastes': ('ecc', OT),
    'Song of Solomon': ('sng', OT),
    'Isaiah': ('isa', OT),
    'Jeremiah': ('jer', OT),
    'Lamentations': ('lam', OT),
    'Ezekiel': ('ezk', OT),
    'Daniel': ('dan', OT),
    'Hosea': ('hos', OT),
    'Joel': ('jol', OT),
    'Amos': ('amo', OT),
    'Obadiah': ('oba', OT),
    'Jonah': ('jon', OT),
    'Micah': ('mic', OT),
    'Nahum': ('nah', OT),
    'Habakkuk': ('hab', OT),
    'Zephaniah': ('zep', OT),
    'Haggai': ('hag', OT),
    'Zechariah': ('zec', OT),
    'Malachi': ('mal', OT),
    'Tobit': ('tob', DC),
    'Judith': ('jdt', DC),
    'Wisdom of Solomon': ('wis', DC),
    'Ecclesiasticus': ('sir', DC),
    'Baruch': ('bar', DC),
    'Letter of Jeremiah': ('lje', DC),
    'Prayer of Azariah': ('aza', DC),
    'Susanna': ('sus', DC),
    'Bel and the Dragon': ('bel', DC),
    'Prayer of Manasseh': ('pma', DC),
    '1 Esdras': ('1es', DC),
    '2 Esdras': ('2es', DC),
    '1 Maccabees': ('1ma', DC),
    '2 Maccabees': ('2ma', DC),
    'Matthew': ('mat', NT),
    'Mark': ('mrk', NT),
    'Luke': ('luk', NT),
    'John': ('jhn', NT),
    'Acts': ('act', NT),
    'Romans': ('rom', NT),
    '1 Corinthians': ('1co', NT),
    '2 Corinthians': ('2co', NT),
    'Galatians': ('gal', NT),
    'Ephesians': ('eph', NT),
    'Philippians': ('php', NT),
    'Colossians': ('col', NT),
    '1 Thessalonians': ('1th', NT),
    '2 Thessalonians': ('2th', NT),
    '1 Timothy': ('1ti', NT),
    '2 Timothy': ('2ti', NT),
    'Titus': ('tit', NT),
    'Philemon': ('phm', NT),
    'Hebrews': ('heb', NT),
    'James': ('jas', NT),
    '1 Peter': ('1pe', NT),
    '2 Peter': ('2pe', NT),
    '1 John': ('1jn', NT),
    '2 John': ('2jn', NT),
    '3 John': ('3jn', NT),
    'Jude': ('jud', NT),
    'Revelation': ('rev', NT),
})

# Book names embedded in scrollmapper/bible_databases JSON (Roman numerals)
SCROLLMAPPER_BOOKS = BookNameMap('scrollmapper', {
    'Genesis': ('gen', OT),
    'Exodus': ('exo', OT),
    'Leviticus': ('lev', OT),
    'Numbers': ('num', OT),
    'Deuteronomy': ('deu', OT),
    'Joshua': ('jos', OT),
    'Judges': ('jdg', OT),
    'Ruth': ('rut', OT),
    'I Samuel': ('1sa', OT),
    'II Samuel': ('2sa', OT),
    'I Kings': ('1ki', OT),
    'II Kings': ('2ki', OT),
    'I Chronicles': ('1ch', OT),
    'II Chronicles': ('2ch', OT),
    'Ezra': ('ezr', OT),
    'Nehemiah': ('neh', OT),
    'Esther': ('est', OT),
    'Job': ('job', OT),
    'Psalms': ('psa', OT),
    'Proverbs': ('pro', OT),
    'Ecclesiastes': ('ecc', OT),
    'Song of Solomon': ('sng', OT),
    'Isaiah': ('isa', OT),
    'Jeremiah': ('jer', OT),
    'Lamentations': ('lam', OT),
    'Ezekiel': ('ezk', OT),
    'Daniel': ('dan', OT),
    'Hosea': ('hos', OT),
    'Joel': ('jol', OT),
    'Amos': ('amo', OT),
    'Obadiah': ('oba', OT),
    'Jonah': ('jon', OT),
    'Micah': ('mic', OT),
    'Nahum': ('nah', OT),
    'Habakkuk': ('hab', OT),
    'Zephaniah': ('zep', OT),
    'Haggai': ('hag', OT),
    'Zechariah': ('zec', OT),
    'Malachi': ('mal', OT),
    'Tobit': ('tob', DC),
    'Judith': ('jdt', DC),
    'Wisdom': ('wis', DC),
    'Wisdom of Solomon': ('wis', DC),
    'Sirach': ('sir', DC),
    'Ecclesiasticus': ('sir', DC),
    'Baruch': ('bar', DC),
    'I Maccabees': ('1ma', DC),
    'II Maccabees': ('2ma', DC),
    'I Esdras': ('1es', DC),
    'II Esdras': ('2es', DC),
    'Prayer of Manasses': ('pma', DC),
    'Additional Psalm': ('p15', DC),
    # DRC Esther (16 ch.) and Daniel (14 ch.) carry the Greek additions inline
    'Matthew': ('mat', NT),
    'Mark': ('mrk', NT),
    'Luke': ('luk', NT),
    'John': ('jhn', NT),
    'Acts': ('act', NT),
    'Romans': ('rom', NT),
    'I Corinthians': ('1co', NT),
    'II Corinthians': ('2co', NT),
    'Galatians': ('gal', NT),
    'Ephesians': ('eph', NT),
    'Philippians': ('php', NT),
    'Colossians': ('col', NT),
    'I Thessalonians': ('1th', NT),
    'II Thessalonians': ('2th', NT),
    'I Timothy': ('1ti', NT),
    'II Timothy': ('2ti', NT),
    'Titus': ('tit', NT),
    'Philemon': ('phm', NT),
    'Hebrews': ('heb', NT),
    'James': ('jas', NT),
    'I Peter': ('1pe', NT),
    'II Peter': ('2pe', NT),
    'I John': ('1jn', NT),
    'II John': ('2jn', NT),
    'III John': ('3jn', NT),
    'Jude': ('jud', NT),
    'Revelation of John': ('rev', NT),
    'Revelation': ('rev', NT),
}, skip={'Laodiceans'})


def _outline(rows):
    return [OutlineBook(book_id, name, name, chapters, testament) for book_id, name, chapters, testament in rows]


# bible-api.com path names with nominal chapter counts (Protestant canon only)
BIBLE_API_OUTLINE = _outline([
    ('gen', 'Genesis', 50, OT),
    ('exo', 'Exodus', 40, OT),
    ('lev', 'Leviticus', 27, OT),
    ('num', 'Numbers', 36, OT),
    ('deu', 'Deuteronomy', 34, OT),
    ('jos', 'Joshua', 24, OT),
    ('jdg', 'Judges', 21, OT),
    ('rut', 'Ruth', 4, OT),
    ('1sa', '1 Samuel', 31, OT),
    ('2sa', '2 Samuel', 24, OT),
    ('1ki', '1 Kings', 22, OT),
    ('2ki', '2 Kings', 25, OT),
    ('1ch', '1 Chronicles', 29, OT),
    ('2ch', '2 Chronicles', 36, OT),
    ('ezr', 'Ezra', 10, OT),
    ('neh', 'Nehemiah', 13, OT),
    ('est', 'Esther', 10, OT),
    ('job', 'Job', 42, OT),
    ('psa', 'Psalms', 150, OT),
    ('pro', 'Proverbs', 31, OT),
    ('ecc', 'Ecclesiastes', 12, OT),
    ('sng', 'Song of Solomon', 8, OT),
    ('isa', 'Isaiah', 66, OT),
    ('jer', 'Jeremiah', 52, OT),
    ('lam', 'Lamentations', 5, OT),
    ('ezk', 'Ezekiel', 48, OT),
    ('dan', 'Daniel', 12, OT),
    ('hos', 'Hosea', 14, OT),
    ('jol', 'Joel', 3, OT),
    ('amo', 'Amos', 9, OT),
    ('oba', 'Obadiah', 1, OT),
    ('jon', 'Jonah', 4, OT),
    ('mic', 'Micah', 7, OT),
    ('nah', 'Nahum', 3, OT),
    ('hab', 'Habakkuk', 3, OT),
    ('zep', 'Zephaniah', 3, OT),
    ('hag', 'Haggai', 2, OT),
    ('zec', 'Zechariah', 14, OT),
    ('mal', 'Malachi', 4, OT),
    ('mat', 'Matthew', 28, NT),
    ('mrk', 'Mark', 16, NT),
    ('luk', 'Luke', 24, NT),
    ('jhn', 'John', 21, NT),
    ('act', 'Acts', 28, NT),
    ('rom', 'Romans', 16, NT),
    ('1co', '1 Corinthians', 16, NT),
    ('2co', '2 Corinthians', 13, NT),
    ('gal', 'Galatians', 6, NT),
    ('eph', 'Ephesians', 6, NT),
    ('php', 'Philippians', 4, NT),
    ('col', 'Colossians', 4, NT),
    ('1th', '1 Thessalonians', 5, NT),
    ('2th', '2 Thessalonians', 3, NT),
    ('1ti', '1 Timothy', 6, NT),
    ('2ti', '2 Timothy', 4, NT),
    ('tit', 'Titus', 3, NT),
    ('phm', 'Philemon', 1, NT),
    ('heb', 'Hebrews', 13, NT),
    ('jas', 'James', 5, NT),
    ('1pe', '1 Peter', 5, NT),
    ('2pe', '2 Peter', 3, NT),
    ('1jn', '1 John', 5, NT),
    ('2jn', '2 John', 1, NT),
    ('3jn', '3 John', 1, NT),
    ('jud', 'Jude', 1, NT),
    ('rev', 'Revelation', 22, NT),
])

# USFM \id codes as used by eBible.org (WEB) and the Open English Bible
USFM_BOOKS = [UsfmBook(usfm_id, book_id, name, testament) for usfm_id, book_id, name, testament in [
    ('GEN', 'gen', 'Genesis', OT),
    ('EXO', 'exo', 'Exodus', OT),
    ('LEV', 'lev', 'Leviticus', OT),
    ('NUM', 'num', 'Numbers', OT),
    ('DEU', 'deu', 'Deuteronomy', OT),
    ('JOS', 'jos', 'Joshua', OT),
    ('JDG', 'jdg', 'Judges', OT),
    ('RUT', 'rut', 'Ruth', OT),
    ('1SA', '1sa', '1 Samuel', OT),
    ('2SA', '2sa', '2 Samuel', OT),
    ('1KI', '1ki', '1 Kings', OT),
    ('2KI', '2ki', '2 Kings', OT),
    ('1CH', '1ch', '1 Chronicles', OT),
    ('2CH', '2ch', '2 Chronicles', OT),
    ('EZR', 'ezr', 'Ezra', OT),
    ('NEH', 'neh', 'Nehemiah', OT),
    ('EST', 'est', 'Esther', OT),
    ('JOB', 'job', 'Job', OT),
    ('PSA', 'psa', 'Psalms', OT),
    ('PRO', 'pro', 'Proverbs', OT),
    ('ECC', 'ecc', 'Ecclesiastes', OT),
    ('SNG', 'sng', 'Song of Solomon', OT),
    ('ISA', 'isa', 'Isaiah', OT),
    ('JER', 'jer', 'Jeremiah', OT),
    ('LAM', 'lam', 'Lamentations', OT),
    ('EZK', 'ezk', 'Ezekiel', OT),
    ('DAN', 'dan', 'Daniel', OT),
    ('HOS', 'hos', 'Hosea', OT),
    ('JOL', 'jol', 'Joel', OT),
    ('AMO', 'amo', 'Amos', OT),
    ('OBA', 'oba', 'Obadiah', OT),
    ('JON', 'jon', 'Jonah', OT),
    ('MIC', 'mic', 'Micah', OT),
    ('NAM', 'nah', 'Nahum', OT),
    ('HAB', 'hab', 'Habakkuk', OT),
    ('ZEP', 'zep', 'Zephaniah', OT),
    ('HAG', 'hag', 'Haggai', OT),
    ('ZEC', 'zec', 'Zechariah', OT),
    ('MAL', 'mal', 'Malachi', OT),
    ('TOB', 'tob', 'Tobit', DC),
    ('JDT', 'jdt', 'Judith', DC),
    ('ESG', 'ade', 'Additions to Esther', DC),
    ('WIS', 'wis', 'Wisdom of Solomon', DC),
    ('SIR', 'sir', 'Sirach', DC),
    ('BAR', 'bar', 'Baruch', DC),
    ('1MA', '1ma', '1 Maccabees', DC),
    ('2MA', '2ma', '2 Maccabees', DC),
    ('1ES', '1es', '1 Esdras', DC),
    ('MAN', 'pma', 'Prayer of Manasseh', DC),
    ('PS2', 'p15', 'Psalm 151', DC),
    ('3MA', '3ma', '3 Maccabees', DC),
    ('2ES', '2es', '2 Esdras', DC),
    ('4MA', '4ma', '4 Maccabees', DC),
    ('DAG', 'add', 'Additions to Daniel', DC),
    ('MAT', 'mat', 'Matthew', NT),
    ('MRK', 'mrk', 'Mark', NT),
    ('LUK', 'luk', 'Luke', NT),
    ('JHN', 'jhn', 'John', NT),
    ('ACT', 'act', 'Acts', NT),
    ('ROM', 'rom', 'Romans', NT),
    ('1CO', '1co', '1 Corinthians', NT),
    ('2CO', '2co', '2 Corinthians', NT),
    ('GAL', 'gal', 'Galatians', NT),
    ('EPH', 'eph', 'Ephesians', NT),
    ('PHP', 'php', 'Philippians', NT),
    ('COL', 'col', 'Colossians', NT),
    ('1TH', '1th', '1 Thessalonians', NT),
    ('2TH', '2th', '2 Thessalonians', NT),
    ('1TI', '1ti', '1 Timothy', NT),
    ('2TI', '2ti', '2 Timothy', NT),
    ('TIT', 'tit', 'Titus', NT),
    ('PHM', 'phm', 'Philemon', NT),
    ('HEB', 'heb', 'Hebrews', NT),
    ('JAS', 'jas', 'James', NT),
    ('1PE', '1pe', '1 Peter', NT),
    ('2PE', '2pe', '2 Peter', NT),
    ('1JN', '1jn', '1 John', NT),
    ('2JN', '2jn', '2 John', NT),
    ('3JN', '3jn', '3 John', NT),
    ('JUD', 'jud', 'Jude', NT),
    ('REV', 'rev', 'Revelation', NT),
]]

USFM_BY_ID = {book.usfm_id: book for book in USFM_BOOKS}
