# models/bible.py
from dataclasses import dataclass
from enum import Enum


class Testament(str, Enum):
    OLD = "OT"
    DEUTEROCANON = "DC"
    NEW = "NT"


@dataclass(frozen=True)
class BookMapping:
    book_id: str
    testament: Testament


@dataclass(frozen=True)
class OutlineBook:
    """One book of the fixed 66-book outline used by the remote fetch."""
    book_id: str
    api_name: str
    display_name: str
    chapters: int
    testament: Testament


@dataclass(frozen=True)
class UsfmBook:
    usfm_id: str
    book_id: str
    name: str
    testament: Testament


@dataclass
class TranslationConfig:
    id: str
    name: str
    license: str
    source: str = ""
    language: str = "en"
    has_apocrypha: bool = False
