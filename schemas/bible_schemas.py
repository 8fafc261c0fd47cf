from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator
from typing import List

from models.bible import Testament


# --- Canonical output shapes ---

class VerseRecord(BaseModel):
    number: PositiveInt
    text: str


class ChapterRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translation: str
    book: str = Field(..., min_length=3, max_length=3)
    book_name: str = Field(..., alias='bookName')
    chapter: PositiveInt
    verses: List[VerseRecord]

    @field_validator('verses')
    @classmethod
    def verses_ascending(cls, verses):
        # Gaps are allowed, repeats and reordering are not
        numbers = [v.number for v in verses]
        if any(b <= a for a, b in zip(numbers, numbers[1:])):
            raise ValueError('verse numbers must be unique and ascending')
        return verses

    def to_json(self):
        return self.model_dump(mode='json', by_alias=True)


class BookEntry(BaseModel):
    id: str = Field(..., min_length=3, max_length=3)
    name: str
    chapters: int = Field(..., ge=0)
    testament: Testament


class Manifest(BaseModel):
    translation: str
    name: str
    language: str = 'en'
    license: str
    books: List[BookEntry] = []

    def to_json(self):
        return self.model_dump(mode='json')


# --- Upstream source shapes ---

class SourceVerse(BaseModel):
    verse: int
    text: str


class SourceChapter(BaseModel):
    chapter: int
    verses: List[SourceVerse]


class SourceBook(BaseModel):
    """One book per file (aruljohn/Bible-kjv-1611 layout)."""
    book: str
    chapters: List[SourceChapter]


class MultiBookEntry(BaseModel):
    name: str
    chapters: List[SourceChapter]


class MultiBookSource(BaseModel):
    """Whole translation in one file (scrollmapper/bible_databases layout)."""
    translation: str = ''
    books: List[MultiBookEntry]


class ApiVerse(BaseModel):
    book_id: str = ''
    book_name: str = ''
    chapter: int
    verse: int
    text: str


class ApiChapterResponse(BaseModel):
    reference: str = ''
    verses: List[ApiVerse]
    translation_id: str = ''
