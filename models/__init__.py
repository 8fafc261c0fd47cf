# This file makes the models directory a Python package
from .bible import BookMapping, OutlineBook, Testament, TranslationConfig, UsfmBook

__all__ = [
    'BookMapping',
    'OutlineBook',
    'Testament',
    'TranslationConfig',
    'UsfmBook',
]
