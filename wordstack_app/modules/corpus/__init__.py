# File: wordstack_app/modules/corpus/__init__.py
"""Corpus and mastery data: entries, the store, sampling and loaders."""

from .logics.sampling import EmptyInputError, random_element, shuffle_copy
from .logics.store import CorpusStore
from .schemas import Entry, MasteryImportResult

__all__ = [
    "CorpusStore",
    "EmptyInputError",
    "Entry",
    "MasteryImportResult",
    "random_element",
    "shuffle_copy",
]
