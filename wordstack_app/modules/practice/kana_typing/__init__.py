"""Romaji typing: the romanization table, tokenizer and keystroke validator."""

from .romaji import GEMINATE_MARKER, MORAIC_NASAL, ROMAJI_TABLE
from .tokenizer import LanguageMode, tokenize
from .validator import validate

__all__ = [
    "GEMINATE_MARKER",
    "LanguageMode",
    "MORAIC_NASAL",
    "ROMAJI_TABLE",
    "tokenize",
    "validate",
]
