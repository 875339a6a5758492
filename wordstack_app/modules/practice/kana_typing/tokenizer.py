"""
Pure logic for splitting practice text into typing units.
No Flask, no state.
"""

from enum import IntEnum
from typing import List, Mapping, Tuple

from .romaji import ROMAJI_TABLE


class LanguageMode(IntEnum):
    """Which text of the current item the learner is typing."""
    ENGLISH = 1   # example sentence, one token per character
    JAPANESE = 2  # kana reading, typed as romaji

    @classmethod
    def parse(cls, value) -> 'LanguageMode | None':
        """Return the mode for ``value`` or ``None`` when it is not a known mode."""
        if isinstance(value, bool):
            return None
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return None


def tokenize(text: str, table: Mapping[str, Tuple[str, ...]] = ROMAJI_TABLE) -> List[str]:
    """
    Split ``text`` into typing units, scanning left to right.

    A two-character pair registered in ``table`` (contracted syllables such
    as "きょ") becomes one token; everything else is one token per character.

        >>> tokenize("きょう")
        ['きょ', 'う']
        >>> tokenize("Go!")
        ['G', 'o', '!']
    """
    tokens: List[str] = []
    i = 0
    length = len(text)
    while i < length:
        if i + 1 < length:
            pair = text[i:i + 2]
            if pair in table:
                tokens.append(pair)
                i += 2
                continue
        tokens.append(text[i])
        i += 1
    return tokens
