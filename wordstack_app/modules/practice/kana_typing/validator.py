"""
Keystroke validator for typing practice.

``validate`` is called on every keystroke with the learner's full input so
far and the index of the token being typed. It returns the index of the next
token still to type: unchanged while the learner is mid-token (or wrong),
advanced by one when the token is complete, and by two when a geminate
marker and the following mora were typed together ("kko" for "っこ").

Matching is by suffix only, so earlier keystrokes (including mistakes) never
block a later correct spelling and a prefix of a spelling never counts.
"""

from typing import Mapping, Sequence, Tuple

from .romaji import (
    AMBIGUOUS_NASAL_CONTEXT,
    GEMINATE_MARKER,
    GEMINATE_SPELLINGS,
    MORAIC_NASAL,
    NASAL_DOUBLE,
    NASAL_SINGLE,
    ROMAJI_TABLE,
)
from .tokenizer import LanguageMode

Table = Mapping[str, Tuple[str, ...]]


def _ends_with_any(user_input: str, spellings) -> bool:
    return any(user_input.endswith(spelling) for spelling in spellings)


def _validate_ordinary(target: str, index: int, user_input: str, table: Table) -> int:
    spellings = table.get(target)
    if spellings is not None:
        return index + 1 if _ends_with_any(user_input, spellings) else index
    # Plain letters and symbols outside the table are typed as themselves
    return index + 1 if user_input.endswith(target) else index


def _validate_geminate(next_token, index: int, user_input: str, table: Table) -> int:
    if _ends_with_any(user_input, GEMINATE_SPELLINGS):
        return index + 1
    if next_token is None:
        return index

    # Doubled leading consonant consumes the marker and the next mora at once
    doubled = [spelling[0] + spelling for spelling in table.get(next_token, ()) if spelling]
    if _ends_with_any(user_input, doubled):
        return index + 2
    return index


def _validate_nasal(next_token, index: int, user_input: str, table: Table) -> int:
    if next_token is None or next_token not in table:
        return index + 1 if user_input.endswith(NASAL_DOUBLE) else index

    needs_doubled = any(
        spelling and spelling[0] in AMBIGUOUS_NASAL_CONTEXT
        for spelling in table[next_token]
    )
    required = NASAL_DOUBLE if needs_doubled else NASAL_SINGLE
    return index + 1 if user_input.endswith(required) else index


def validate(
    tokens: Sequence[str],
    index: int,
    user_input: str,
    language_mode,
    table: Table = ROMAJI_TABLE,
) -> int:
    """
    Check ``user_input`` against ``tokens[index]`` and return the new index.

    Args:
        tokens: Token sequence of the current item (from ``tokenize``).
        index: Position of the token being typed.
        user_input: Everything the learner typed for this item so far.
        language_mode: ``LanguageMode`` (or its int value) of the sequence.
            The rules are the same for both modes; an unknown mode is a no-op.
        table: Romanization table.

    Returns:
        ``index`` (no match yet), ``index + 1`` or ``index + 2``.
    """
    if LanguageMode.parse(language_mode) is None:
        return index
    if not tokens or index < 0 or index >= len(tokens):
        return index

    target = tokens[index]
    if target != GEMINATE_MARKER and target != MORAIC_NASAL:
        return _validate_ordinary(target, index, user_input, table)

    next_token = tokens[index + 1] if index + 1 < len(tokens) else None
    if target == GEMINATE_MARKER:
        return _validate_geminate(next_token, index, user_input, table)
    return _validate_nasal(next_token, index, user_input, table)
