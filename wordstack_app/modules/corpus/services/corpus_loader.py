# File: wordstack_app/modules/corpus/services/corpus_loader.py
# Builds corpus entries from tabular rows and imports external mastery data.

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Sequence, Tuple

from ..logics.store import CorpusStore
from ..schemas import Entry, MasteryImportResult

logger = logging.getLogger(__name__)

# id, word, definition_en, definition_ja, example_en, example_ja, kana, level, related_ids
CORPUS_FIELD_COUNT = 9


def parse_rows(rows: Iterable[Sequence[str]]) -> Tuple[List[Entry], int]:
    """
    Convert raw rows into entries.

    Rows with the wrong field count or an empty id are skipped, never fatal.

    Returns:
        (entries, skipped_count)
    """
    entries: List[Entry] = []
    skipped = 0
    for line_no, row in enumerate(rows, start=1):
        fields = [str(value).strip() if value is not None else '' for value in row]
        if len(fields) != CORPUS_FIELD_COUNT:
            if any(fields):
                logger.warning(
                    "Skipping row %d: expected %d fields, got %d",
                    line_no, CORPUS_FIELD_COUNT, len(fields),
                )
                skipped += 1
            continue
        if not fields[0]:
            logger.warning("Skipping row %d: empty id", line_no)
            skipped += 1
            continue
        entries.append(Entry.from_fields(*fields))
    return entries, skipped


def load_corpus(store: CorpusStore, rows: Iterable[Sequence[str]]) -> int:
    """Append every well-formed row to ``store``. Returns the number added."""
    initial = len(store)
    entries, skipped = parse_rows(rows)
    for entry in entries:
        store.add_entry(entry)
    logger.info(
        "Loaded %d entries (%d skipped). Total entries: %d (previously %d).",
        len(entries), skipped, len(store), initial,
    )
    return len(entries)


def split_corpus_text(text: str, has_header: bool = True) -> List[List[str]]:
    """Split tab-separated corpus text into rows, dropping the header row."""
    # Only line breaks are trimmed; a trailing tab is an empty last column
    lines = text.strip('\r\n').split('\n')
    if has_header:
        lines = lines[1:]
    return [line.rstrip('\r').split('\t') for line in lines if line.strip('\r')]


def read_corpus_file(path: str, encoding: str = 'utf-8') -> List[List[str]]:
    """Read a tab-separated corpus file (first line is a header)."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Corpus file not found: {path}")
    with open(path, 'r', encoding=encoding) as handle:
        return split_corpus_text(handle.read())


def set_mastery_ids(store: CorpusStore, ids: Iterable[int]) -> MasteryImportResult:
    """
    Replace the store's mastery set with ``ids``, keeping only ids present
    in the corpus. Duplicates count as added but are stored once.
    """
    known = store.known_ids()
    store.clear_mastered()
    added = 0
    skipped = 0
    for entry_id in ids:
        if entry_id in known:
            store.mark_mastered(entry_id)
            added += 1
        else:
            skipped += 1

    message = f"Validated {added + skipped} stored ids, loaded {added} valid ids."
    if skipped:
        message += f" ({skipped} ids are not in the current corpus and were skipped)"
    logger.info(message)

    return MasteryImportResult(added=added, skipped=skipped, total=len(store.mastered_ids))
