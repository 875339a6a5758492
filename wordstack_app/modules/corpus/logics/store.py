"""
Corpus Store.
Owns every entry and the set of mastered entry ids. Pure logic, no I/O.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Set

from ..schemas import Entry


class CorpusStore:
    """
    In-memory corpus plus mastery set.

    ``entries`` is append-only and keeps load order. Mastered ids keep their
    insertion order (that order is what gets persisted) with a set alongside
    for membership checks. The store does not verify that a mastered id
    belongs to a loaded entry; importers must do that before inserting.
    """

    def __init__(self, entries: Optional[Iterable[Entry]] = None):
        self.entries: List[Entry] = list(entries or [])
        self._mastered_order: List[int] = []
        self._mastered_set: Set[int] = set()

    # ── entries ──────────────────────────────────────────────────────

    def add_entry(self, entry: Entry) -> None:
        self.entries.append(entry)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_loaded(self) -> bool:
        return bool(self.entries)

    def known_ids(self) -> Set[int]:
        return {entry.id for entry in self.entries}

    def has_entry(self, entry_id: int) -> bool:
        return any(entry.id == entry_id for entry in self.entries)

    def get_entry(self, entry_id: int) -> Optional[Entry]:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    # ── mastery ──────────────────────────────────────────────────────

    @property
    def mastered_ids(self) -> List[int]:
        """Mastered ids in insertion order (a copy)."""
        return list(self._mastered_order)

    def is_mastered(self, entry_id: int) -> bool:
        return entry_id in self._mastered_set

    def mark_mastered(self, entry_id: int) -> None:
        if entry_id in self._mastered_set:
            return
        self._mastered_set.add(entry_id)
        self._mastered_order.append(entry_id)

    def unmark_mastered(self, entry_id: int) -> None:
        if entry_id not in self._mastered_set:
            return
        self._mastered_set.discard(entry_id)
        self._mastered_order.remove(entry_id)

    def clear_mastered(self) -> None:
        self._mastered_set.clear()
        self._mastered_order.clear()

    # ── queries ──────────────────────────────────────────────────────

    def entries_excluding_mastered(self) -> List[Entry]:
        mastered = set(self._mastered_order)
        return [entry for entry in self.entries if entry.id not in mastered]

    def entries_only_mastered(self) -> List[Entry]:
        mastered = set(self._mastered_order)
        return [entry for entry in self.entries if entry.id in mastered]

    @staticmethod
    def entries_at_level(source: Sequence[Entry], level: int) -> List[Entry]:
        return [entry for entry in source if entry.level == level]

    def level_counts(self) -> Dict[int, int]:
        """Number of unmastered entries per level."""
        counts: Dict[int, int] = {}
        for entry in self.entries_excluding_mastered():
            counts[entry.level] = counts.get(entry.level, 0) + 1
        return counts
