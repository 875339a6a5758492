# File: wordstack_app/modules/practice/engine/base_engine.py
"""
Base Session Engine
===================
Shared "filter, shuffle, iterate" lifecycle for the practice modes
(Listening, Quiz, Typing).

An engine has two observable states:

* **Unready**: ``init`` has not been called, ``next`` raises.
* **Ready**: the active set is built and ``cursor`` points into it.

``init`` takes the unmastered entries of the store, keeps only the requested
level (``0`` means every level), and shuffles them into the *active set*.
``next`` walks the active set cyclically without reshuffling on wraparound,
then hands the selected entry to the mode hook ``_after_select``.

Engines are pure: no I/O, no Flask context. One engine belongs to one
learner session and is not safe for concurrent use.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from wordstack_app.core.error_handlers import PreconditionNotMetError
from wordstack_app.modules.corpus.logics.sampling import shuffle_copy
from wordstack_app.modules.corpus.logics.store import CorpusStore
from wordstack_app.modules.corpus.schemas import Entry

logger = logging.getLogger(__name__)


class SessionEngine(ABC):
    """
    Contract and shared state for practice engines.

    Subclass checklist:
    * Implement ``get_mode_id``.
    * Override ``_after_select`` for per-item work (distractors, tokens).
    * Override ``_on_init`` to reset mode-specific state.
    """

    def __init__(self):
        self.store: Optional[CorpusStore] = None
        self.active_set: List[Entry] = []
        self.cursor: int = 0
        self.level: int = 0
        self.current: Optional[Entry] = None
        self._ready: bool = False

    @abstractmethod
    def get_mode_id(self) -> str:
        """Unique identifier of this mode, e.g. ``'quiz'``."""
        ...

    # ── lifecycle ────────────────────────────────────────────────────

    @property
    def is_ready(self) -> bool:
        return self._ready

    def needs_init(self, store: CorpusStore, level: int) -> bool:
        """
        True unless the engine is already Ready for ``store`` at ``level``.

        ``init`` always rebuilds and reshuffles; callers that want to keep
        their position in the active set check this first.
        """
        return not self._ready or self.store is not store or self.level != level

    def init(self, store: CorpusStore, level: int = 0) -> int:
        """Build the active set for ``level`` and reset the cursor. Returns its size."""
        candidates = store.entries_excluding_mastered()
        if level != 0:
            candidates = CorpusStore.entries_at_level(candidates, level)

        self.store = store
        self.level = level
        self.active_set = shuffle_copy(candidates)
        self.cursor = 0
        self.current = None
        self._ready = True
        self._on_init()

        logger.debug(
            "[%s] active set built: level=%d size=%d",
            self.get_mode_id(), level, len(self.active_set),
        )
        return len(self.active_set)

    def next(self) -> Optional[Entry]:
        """
        Advance to the next entry of the active set.

        Returns ``None`` (and clears ``current``) when the active set is
        empty: there is nothing to practice, which is not an error.
        """
        self._require_ready('next')

        if not self.active_set:
            self.current = None
            self._after_select(None)
            return None

        self.current = self.active_set[self.cursor]
        self.cursor = (self.cursor + 1) % len(self.active_set)
        self._after_select(self.current)
        return self.current

    # ── hooks ────────────────────────────────────────────────────────

    def _on_init(self) -> None:
        """Reset mode-specific state after the active set is rebuilt."""

    def _after_select(self, entry: Optional[Entry]) -> None:
        """Per-item work once ``current`` is chosen (``None`` when empty)."""

    # ── helpers ──────────────────────────────────────────────────────

    def _require_ready(self, operation: str) -> None:
        if not self._ready:
            raise PreconditionNotMetError(
                f"{self.get_mode_id()} engine is not initialized; call init first",
                operation=operation,
            )
