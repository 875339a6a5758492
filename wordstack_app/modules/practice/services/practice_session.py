# File: wordstack_app/modules/practice/services/practice_session.py
"""
Practice Session
================
In-process facade over one learner's corpus store and practice engines.

Every operation the host (HTTP routes, UI bridge) needs lives here, with
argument checking done before any state changes. Mastery mutations are
written back through the optional storage collaborator.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Sequence

from wordstack_app.core.error_handlers import InvalidArgumentError, PreconditionNotMetError
from wordstack_app.modules.corpus.logics.sampling import shuffle_copy
from wordstack_app.modules.corpus.logics.store import CorpusStore
from wordstack_app.modules.corpus.schemas import Entry, MasteryImportResult
from wordstack_app.modules.corpus.services import corpus_loader
from wordstack_app.modules.corpus.services.mastery_storage import MasteryStorage

from ..config import PracticeModuleDefaultConfig
from ..engine import ListeningEngine, QuizEngine, TypingEngine

logger = logging.getLogger(__name__)


def _require_int(name: str, value, minimum: Optional[int] = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f'{name} must be an integer', errors={name: repr(value)})
    if minimum is not None and value < minimum:
        raise InvalidArgumentError(f'{name} must be >= {minimum}', errors={name: value})
    return value


class PracticeSession:
    """One learner's corpus, mastery set and the three practice engines."""

    def __init__(
        self,
        store: Optional[CorpusStore] = None,
        storage: Optional[MasteryStorage] = None,
        session_id: str = PracticeModuleDefaultConfig.PRACTICE_DEFAULT_SESSION_ID,
    ):
        self.session_id = session_id
        # Held by the host for the duration of one request
        self.lock = threading.Lock()
        self.store = store if store is not None else CorpusStore()
        self.storage = storage
        self.listening = ListeningEngine()
        self.quiz = QuizEngine()
        self.typing = TypingEngine()

    # ── corpus ───────────────────────────────────────────────────────

    @property
    def corpus_loaded(self) -> bool:
        return self.store.is_loaded

    def load_corpus(self, rows: Iterable[Sequence[str]]) -> int:
        """Add entries from tabular rows; malformed rows are skipped. Returns count added."""
        if isinstance(rows, (str, bytes)):
            raise InvalidArgumentError('rows must be a list of rows, not a string')
        rows = list(rows)
        for position, row in enumerate(rows):
            if isinstance(row, (str, bytes)) or not isinstance(row, (list, tuple)):
                raise InvalidArgumentError(
                    'each row must be a list of fields', errors={'row': position}
                )
        return corpus_loader.load_corpus(self.store, rows)

    def load_corpus_file(self, path: str) -> int:
        return corpus_loader.load_corpus(self.store, corpus_loader.read_corpus_file(path))

    def summary(self) -> dict:
        return {
            'session_id': self.session_id,
            'entries': len(self.store),
            'mastered': len(self.store.mastered_ids),
            'unmastered_by_level': self.store.level_counts(),
        }

    # ── mastery ──────────────────────────────────────────────────────

    def restore_mastery(self) -> MasteryImportResult:
        """Replace the mastery set with what the storage collaborator holds."""
        self._require_corpus('restore_mastery')
        stored = self.storage.load() if self.storage is not None else []
        return corpus_loader.set_mastery_ids(self.store, stored)

    def set_mastery_ids(self, ids: Iterable[int]) -> MasteryImportResult:
        """Replace the mastery set; ids unknown to the corpus are skipped."""
        self._require_corpus('set_mastery_ids')
        if isinstance(ids, (str, bytes)):
            raise InvalidArgumentError('ids must be a list of integers')
        ids = list(ids)
        for entry_id in ids:
            _require_int('id', entry_id)

        result = corpus_loader.set_mastery_ids(self.store, ids)
        self._persist()
        return result

    def mark_mastered(self, entry_id: int) -> int:
        self._require_corpus('mark_mastered')
        _require_int('id', entry_id)
        before = len(self.store.mastered_ids)
        self.store.mark_mastered(entry_id)
        logger.debug("mark_mastered(%d): %d -> %d", entry_id, before, len(self.store.mastered_ids))
        self._persist()
        return len(self.store.mastered_ids)

    def unmark_mastered(self, entry_id: int) -> int:
        self._require_corpus('unmark_mastered')
        _require_int('id', entry_id)
        before = len(self.store.mastered_ids)
        self.store.unmark_mastered(entry_id)
        logger.debug("unmark_mastered(%d): %d -> %d", entry_id, before, len(self.store.mastered_ids))
        self._persist()
        return len(self.store.mastered_ids)

    def clear_mastered(self) -> int:
        self._require_corpus('clear_mastered')
        self.store.clear_mastered()
        if self.storage is not None:
            self.storage.clear()
        return 0

    def search(self, level: int) -> List[Entry]:
        """
        Level ``0`` lists mastered entries; any other level lists unmastered
        entries of that level. Results are shuffled.
        """
        self._require_corpus('search')
        _require_int('level', level, minimum=0)
        if level == 0:
            results = self.store.entries_only_mastered()
        else:
            results = CorpusStore.entries_at_level(self.store.entries_excluding_mastered(), level)
        return shuffle_copy(results)

    # ── listening ────────────────────────────────────────────────────

    def start_listening(self, level: int = 0) -> int:
        self._require_corpus('start_listening')
        _require_int('level', level, minimum=0)
        if self.listening.needs_init(self.store, level):
            self.listening.init(self.store, level)
        return len(self.listening.active_set)

    def next_listening_item(self) -> Optional[Entry]:
        return self.listening.next()

    # ── quiz ─────────────────────────────────────────────────────────

    def start_quiz(
        self,
        level: int = 0,
        options_count: int = PracticeModuleDefaultConfig.PRACTICE_DEFAULT_QUIZ_OPTIONS,
    ) -> int:
        self._require_corpus('start_quiz')
        _require_int('level', level, minimum=0)
        _require_int('options_count', options_count, minimum=1)
        if self.quiz.needs_init(self.store, level):
            self.quiz.init(self.store, level, options_count)
        else:
            self.quiz.set_options_count(options_count)
        return len(self.quiz.active_set)

    def next_quiz_item(self) -> Optional[Entry]:
        return self.quiz.next()

    def current_quiz_options(self) -> List[Entry]:
        """Options of the current question; empty when there is nothing to ask."""
        if not self.quiz.is_ready:
            raise PreconditionNotMetError(
                'Quiz is not started; call start_quiz first',
                operation='current_quiz_options',
            )
        return list(self.quiz.current_options)

    def check_quiz_answer(self, choice_id: int) -> bool:
        _require_int('choice_id', choice_id)
        return self.quiz.check_answer(choice_id)

    # ── typing ───────────────────────────────────────────────────────

    def start_typing(self) -> int:
        self._require_corpus('start_typing')
        return self.typing.init(self.store)

    def item_at(self, index: int) -> Optional[Entry]:
        _require_int('index', index)
        return self.typing.item_at(index)

    def tokens_for(self, language_mode: int) -> List[str]:
        return self.typing.tokens_for(language_mode)

    def on_keystroke(self, user_input: str, index: int, language_mode: int) -> int:
        if not isinstance(user_input, str):
            raise InvalidArgumentError('input must be a string', errors={'input': repr(user_input)})
        _require_int('index', index)
        return self.typing.on_keystroke(user_input, index, language_mode)

    # ── helpers ──────────────────────────────────────────────────────

    def _require_corpus(self, operation: str) -> None:
        if not self.store.is_loaded:
            raise PreconditionNotMetError(
                'Corpus is not loaded; call load_corpus first', operation=operation
            )

    def _persist(self) -> None:
        if self.storage is None:
            return
        self.storage.save(self.store.mastered_ids)
