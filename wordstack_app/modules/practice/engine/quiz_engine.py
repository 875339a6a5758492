"""
Quiz Business Rules Engine.
Pure logic, no Database access.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from wordstack_app.core.error_handlers import InvalidArgumentError, PreconditionNotMetError
from wordstack_app.modules.corpus.logics.sampling import random_element, shuffle_copy
from wordstack_app.modules.corpus.logics.store import CorpusStore
from wordstack_app.modules.corpus.schemas import Entry

from .base_engine import SessionEngine

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS_COUNT = 4


def build_options(correct: Entry, pool: List[Entry], options_count: int) -> List[Entry]:
    """
    Pick up to ``options_count`` entries with distinct ids, starting with
    ``correct``, by random draws from ``pool``, then shuffle them.

    At most ``2 * len(pool)`` draws are made; a small pool may therefore
    yield fewer options than requested.
    """
    options = [correct]
    seen_ids = {correct.id}
    max_attempts = len(pool) * 2
    attempts = 0
    while len(options) < options_count and attempts < max_attempts:
        attempts += 1
        candidate = random_element(pool)
        if candidate.id in seen_ids:
            continue
        options.append(candidate)
        seen_ids.add(candidate.id)
    return shuffle_copy(options)


class QuizEngine(SessionEngine):
    """
    Multiple-choice mode.

    The correct answer comes from the level-filtered active set; distractors
    are drawn from the whole corpus so small levels still get varied options.
    """

    def __init__(self):
        super().__init__()
        self.options_count: int = DEFAULT_OPTIONS_COUNT
        self.current_options: List[Entry] = []

    def get_mode_id(self) -> str:
        return 'quiz'

    def init(self, store: CorpusStore, level: int = 0, options_count: int = DEFAULT_OPTIONS_COUNT) -> int:
        self._check_options_count(options_count)
        self.options_count = options_count
        return super().init(store, level)

    def set_options_count(self, options_count: int) -> None:
        """Change the option count, rebuilding the options of the current question."""
        self._check_options_count(options_count)
        self._require_ready('set_options_count')
        if options_count == self.options_count:
            return
        self.options_count = options_count
        self._after_select(self.current)

    @staticmethod
    def _check_options_count(options_count) -> None:
        if isinstance(options_count, bool) or not isinstance(options_count, int) or options_count < 1:
            raise InvalidArgumentError(
                'options_count must be a positive integer',
                errors={'options_count': options_count},
            )

    @property
    def is_partial(self) -> bool:
        """True when the last question got fewer options than requested."""
        return self.current is not None and len(self.current_options) < self.options_count

    def _on_init(self) -> None:
        self.current_options = []

    def _after_select(self, entry: Optional[Entry]) -> None:
        if entry is None:
            self.current_options = []
            return

        self.current_options = build_options(entry, self.store.entries, self.options_count)
        if len(self.current_options) < self.options_count:
            logger.warning(
                "Could not find enough unique choices. Found: %d, needed: %d",
                len(self.current_options), self.options_count,
            )

    def check_answer(self, choice_id: int) -> bool:
        """Return True when ``choice_id`` is the current correct entry."""
        if self.current is None:
            raise PreconditionNotMetError('No current quiz question', operation='check_answer')
        return choice_id == self.current.id
