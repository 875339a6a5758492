# File: wordstack_app/modules/practice/services/session_registry.py
# Owns one PracticeSession per learner session id (no module-level singletons).

from __future__ import annotations

import logging
import os
import threading
from collections import OrderedDict
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from wordstack_app.modules.corpus.services.mastery_storage import MasteryStorage, SqlMasteryStorage

from ..config import PracticeModuleDefaultConfig
from .practice_session import PracticeSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Bounded, thread-safe map of session id to ``PracticeSession``.

    At most ``max_sessions`` sessions are kept; the least recently used one
    is evicted first. Mastery is persisted on every mutation, so an evicted
    session comes back from storage on its next request.

    ``session()`` holds the session's own lock for the whole block, which is
    how request handlers serialize access to one learner's engines.
    """

    def __init__(
        self,
        corpus_path: Optional[str] = None,
        storage_key: str = 'excludedWords',
        storage_factory: Optional[Callable[[str], Optional[MasteryStorage]]] = None,
        max_sessions: int = PracticeModuleDefaultConfig.PRACTICE_MAX_SESSIONS,
    ):
        if max_sessions < 1:
            raise ValueError('max_sessions must be at least 1')
        self.corpus_path = corpus_path
        self.storage_key = storage_key
        self.max_sessions = max_sessions
        self._storage_factory = storage_factory or (lambda key: SqlMasteryStorage(key))
        self._sessions: 'OrderedDict[str, PracticeSession]' = OrderedDict()
        self._lock = threading.Lock()

    def storage_key_for(self, session_id: str) -> str:
        if session_id == PracticeModuleDefaultConfig.PRACTICE_DEFAULT_SESSION_ID:
            return self.storage_key
        return f"{self.storage_key}:{session_id}"

    def get(self, session_id: str) -> PracticeSession:
        """Return the session for ``session_id``, creating it on first use."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
                return session

            session = self._create(session_id)
            self._sessions[session_id] = session
            while len(self._sessions) > self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.info("Evicted idle practice session '%s'.", evicted_id)
            return session

    @contextmanager
    def session(self, session_id: str) -> Iterator[PracticeSession]:
        """Yield the session for ``session_id`` with its lock held."""
        practice_session = self.get(session_id)
        with practice_session.lock:
            yield practice_session

    def drop(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def _create(self, session_id: str) -> PracticeSession:
        storage = self._storage_factory(self.storage_key_for(session_id))
        session = PracticeSession(storage=storage, session_id=session_id)

        if self.corpus_path and os.path.exists(self.corpus_path):
            added = session.load_corpus_file(self.corpus_path)
            if added:
                result = session.restore_mastery()
                logger.info(
                    "Session '%s' ready: %d entries, %d mastered ids restored (%d skipped).",
                    session_id, added, result.added, result.skipped,
                )
        else:
            logger.info(
                "Session '%s' created without a corpus file; load one through the API.",
                session_id,
            )
        return session
