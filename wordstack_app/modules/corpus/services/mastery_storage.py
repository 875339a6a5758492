"""
Mastery Storage
===============
Persistence collaborator for the mastered-id list.

The practice engines never touch storage; the session facade reads the list
once at start and writes it back after every mastery mutation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Sequence

from sqlalchemy.orm.attributes import flag_modified

from wordstack_app.extensions import db
from wordstack_app.models import MasteryList

logger = logging.getLogger(__name__)


class MasteryStorage(ABC):
    """Contract for reading and writing the ordered mastered-id list."""

    @abstractmethod
    def load(self) -> List[int]:
        """Return the stored ids, or an empty list when nothing is stored."""
        ...

    @abstractmethod
    def save(self, entry_ids: Sequence[int]) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...


class SqlMasteryStorage(MasteryStorage):
    """Stores the list as JSON in ``mastery_lists``. Needs an app context."""

    def __init__(self, storage_key: str = 'excludedWords'):
        self.storage_key = storage_key

    def _get_record(self) -> MasteryList | None:
        return MasteryList.query.filter_by(storage_key=self.storage_key).first()

    def load(self) -> List[int]:
        record = self._get_record()
        if record is None or not record.entry_ids:
            logger.info("No stored mastery list under key '%s'.", self.storage_key)
            return []
        ids = []
        for value in record.entry_ids:
            if isinstance(value, bool) or not isinstance(value, int):
                logger.warning("Ignoring non-integer stored id %r", value)
                continue
            ids.append(value)
        return ids

    def save(self, entry_ids: Sequence[int]) -> None:
        record = self._get_record()
        if record is None:
            record = MasteryList(storage_key=self.storage_key, entry_ids=[])
            db.session.add(record)
        record.entry_ids = list(entry_ids)
        flag_modified(record, "entry_ids")
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            logger.exception("Failed to persist mastery list '%s'", self.storage_key)
            raise
        logger.info("Saved %r", record)

    def clear(self) -> None:
        record = self._get_record()
        if record is None:
            return
        db.session.delete(record)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            logger.exception("Failed to clear mastery list '%s'", self.storage_key)
            raise
        logger.info("Removed stored mastery list '%s'.", self.storage_key)
