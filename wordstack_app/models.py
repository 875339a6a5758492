# File: wordstack_app/models.py
# Persisted state: one ordered list of mastered entry ids per storage key.

from sqlalchemy.sql import func

from .extensions import db


class MasteryList(db.Model):
    """Stores the mastered-id list written back after every mastery mutation."""

    __tablename__ = 'mastery_lists'

    id = db.Column(db.Integer, primary_key=True)
    storage_key = db.Column(db.String(100), nullable=False, unique=True, index=True)
    entry_ids = db.Column(db.JSON, nullable=False, default=list)
    updated_at = db.Column(
        db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self):
        return f"<MasteryList {self.storage_key} ({len(self.entry_ids or [])} ids)>"
