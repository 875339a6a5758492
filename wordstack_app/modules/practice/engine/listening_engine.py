"""
Listening Business Rules Engine.
Plays back unmastered entries of a level in shuffled, cyclic order.
"""

from .base_engine import SessionEngine


class ListeningEngine(SessionEngine):
    """Uses the shared lifecycle unchanged; the UI reads ``current``."""

    def get_mode_id(self) -> str:
        return 'listening'
