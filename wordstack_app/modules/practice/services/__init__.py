from .practice_session import PracticeSession
from .session_registry import SessionRegistry

__all__ = ["PracticeSession", "SessionRegistry"]
