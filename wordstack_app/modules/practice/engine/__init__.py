from .base_engine import SessionEngine
from .listening_engine import ListeningEngine
from .quiz_engine import QuizEngine, build_options
from .typing_engine import TypingEngine

__all__ = [
    "ListeningEngine",
    "QuizEngine",
    "SessionEngine",
    "TypingEngine",
    "build_options",
]
