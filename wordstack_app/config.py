# File: wordstack_app/config.py
# Application configuration. Values come from the environment (.env supported).

import os

from dotenv import load_dotenv

load_dotenv()

# Project root: this file lives in <root>/wordstack_app/
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# SQLite database holding persisted mastery lists
DATABASE_PATH = os.path.join(BASE_DIR, "database", "wordstack.db")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Configuration for the Wordstack practice app."""

    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_flag('LOG_JSON')

    # Tab-separated corpus file with a header row and 9 columns per entry
    WORDSTACK_CORPUS_PATH = os.environ.get('WORDSTACK_CORPUS_PATH') or os.path.join(BASE_DIR, 'word.csv')

    # Key under which the mastered-id list is persisted
    MASTERY_STORAGE_KEY = os.environ.get('MASTERY_STORAGE_KEY', 'excludedWords')

    # Upper bound on in-memory learner sessions
    PRACTICE_MAX_SESSIONS = int(os.environ.get('PRACTICE_MAX_SESSIONS', '256'))
