import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wordstack_app import create_app, db
from wordstack_app.config import Config
from wordstack_app.modules.corpus.logics.store import CorpusStore
from wordstack_app.modules.corpus.schemas import Entry


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    LOG_DIR = None
    LOG_LEVEL = 'WARNING'
    WORDSTACK_CORPUS_PATH = None


def make_entry(entry_id, level=1, word=None, kana='', example_en=''):
    return Entry(
        id=entry_id,
        word=word or f"word{entry_id}",
        definition_en=f"definition {entry_id}",
        definition_ja=f"意味{entry_id}",
        example_en=example_en or f"Example {entry_id}.",
        example_ja=f"例文{entry_id}",
        kana=kana,
        level=level,
    )


def make_row(entry_id, level=1, word=None, kana='', example_en='', related=''):
    return [
        str(entry_id),
        word or f"word{entry_id}",
        f"definition {entry_id}",
        f"意味{entry_id}",
        example_en or f"Example {entry_id}.",
        f"例文{entry_id}",
        kana,
        str(level),
        related,
    ]


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store():
    """Three levels, ids 1..6."""
    return CorpusStore([
        make_entry(1, level=1),
        make_entry(2, level=1),
        make_entry(3, level=2),
        make_entry(4, level=2),
        make_entry(5, level=3),
        make_entry(6, level=1),
    ])
