"""
Tests for the database-backed mastery list.
"""

from wordstack_app import db
from wordstack_app.models import MasteryList
from wordstack_app.modules.corpus.services.mastery_storage import SqlMasteryStorage


def test_load_without_record_is_empty(app):
    assert SqlMasteryStorage('excludedWords').load() == []


def test_save_then_load_keeps_order(app):
    storage = SqlMasteryStorage('excludedWords')
    storage.save([5, 1, 3])
    assert storage.load() == [5, 1, 3]

    storage.save([3])
    assert storage.load() == [3]
    assert MasteryList.query.count() == 1


def test_keys_are_independent(app):
    SqlMasteryStorage('excludedWords').save([1])
    SqlMasteryStorage('excludedWords:alice').save([2, 3])
    assert SqlMasteryStorage('excludedWords').load() == [1]
    assert SqlMasteryStorage('excludedWords:alice').load() == [2, 3]


def test_clear_removes_record(app):
    storage = SqlMasteryStorage('excludedWords')
    storage.save([1, 2])
    storage.clear()
    assert storage.load() == []
    assert MasteryList.query.filter_by(storage_key='excludedWords').first() is None
    # clearing twice is fine
    storage.clear()


def test_non_integer_values_are_ignored(app):
    db.session.add(MasteryList(storage_key='excludedWords', entry_ids=[1, 'x', True, 4]))
    db.session.commit()
    assert SqlMasteryStorage('excludedWords').load() == [1, 4]


def test_record_repr(app):
    SqlMasteryStorage('excludedWords').save([7, 8])
    record = MasteryList.query.first()
    assert repr(record) == '<MasteryList excludedWords (2 ids)>'
