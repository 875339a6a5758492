"""
Unit tests for the practice engines (listening, quiz, typing).
Run: python -m pytest tests/test_session_engines.py -v
"""

import random

import pytest

from conftest import make_entry
from wordstack_app.core.error_handlers import InvalidArgumentError, PreconditionNotMetError
from wordstack_app.modules.corpus.logics.store import CorpusStore
from wordstack_app.modules.practice.engine import (
    ListeningEngine,
    QuizEngine,
    TypingEngine,
    build_options,
)
from wordstack_app.modules.practice.kana_typing import LanguageMode, tokenize


@pytest.fixture(autouse=True)
def _seed():
    random.seed(1234)


class TestLifecycle:

    def test_next_before_init_raises(self):
        engine = ListeningEngine()
        assert not engine.is_ready
        with pytest.raises(PreconditionNotMetError) as exc:
            engine.next()
        assert exc.value.status_code == 409

    def test_init_filters_level_and_mastery(self, store):
        store.mark_mastered(2)
        engine = ListeningEngine()
        size = engine.init(store, 1)
        assert size == 2
        assert {e.id for e in engine.active_set} == {1, 6}

    def test_level_zero_means_every_level(self, store):
        store.mark_mastered(5)
        engine = ListeningEngine()
        assert engine.init(store, 0) == 5

    def test_cycle_repeats_same_order(self, store):
        engine = ListeningEngine()
        engine.init(store, 0)
        first_pass = [engine.next().id for _ in range(6)]
        second_pass = [engine.next().id for _ in range(6)]
        assert sorted(first_pass) == [1, 2, 3, 4, 5, 6]
        assert second_pass == first_pass

    def test_cursor_wraps(self, store):
        engine = ListeningEngine()
        engine.init(store, 3)
        assert engine.next().id == 5
        assert engine.cursor == 0
        assert engine.next().id == 5

    def test_empty_active_set_returns_none(self, store):
        store.mark_mastered(5)
        engine = ListeningEngine()
        assert engine.init(store, 3) == 0
        assert engine.next() is None
        assert engine.current is None

    def test_init_does_not_mutate_store(self, store):
        before = list(store.entries)
        ListeningEngine().init(store, 1)
        assert store.entries == before

    def test_needs_init(self, store):
        engine = ListeningEngine()
        assert engine.needs_init(store, 1)
        engine.init(store, 1)
        assert not engine.needs_init(store, 1)
        assert engine.needs_init(store, 2)
        assert engine.needs_init(CorpusStore(list(store.entries)), 1)


class TestBuildOptions:

    def test_contains_correct_once_and_unique_ids(self):
        pool = [make_entry(i) for i in range(1, 21)]
        correct = pool[2]
        for _ in range(20):
            options = build_options(correct, pool, 4)
            ids = [o.id for o in options]
            assert len(ids) == 4
            assert len(set(ids)) == len(ids)
            assert ids.count(3) == 1

    def test_pool_of_one(self):
        only = make_entry(1)
        options = build_options(only, [only], 4)
        assert [o.id for o in options] == [1]

    def test_single_option(self, store):
        options = build_options(store.get_entry(2), store.entries, 1)
        assert [o.id for o in options] == [2]


class TestQuizEngine:

    def test_invalid_options_count(self, store):
        engine = QuizEngine()
        for bad in (0, -1, True, '4', 2.5):
            with pytest.raises(InvalidArgumentError):
                engine.init(store, 1, bad)
        assert not engine.is_ready

    def test_question_and_options(self, store):
        engine = QuizEngine()
        engine.init(store, 2, 3)
        question = engine.next()
        assert question.level == 2
        ids = [o.id for o in engine.current_options]
        assert question.id in ids
        assert len(ids) == 3
        assert not engine.is_partial

    def test_distractors_come_from_whole_corpus(self, store):
        engine = QuizEngine()
        engine.init(store, 3, 4)
        seen = set()
        for _ in range(30):
            engine.next()
            seen.update(o.id for o in engine.current_options)
        assert seen - {5}
        assert any(store.get_entry(i).level != 3 for i in seen)

    def test_distractors_may_be_mastered(self, store):
        for entry_id in (2, 3, 4, 5, 6):
            store.mark_mastered(entry_id)
        engine = QuizEngine()
        engine.init(store, 0, 4)
        seen = set()
        for _ in range(10):
            assert engine.next().id == 1
            seen.update(o.id for o in engine.current_options)
        assert seen & {2, 3, 4, 5, 6}

    def test_partial_when_corpus_too_small(self):
        store = CorpusStore([make_entry(1), make_entry(2)])
        engine = QuizEngine()
        engine.init(store, 0, 4)
        engine.next()
        assert len(engine.current_options) <= 2
        assert engine.is_partial

    def test_check_answer(self, store):
        engine = QuizEngine()
        engine.init(store, 1, 2)
        question = engine.next()
        assert engine.check_answer(question.id)
        wrong = next(o.id for o in store.entries if o.id != question.id)
        assert not engine.check_answer(wrong)

    def test_changing_options_count_rebuilds_current_options(self, store):
        engine = QuizEngine()
        engine.init(store, 0, 4)
        question = engine.next()
        cursor = engine.cursor

        engine.set_options_count(2)
        assert engine.current is question
        assert engine.cursor == cursor
        assert len(engine.current_options) == 2
        assert question.id in {o.id for o in engine.current_options}
        assert not engine.is_partial

    def test_set_options_count_validates(self, store):
        engine = QuizEngine()
        with pytest.raises(InvalidArgumentError):
            engine.set_options_count(0)
        with pytest.raises(PreconditionNotMetError):
            engine.set_options_count(3)

    def test_check_answer_without_question(self, store):
        engine = QuizEngine()
        engine.init(store, 1)
        with pytest.raises(PreconditionNotMetError):
            engine.check_answer(1)

    def test_empty_level_clears_options(self, store):
        engine = QuizEngine()
        engine.init(store, 9)
        assert engine.next() is None
        assert engine.current_options == []
        assert not engine.is_partial


class TestTypingEngine:

    @pytest.fixture
    def typing_store(self):
        return CorpusStore([
            make_entry(1, kana='きょう', example_en='Go!'),
            make_entry(2, kana='りんご', example_en='An apple.'),
            make_entry(3, kana='きって', example_en='A stamp.'),
        ])

    def test_item_at_clamps(self, typing_store):
        engine = TypingEngine()
        engine.init(typing_store)
        first = engine.active_set[0]
        last = engine.active_set[-1]
        assert engine.item_at(-5) is first
        assert engine.item_at(100) is last
        assert engine.item_at(1) is engine.active_set[1]

    def test_item_at_before_init(self):
        with pytest.raises(PreconditionNotMetError):
            TypingEngine().item_at(0)

    def test_item_at_empty_set(self):
        engine = TypingEngine()
        engine.init(CorpusStore())
        assert engine.item_at(0) is None

    def test_tokens_follow_selection(self, typing_store):
        engine = TypingEngine()
        engine.init(typing_store)
        index = next(i for i, e in enumerate(engine.active_set) if e.id == 1)
        engine.item_at(index)
        assert engine.tokens_for(LanguageMode.JAPANESE) == ['きょ', 'う']
        assert engine.tokens_for(1) == ['G', 'o', '!']

    def test_tokens_for_returns_copy(self, typing_store):
        engine = TypingEngine()
        engine.init(typing_store)
        engine.item_at(0)
        engine.tokens_for(2).clear()
        assert engine.tokens_for(2)

    def test_on_keystroke(self, typing_store):
        engine = TypingEngine()
        engine.init(typing_store)
        index = next(i for i, e in enumerate(engine.active_set) if e.id == 2)
        engine.item_at(index)
        assert engine.on_keystroke('ri', 0, 2) == 1
        assert engine.on_keystroke('n', 1, 2) == 2
        assert engine.on_keystroke('go', 2, 2) == 3

    def test_keystroke_without_item(self, typing_store):
        engine = TypingEngine()
        engine.init(typing_store)
        with pytest.raises(PreconditionNotMetError):
            engine.on_keystroke('a', 0, 2)

    def test_invalid_mode(self, typing_store):
        engine = TypingEngine()
        engine.init(typing_store)
        engine.item_at(0)
        with pytest.raises(InvalidArgumentError):
            engine.tokens_for(3)
        with pytest.raises(InvalidArgumentError):
            engine.on_keystroke('a', 0, 'x')

    def test_next_also_tokenizes(self, typing_store):
        engine = TypingEngine()
        engine.init(typing_store)
        item = engine.next()
        assert engine.tokens_for(2) == tokenize(item.kana)
