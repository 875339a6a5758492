"""
Tests for corpus row parsing, file reading and mastery import.
"""

import pytest

from conftest import make_row
from wordstack_app.modules.corpus.logics.store import CorpusStore
from wordstack_app.modules.corpus.services import corpus_loader


class TestParseRows:

    def test_skips_wrong_field_count_and_empty_id(self):
        rows = [
            make_row(1),
            ['2', 'too', 'short'],
            [''] + make_row(3)[1:],
            make_row(4),
        ]
        entries, skipped = corpus_loader.parse_rows(rows)
        assert [e.id for e in entries] == [1, 4]
        assert skipped == 2

    def test_blank_rows_are_ignored_silently(self):
        entries, skipped = corpus_loader.parse_rows([[''], make_row(1)])
        assert len(entries) == 1
        assert skipped == 0

    def test_load_corpus_appends_in_order(self):
        store = CorpusStore()
        added = corpus_loader.load_corpus(store, [make_row(5), make_row(2), ['bad']])
        assert added == 2
        assert [e.id for e in store.entries] == [5, 2]

        added = corpus_loader.load_corpus(store, [make_row(9)])
        assert added == 1
        assert [e.id for e in store.entries] == [5, 2, 9]


class TestCorpusText:

    def test_split_drops_header(self):
        text = "id\tword\n1\ta\tb\n2\tc\td\n"
        assert corpus_loader.split_corpus_text(text) == [['1', 'a', 'b'], ['2', 'c', 'd']]

    def test_empty_last_column_on_last_row(self):
        text = 'header\n' + '\n'.join('\t'.join(make_row(i)) for i in (1, 2)) + '\n'
        rows = corpus_loader.split_corpus_text(text)
        assert [len(row) for row in rows] == [9, 9]

        entries, skipped = corpus_loader.parse_rows(rows)
        assert [e.id for e in entries] == [1, 2]
        assert entries[1].related_ids == ()
        assert skipped == 0

    def test_blank_lines_are_dropped(self):
        text = 'header\r\n' + '\t'.join(make_row(1)) + '\r\n\r\n' + '\t'.join(make_row(2)) + '\r\n'
        rows = corpus_loader.split_corpus_text(text)
        assert [row[0] for row in rows] == ['1', '2']

    def test_read_corpus_file(self, tmp_path):
        header = '\t'.join(['id', 'word', 'def_en', 'def_ja', 'ex_en', 'ex_ja', 'kana', 'level', 'similar'])
        lines = [header] + ['\t'.join(make_row(i, level=2, related='1,2')) for i in (1, 2, 3)]
        path = tmp_path / 'word.csv'
        path.write_text('\r\n'.join(lines) + '\r\n', encoding='utf-8')

        rows = corpus_loader.read_corpus_file(str(path))
        entries, skipped = corpus_loader.parse_rows(rows)
        assert [e.id for e in entries] == [1, 2, 3]
        assert entries[0].related_ids == (1, 2)
        assert skipped == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            corpus_loader.read_corpus_file(str(tmp_path / 'missing.csv'))


class TestSetMasteryIds:

    def test_unknown_ids_skipped_and_set_replaced(self, store):
        store.mark_mastered(6)
        result = corpus_loader.set_mastery_ids(store, [1, 2, 99, 2])
        assert store.mastered_ids == [1, 2]
        assert result.added == 3
        assert result.skipped == 1
        assert result.total == 2

    def test_empty_list_clears(self, store):
        store.mark_mastered(1)
        result = corpus_loader.set_mastery_ids(store, [])
        assert store.mastered_ids == []
        assert result.to_dict() == {'added': 0, 'skipped': 0, 'total': 0}
