"""Tests for the lookup index."""

import pytest

from wordhord.dictionary import Dictionary, parse
from wordhord.errors import IndexConstructionFailure, InvalidQuery
from wordhord.extract import Entry


def test_search_matches_definition(letters):
    assert letters.search("first") == [Entry("a", "first letter")]


def test_define_matches_word(letters):
    assert letters.define("b") == [Entry("b", "second letter")]


def test_search_no_match(letters):
    assert letters.search("nonexistent-token") == []


def test_search_is_case_insensitive(letters):
    assert letters.search("SECOND") == [Entry("b", "second letter")]


def test_define_ignores_definitions(letters):
    assert letters.define("letter") == []
    assert letters.define("first") == []


def test_define_ignores_field_syntax(letters):
    assert letters.define("definition:first") == []


def test_search_field_syntax(letters):
    assert letters.search("word:b") == [Entry("b", "second letter")]


def test_len(letters):
    assert len(letters) == 2


@pytest.fixture
def many():
    entries = [Entry(f"word{i}", f"shared text number {i}") for i in range(25)]
    with Dictionary(entries) as dictionary:
        yield dictionary


def test_search_default_limit(many):
    assert len(many.search("shared")) == 10


def test_search_limit(many):
    assert len(many.search("shared", limit=3)) == 3
    assert len(many.search("shared", limit=50)) == 25


def test_define_limit():
    entries = [Entry("same", f"sense {i}") for i in range(15)]
    with Dictionary(entries) as dictionary:
        results = dictionary.define("same")
    assert len(results) == 10
    assert all(e.word == "same" for e in results)


@pytest.mark.parametrize("limit", [0, -1, 2.5])
def test_search_rejects_bad_limit(many, limit):
    with pytest.raises(ValueError):
        many.search("shared", limit=limit)


def test_ranking_prefers_more_matches():
    with Dictionary([
        Entry("eald", "old, aged"),
        Entry("ealdor", "old old old"),
    ]) as dictionary:
        results = dictionary.search("old")
    assert results[0].word == "ealdor"


@pytest.mark.parametrize("query", ['"first letter', 'first"', "(first", "first)", "a) (b"])
def test_invalid_query(letters, query):
    with pytest.raises(InvalidQuery) as exc:
        letters.search(query)
    assert exc.value.query == query


def test_invalid_define_query(letters):
    with pytest.raises(InvalidQuery):
        letters.define('"b')


def test_index_usable_after_invalid_query(letters):
    with pytest.raises(InvalidQuery):
        letters.search('"first')
    assert letters.search('"first letter"') == [Entry("a", "first letter")]


def test_construction_failure_is_all_or_nothing():
    with pytest.raises(IndexConstructionFailure):
        Dictionary([Entry("good", "fine"), Entry(123, "not text")])


def test_empty_dictionary():
    with Dictionary([]) as dictionary:
        assert len(dictionary) == 0
        assert dictionary.search("anything") == []


def test_from_html(sample_html):
    with Dictionary.from_html(sample_html) as dictionary:
        assert len(dictionary) == 6
        words = [e.word for e in dictionary.search("light")]
        assert sorted(words) == ["beorht", "lēoht", "lēoht"]
        assert dictionary.define("light") == []
        assert [e.word for e in dictionary.define("lēoht")] == ["lēoht", "lēoht"]


def test_parse_file(sample_path):
    with parse(sample_path) as dictionary:
        assert dictionary.define("āc") == [Entry("āc", "āc f. oak oaken ship")]
