import pytest

from tokens import tokenize, word_counts


def test_tokenize():
    assert tokenize('Hello, hello world!') == ['Hello', 'hello', 'world']
    assert tokenize("we're  the_people 1776") == ['we', 're', 'the_people', '1776']


def test_tokenize_empty():
    assert tokenize('') == []
    assert tokenize('  ,.;!  ') == []


def test_tokenize_non_ascii_splits():
    assert tokenize('café au lait') == ['caf', 'au', 'lait']


def test_word_counts():
    assert dict(word_counts('Hello, hello world!')) == {'hello': 2, 'world': 1}


def test_word_counts_missing_word():
    counts = word_counts('one two two')
    assert 'three' not in counts
    assert counts.get('three') is None


def test_word_counts_totals():
    text = 'When in the Course of human events,\nit becomes necessary for one people\n\nto dissolve THE bands -- the end.'
    counts = word_counts(text)
    assert all(c > 0 for c in counts.values())
    assert sum(counts.values()) == len(tokenize(text))
    assert counts['the'] == 3


def test_word_counts_read_only():
    counts = word_counts('a b')
    with pytest.raises(TypeError):
        counts['a'] = 5
    assert counts['a'] == 1
