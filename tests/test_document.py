import math

from tfidf_similarity.document import Document
from tfidf_similarity.tokenizer import NaiveTokenizer


TEXT = "FOO-foo BAR bar \r\n\t 123 !@#"
TOKENS = ["FOO-foo", "BAR", "bar", "\r\n\t", "123", "!@#"]


def test_generated_id():
    first = Document(TEXT)
    second = Document(TEXT)
    assert isinstance(first.id, int)
    assert second.id > first.id


def test_given_id():
    assert Document(TEXT, id="baz").id == "baz"


def test_text_and_tokens():
    doc = Document(TEXT)
    assert doc.text == TEXT
    assert doc.tokens is None
    assert Document(TEXT, tokens=TOKENS).tokens == TOKENS


def test_counts_from_text():
    doc = Document(TEXT)
    assert doc.term_counts == {"foo": 2, "bar": 2}
    assert doc.size == 4
    assert sorted(doc.terms()) == ["bar", "foo"]


def test_counts_from_text_with_naive_tokenizer():
    doc = Document(TEXT, tokenizer=NaiveTokenizer())
    assert doc.term_counts == {"foo": 2, "bar": 2}
    assert doc.size == 4


def test_counts_from_tokens():
    doc = Document(TEXT, tokens=TOKENS)
    assert doc.term_counts == {"foo-foo": 1, "bar": 2}
    assert doc.size == 3
    assert sorted(doc.terms()) == ["bar", "foo-foo"]


def test_counts_from_term_counts():
    doc = Document(TEXT, term_counts={"bar": 5, "baz": 10})
    assert doc.term_counts == {"bar": 5, "baz": 10}
    assert doc.size == 15


def test_explicit_size_overrides_sum():
    doc = Document(None, term_counts={"bar": 5}, size=7)
    assert doc.size == 7


def test_empty_documents():
    for doc in (Document(""), Document(None), Document()):
        assert doc.size == 0
        assert doc.term_counts == {}
        assert doc.terms() == []
        assert doc.term_frequency("foo") == 0


def test_size_is_sum_of_counts():
    for doc in (Document(TEXT), Document(TEXT, tokens=TOKENS), Document("a b a c a")):
        assert doc.size == sum(doc.term_counts.values())


def test_abbreviations_and_possessives_merge():
    doc = Document("U.S.A. and USA; John's book")
    counts = doc.term_counts
    assert counts["usa"] == 2
    assert counts["john"] == 1
    assert counts["book"] == 1


def test_term_frequency():
    doc = Document(TEXT)
    assert doc.plain_term_frequency("foo") == 2
    assert doc.term_frequency("foo") == math.sqrt(2)
    assert doc.tf("foo") == math.sqrt(2)
    assert doc.plain_tf("missing") == 0
    assert doc.term_frequency("missing") == 0
    assert Document(TEXT, tokens=TOKENS).term_frequency("foo-foo") == 1


def test_term_counts_cannot_be_mutated_from_outside():
    doc = Document(TEXT)
    doc.term_counts["foo"] = 100
    assert doc.plain_term_frequency("foo") == 2
