from tfidf_similarity.document import Document
from tfidf_similarity.term_count_model import TermCountModel


TEXT = "FOO-foo BAR bar \r\n\t 123 !@#"
TOKENS = ["FOO-foo", "BAR", "bar", "\r\n\t", "123", "!@#"]


def _documents():
    return [
        Document(TEXT),  # 4 tokens
        Document(TEXT, tokens=TOKENS),  # 3 tokens
        Document(""),  # 0 tokens
        Document(TEXT, term_counts={"bar": 5, "baz": 10}),  # 15 tokens
    ]


def test_without_documents():
    model = TermCountModel([])
    assert model.documents == ()
    assert model.terms == ()
    assert model.document_count == 0
    assert model.average_document_size == 0
    assert model.term_count_matrix() == []
    assert model.document_frequency("foo") == 0


def test_documents_keep_order():
    docs = _documents()
    model = TermCountModel(docs)
    assert list(model.documents) == docs
    assert model.document_count == 4


def test_terms_are_sorted():
    model = TermCountModel(_documents())
    assert model.terms == ("bar", "baz", "foo", "foo-foo")
    assert TermCountModel(_documents()).terms == model.terms


def test_average_document_size():
    assert TermCountModel(_documents()).average_document_size == 5.5


def test_document_frequency_and_term_count():
    model = TermCountModel(_documents())
    assert model.document_frequency("bar") == 3
    assert model.document_frequency("foo") == 1
    assert model.document_frequency("baz") == 1
    assert model.document_frequency("missing") == 0
    assert model.term_count("bar") == 9
    assert model.term_count("missing") == 0


def test_term_count_matrix():
    docs = _documents()
    model = TermCountModel(docs)
    assert model.term_count_matrix() == [
        [2, 2, 0, 5],   # bar
        [0, 0, 0, 10],  # baz
        [2, 0, 0, 0],   # foo
        [0, 1, 0, 0],   # foo-foo
    ]
    assert model.plain_term_frequency(docs[3], "baz") == 10
    assert model.term_frequency(docs[0], "foo") == docs[0].term_frequency("foo")
