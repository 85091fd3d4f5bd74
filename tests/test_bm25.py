import math

import pytest

from tfidf_similarity.bm25 import BM25Model
from tfidf_similarity.document import Document
from tfidf_similarity.errors import ConfigurationError


def _corpus():
    return [
        Document(None, term_counts={"foo": 2, "bar": 2}),  # 4 tokens
        Document(None, term_counts={"foo": 1, "baz": 1}),  # 2 tokens
        Document(None, term_counts={"qux": 6}),  # 6 tokens
    ]


def test_inverse_document_frequency():
    model = BM25Model(_corpus())
    assert model.idf("bar") == pytest.approx(math.log(2.5 / 1.5))
    assert model.idf("foo") == pytest.approx(math.log(1.5 / 2.5))
    assert model.idf("missing") == 0


def test_term_frequency():
    docs = _corpus()
    model = BM25Model(docs, k1=1.2, b=0.75)
    # average size 4, so the first document has length ratio 1
    assert model.term_frequency(docs[0], "foo") == pytest.approx(2 * 2.2 / (2 + 1.2))
    assert model.term_frequency(docs[1], "foo") == pytest.approx(2.2 / (1 + 1.2 * (0.25 + 0.75 * 0.5)))
    assert model.term_frequency(docs[2], "foo") == 0


def test_weights_combine_tf_and_idf():
    docs = _corpus()
    model = BM25Model(docs, backend="python")
    weights = model.backend.to_list(model.matrix)
    i = model.terms.index("bar")
    assert weights[i][0] == pytest.approx(model.tfidf(docs[0], "bar"))
    assert weights[i][0] == pytest.approx(model.idf("bar") * model.tf(docs[0], "bar"))


@pytest.mark.parametrize("backend", ["numpy", "scipy", "python"])
def test_similarity_matrix(backend):
    rows = BM25Model(_corpus(), backend=backend).similarity_rows()
    for i in range(3):
        assert rows[i][i] == pytest.approx(1.0)
        for j in range(3):
            assert rows[i][j] == pytest.approx(rows[j][i])
    assert rows[0][2] == pytest.approx(0.0)


def test_empty_corpus():
    model = BM25Model([])
    assert model.similarity_rows() == []


def test_parameters_are_validated():
    with pytest.raises(ConfigurationError):
        BM25Model(_corpus(), k1=-1)
    with pytest.raises(ConfigurationError):
        BM25Model(_corpus(), b=1.5)
