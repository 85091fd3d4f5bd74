from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from .backends import MatrixBackend, get_backend
from .config import settings
from .document import Document
from .errors import ConfigurationError
from .term_count_model import TermCountModel
from .types import Neighbor, TermStats

logger = logging.getLogger(__name__)


def _plain_idf(n: int, df: int) -> float:
    return math.log(n / df)


def _smooth_idf(n: int, df: int) -> float:
    return math.log(1 + n / df)


def _lucene_idf(n: int, df: int) -> float:
    return 1 + math.log(n / (df + 1))


IDF_FORMULAS: Dict[str, Callable[[int, int], float]] = {
    "plain": _plain_idf,
    "smooth": _smooth_idf,
    "lucene": _lucene_idf,
}


class SimilarityModel:
    """
    TF-IDF weighted term-document matrix and the cosine similarity of its documents.

    ``W[i][j] = idf(terms[i]) * sqrt(count of terms[i] in documents[j])`` with
    ``idf(t) = ln(N / df(t))`` by default. ``idf="smooth"`` gives
    ``ln(1 + N / df)`` and ``idf="lucene"`` gives ``1 + ln(N / (df + 1))``.
    The weight matrix is built once in the constructor; the similarity
    matrix is derived from it on first use and cached.
    """

    def __init__(
        self,
        documents: Iterable[Document],
        backend: Union[str, MatrixBackend, None] = None,
        idf: Optional[str] = None,
    ):
        self.idf_variant = (idf or settings.idf).lower()
        if self.idf_variant not in IDF_FORMULAS:
            raise ConfigurationError(
                f"unknown idf variant {self.idf_variant!r}; expected one of {sorted(IDF_FORMULAS)}"
            )
        self._idf_formula = IDF_FORMULAS[self.idf_variant]
        self._setup(documents, backend)

    def _setup(self, documents: Iterable[Document], backend: Union[str, MatrixBackend, None]) -> None:
        self.model = TermCountModel(documents)
        self.backend = backend if isinstance(backend, MatrixBackend) else get_backend(backend)

        rows = []
        for term in self.terms:
            idf = self.inverse_document_frequency(term)
            rows.append([self.term_frequency(doc, term) * idf for doc in self.documents])
        self.matrix = self.backend.matrix(rows, (len(self.terms), self.document_count))

        self._similarity: Any = None
        self._similarity_rows: Optional[List[List[float]]] = None
        logger.debug(
            "Built %s weight matrix: %d terms x %d documents (%s backend)",
            type(self).__name__, len(self.terms), self.document_count, self.backend.name,
        )

    # Delegation to the term count model

    @property
    def documents(self) -> Tuple[Document, ...]:
        return self.model.documents

    @property
    def terms(self) -> Tuple[str, ...]:
        return self.model.terms

    @property
    def document_count(self) -> int:
        return self.model.document_count

    @property
    def average_document_size(self) -> float:
        return self.model.average_document_size

    def document_frequency(self, term: str) -> int:
        return self.model.document_frequency(term)

    # Weighting

    def inverse_document_frequency(self, term: str) -> float:
        df = self.model.document_frequency(term)
        if df <= 0:
            logger.debug("Term %r has no document frequency; idf clamped to 0", term)
            return 0.0
        return self._idf_formula(self.document_count, df)

    def idf(self, term: str) -> float:
        return self.inverse_document_frequency(term)

    def term_frequency(self, document: Document, term: str) -> float:
        return document.term_frequency(term)

    def tf(self, document: Document, term: str) -> float:
        return self.term_frequency(document, term)

    def term_frequency_inverse_document_frequency(self, document: Document, term: str) -> float:
        return self.inverse_document_frequency(term) * self.term_frequency(document, term)

    def tfidf(self, document: Document, term: str) -> float:
        return self.term_frequency_inverse_document_frequency(document, term)

    def term_stats(self) -> List[TermStats]:
        return [
            TermStats(
                term=t,
                document_frequency=self.model.document_frequency(t),
                term_count=self.model.term_count(t),
                idf=self.inverse_document_frequency(t),
            )
            for t in self.terms
        ]

    # Similarity

    def similarity_matrix(self) -> Any:
        """
        Cosine similarity of every pair of documents, in the backend's matrix type.

        Columns of the weight matrix are scaled to unit length, so
        ``normalize(W).T @ normalize(W)`` holds the cosines. A document
        with no weight has a zero column, so its row and column are all 0.
        """
        if self._similarity is None:
            normalized = self.backend.normalize_columns(self.matrix)
            self._similarity = self.backend.multiply(self.backend.transpose(normalized), normalized)
        return self._similarity

    def similarity_rows(self) -> List[List[float]]:
        if self._similarity_rows is None:
            self._similarity_rows = self.backend.to_list(self.similarity_matrix())
        return self._similarity_rows

    def document_index(self, document: Document) -> Optional[int]:
        for i, doc in enumerate(self.documents):
            if doc is document:
                return i
        return None

    def similarity(self, a: Document, b: Document) -> float:
        i = self.document_index(a)
        j = self.document_index(b)
        if i is None or j is None:
            return 0.0
        return self.similarity_rows()[i][j]

    def most_similar(self, document: Document, top_k: Optional[int] = None) -> List[Neighbor]:
        i = self.document_index(document)
        if i is None:
            return []
        k = settings.top_k if top_k is None else top_k
        row = self.similarity_rows()[i]
        neighbors = [
            Neighbor(document=doc, index=j, score=row[j])
            for j, doc in enumerate(self.documents)
            if j != i
        ]
        neighbors.sort(key=lambda n: n.score, reverse=True)
        return neighbors[:k]
