from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from .document import Document

logger = logging.getLogger(__name__)


class TermCountModel:
    """
    Raw term counts for an ordered corpus.

    Document order fixes the column order and the sorted vocabulary fixes
    the row order of every matrix built from this model.
    """

    def __init__(self, documents: Iterable[Document]):
        self.documents: Tuple[Document, ...] = tuple(documents)

        df: Dict[str, int] = {}
        totals: Dict[str, int] = {}
        for doc in self.documents:
            for term in doc.terms():
                df[term] = df.get(term, 0) + 1
                totals[term] = totals.get(term, 0) + doc.plain_term_frequency(term)
        self._document_frequency = df
        self._term_count = totals
        self.terms: Tuple[str, ...] = tuple(sorted(df))

        logger.debug("Counted %d terms across %d documents", len(self.terms), len(self.documents))

    @property
    def document_count(self) -> int:
        return len(self.documents)

    @property
    def average_document_size(self) -> float:
        if not self.documents:
            return 0.0
        return sum(d.size for d in self.documents) / len(self.documents)

    def document_frequency(self, term: str) -> int:
        return self._document_frequency.get(term, 0)

    def term_count(self, term: str) -> int:
        """Occurrences of ``term`` across the whole corpus."""
        return self._term_count.get(term, 0)

    def plain_term_frequency(self, document: Document, term: str) -> int:
        return document.plain_term_frequency(term)

    def term_frequency(self, document: Document, term: str) -> float:
        return document.term_frequency(term)

    def term_count_matrix(self) -> List[List[int]]:
        return [[d.plain_term_frequency(t) for d in self.documents] for t in self.terms]
