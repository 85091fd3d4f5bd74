from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Union

from .backends import MatrixBackend
from .config import settings
from .document import Document
from .errors import ConfigurationError
from .model import SimilarityModel

logger = logging.getLogger(__name__)


class BM25Model(SimilarityModel):
    """
    Okapi BM25 weighting on the same similarity machinery.

    idf(t)    = ln((N - df + 0.5) / (df + 0.5))
    tf(d, t)  = c * (k1 + 1) / (c + k1 * (1 - b + b * |d| / avgdl))
    """

    def __init__(
        self,
        documents: Iterable[Document],
        backend: Union[str, MatrixBackend, None] = None,
        k1: Optional[float] = None,
        b: Optional[float] = None,
    ):
        self.k1 = settings.bm25_k1 if k1 is None else float(k1)
        self.b = settings.bm25_b if b is None else float(b)
        if self.k1 < 0:
            raise ConfigurationError(f"k1 must be non-negative, got {self.k1}")
        if not 0 <= self.b <= 1:
            raise ConfigurationError(f"b must be between 0 and 1, got {self.b}")
        self.idf_variant = "bm25"
        self._setup(documents, backend)

    def inverse_document_frequency(self, term: str) -> float:
        df = self.model.document_frequency(term)
        if df <= 0:
            logger.debug("Term %r has no document frequency; idf clamped to 0", term)
            return 0.0
        n = self.document_count
        return math.log((n - df + 0.5) / (df + 0.5))

    def term_frequency(self, document: Document, term: str) -> float:
        count = document.plain_term_frequency(term)
        if count == 0:
            return 0.0
        avg = self.model.average_document_size
        ratio = document.size / avg if avg > 0 else 1.0
        return (count * (self.k1 + 1)) / (count + self.k1 * (1 - self.b + self.b * ratio))
