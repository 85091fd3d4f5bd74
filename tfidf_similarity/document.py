from __future__ import annotations

import itertools
import math
from collections import Counter
from typing import Dict, Hashable, List, Optional, Sequence

from .tokenizer import Tokenizer, get_tokenizer, is_valid, normalize

_document_ids = itertools.count(1)


class Document:
    """
    A text and the number of times each term appears in it.

    Built from exactly one source, checked in this order: precomputed
    ``term_counts``, a pre-tokenized ``tokens`` sequence, or ``text``.
    Tokens supplied by the caller are normalized and filtered but never
    re-tokenized. Without an ``id``, the document gets the next value of
    a process-wide counter.
    """

    def __init__(
        self,
        text: Optional[str] = None,
        id: Optional[Hashable] = None,
        tokens: Optional[Sequence[str]] = None,
        term_counts: Optional[Dict[str, int]] = None,
        size: Optional[int] = None,
        tokenizer: Optional[Tokenizer] = None,
    ):
        self._text = text
        self._id = id if id is not None else next(_document_ids)
        self._tokens = list(tokens) if tokens is not None else None

        if term_counts is not None:
            self._term_counts = {t: int(c) for t, c in term_counts.items()}
            self._size = size if size is not None else sum(self._term_counts.values())
        else:
            words = self._tokens if self._tokens is not None else (tokenizer or get_tokenizer()).tokenize(text or "")
            counts: Counter[str] = Counter()
            for word in words:
                term = normalize(word)
                if is_valid(term):
                    counts[term] += 1
            self._term_counts = dict(counts)
            self._size = size if size is not None else sum(counts.values())

    @property
    def id(self) -> Hashable:
        return self._id

    @property
    def text(self) -> Optional[str]:
        return self._text

    @property
    def tokens(self) -> Optional[List[str]]:
        return list(self._tokens) if self._tokens is not None else None

    @property
    def term_counts(self) -> Dict[str, int]:
        return dict(self._term_counts)

    @property
    def size(self) -> int:
        return self._size

    def terms(self) -> List[str]:
        return [t for t, c in self._term_counts.items() if c > 0]

    def plain_term_frequency(self, term: str) -> int:
        """Number of occurrences of ``term``; 0 for terms not in the document."""
        return self._term_counts.get(term, 0)

    plain_tf = plain_term_frequency

    def term_frequency(self, term: str) -> float:
        """Square root of the term count (sublinear scaling)."""
        return math.sqrt(self.plain_term_frequency(term))

    tf = term_frequency

    def __repr__(self) -> str:
        return f"Document(id={self._id!r}, size={self._size})"
