from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .document import Document


@dataclass
class Neighbor:
    document: Document
    index: int
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.document.id, "index": self.index, "score": self.score}


@dataclass
class TermStats:
    term: str
    document_frequency: int
    term_count: int
    idf: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "term": self.term,
            "document_frequency": self.document_frequency,
            "term_count": self.term_count,
            "idf": self.idf,
        }
