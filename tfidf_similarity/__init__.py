from .backends import MatrixBackend, NumpyBackend, PythonBackend, ScipyBackend, get_backend
from .bm25 import BM25Model
from .document import Document
from .errors import BackendError, ConfigurationError, TfIdfSimilarityError
from .model import SimilarityModel
from .term_count_model import TermCountModel
from .tokenizer import NaiveTokenizer, Tokenizer, UnicodeTokenizer, get_tokenizer
from .types import Neighbor, TermStats

__version__ = "0.1.0"

MODELS = {
    "tfidf": SimilarityModel,
    "bm25": BM25Model,
}


def build_model(name, documents, backend=None) -> SimilarityModel:
    cls = MODELS.get((name or "tfidf").lower())
    if cls is None:
        raise ConfigurationError(f"unknown model {name!r}; expected one of {sorted(MODELS)}")
    return cls(documents, backend=backend)


__all__ = [
    "BM25Model",
    "BackendError",
    "ConfigurationError",
    "Document",
    "MODELS",
    "MatrixBackend",
    "NaiveTokenizer",
    "Neighbor",
    "NumpyBackend",
    "PythonBackend",
    "ScipyBackend",
    "SimilarityModel",
    "TermCountModel",
    "TermStats",
    "TfIdfSimilarityError",
    "Tokenizer",
    "UnicodeTokenizer",
    "build_model",
    "get_backend",
    "get_tokenizer",
]
