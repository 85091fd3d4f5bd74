from __future__ import annotations


class TfIdfSimilarityError(Exception):
    """Base class for errors raised while building a model."""


class BackendError(TfIdfSimilarityError, ValueError):
    """Unknown matrix backend, or its library is not installed."""


class ConfigurationError(TfIdfSimilarityError, ValueError):
    """Unknown tokenizer or idf variant, or invalid weighting parameters."""
