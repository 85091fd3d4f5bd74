from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Matrix backend
    backend: str = os.getenv("TFIDF_BACKEND", "numpy")  # or "scipy", "python"

    # Tokenization
    tokenizer: str = os.getenv("TFIDF_TOKENIZER", "unicode")  # or "naive"

    # Weighting
    idf: str = os.getenv("TFIDF_IDF", "plain")  # or "smooth", "lucene"
    bm25_k1: float = float(os.getenv("BM25_K1", "1.2"))
    bm25_b: float = float(os.getenv("BM25_B", "0.75"))

    # Neighbors
    top_k: int = int(os.getenv("TOP_K", "5"))


settings = Settings()
