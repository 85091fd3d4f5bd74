from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .document import Document
from .tokenizer import Tokenizer, get_tokenizer


def load_directory(path: Path, pattern: str = "*.txt", tokenizer: Optional[Tokenizer] = None) -> List[Document]:
    """Read every matching file under ``path`` into a Document whose id is the file stem, in file-name order."""
    tok = tokenizer or get_tokenizer()
    docs = []
    for file in sorted(Path(path).glob(pattern)):
        if not file.is_file():
            continue
        docs.append(Document(file.read_text(encoding="utf-8"), id=file.stem, tokenizer=tok))
    return docs


def load_texts(texts: Iterable[str], ids: Optional[Sequence[str]] = None, tokenizer: Optional[Tokenizer] = None) -> List[Document]:
    tok = tokenizer or get_tokenizer()
    texts = list(texts)
    if ids is None:
        return [Document(t, tokenizer=tok) for t in texts]
    if len(ids) != len(texts):
        raise ValueError(f"got {len(ids)} ids for {len(texts)} texts")
    return [Document(t, id=i, tokenizer=tok) for t, i in zip(texts, ids)]
