from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

import regex

from .config import settings
from .errors import ConfigurationError

# Default Unicode word boundaries (UAX #29) rather than the \w/\W transition.
WORD_BOUNDARY_RE = regex.compile(r"\b", flags=regex.V1 | regex.WORD)
NAIVE_BOUNDARY_RE = re.compile(r"\b")
POSSESSIVE_RE = re.compile(r"(?:['`’]s)+$")


class Tokenizer(ABC):
    """Splits raw text into tokens, keeping punctuation and whitespace runs as tokens."""

    name = "base"

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        raise NotImplementedError()


class UnicodeTokenizer(Tokenizer):
    name = "unicode"

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        return [t for t in WORD_BOUNDARY_RE.split(text) if t]


class NaiveTokenizer(Tokenizer):
    """
    Splits on the standard library's \\b, i.e. word/non-word transitions.
    Less precise than UnicodeTokenizer: abbreviations such as "U.S.A." come
    apart into single letters.
    """

    name = "naive"

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        return [t for t in NAIVE_BOUNDARY_RE.split(text) if t]


TOKENIZERS: Dict[str, Type[Tokenizer]] = {
    UnicodeTokenizer.name: UnicodeTokenizer,
    NaiveTokenizer.name: NaiveTokenizer,
}


def get_tokenizer(name: Optional[str] = None) -> Tokenizer:
    key = (name or settings.tokenizer).lower()
    try:
        return TOKENIZERS[key]()
    except KeyError:
        raise ConfigurationError(
            f"unknown tokenizer {key!r}; expected one of {sorted(TOKENIZERS)}"
        ) from None


def lowercase_filter(token: str) -> str:
    return token.casefold()


def classic_filter(token: str) -> str:
    # "U.S.A." -> "usa", "Inc.'s" -> "inc"
    return POSSESSIVE_RE.sub("", token.replace(".", ""))


def normalize(token: str) -> str:
    return classic_filter(lowercase_filter(token))


def is_valid(term: str) -> bool:
    """A term counts only if it holds a letter; digits, punctuation and whitespace alone do not."""
    return any(ch.isalpha() for ch in term)
