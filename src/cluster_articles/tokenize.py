"""Normalize article text into content words."""

import re
import unicodedata

from cluster_articles.stopwords import STOP_WORDS

MIN_TOKEN_LENGTH = 3

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def strip_accents(text: str) -> str:
    """Decompose accented characters and drop the combining marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def tokenize(text: str) -> list[str]:
    """Split text into lowercase, accent-free content words.

    Tokens shorter than three characters and stop-words are dropped.
    """
    if not isinstance(text, str):
        raise TypeError(f"tokenize expects str, got {type(text).__name__}")
    normalized = _NON_ALNUM.sub(" ", strip_accents(text.lower()))
    return [
        token
        for token in normalized.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]
