"""TF-IDF vectors over one batch of tokenized articles."""

from __future__ import annotations

import numpy as np


def build_vocabulary(corpus: list[list[str]]) -> dict[str, int]:
    """Map each distinct term to a column index, in first-seen order."""
    vocabulary: dict[str, int] = {}
    for tokens in corpus:
        for term in tokens:
            vocabulary.setdefault(term, len(vocabulary))
    return vocabulary


def term_count_matrix(corpus: list[list[str]], vocabulary: dict[str, int]) -> np.ndarray:
    """Raw term counts as a documents x vocabulary matrix."""
    counts = np.zeros((len(corpus), len(vocabulary)), dtype=float)
    for row, tokens in enumerate(corpus):
        for term in tokens:
            counts[row, vocabulary[term]] += 1
    return counts


def document_frequencies(counts: np.ndarray) -> np.ndarray:
    """Number of documents containing each vocabulary term."""
    return np.count_nonzero(counts, axis=0)


def build_tfidf(corpus: list[list[str]]) -> np.ndarray:
    """Build one TF-IDF row per document, in corpus order.

    weight = raw term count * ln(N / df), with N the corpus size. A term that
    appears in every document therefore gets weight 0, and an empty document
    gets an all-zero row.
    """
    vocabulary = build_vocabulary(corpus)
    counts = term_count_matrix(corpus, vocabulary)
    if counts.size == 0:
        return counts

    idf = np.log(len(corpus) / document_frequencies(counts))
    return counts * idf
