"""Text and entity similarity between articles."""

from __future__ import annotations

import numpy as np

# Entity overlap at or above this level is allowed to override weak text similarity
ENTITY_OVERRIDE_THRESHOLD = 0.5
ENTITY_OVERRIDE_WEIGHT = 0.8
TEXT_WEIGHT = 0.6
ENTITY_WEIGHT = 0.4


def cosine_similarity(vec1: np.ndarray, vec2: np.ndarray) -> float:
    """Cosine similarity of two TF-IDF rows; 0 if either has zero norm."""
    norm1 = np.linalg.norm(vec1)
    norm2 = np.linalg.norm(vec2)
    if norm1 == 0 or norm2 == 0:
        return 0.0
    return float(np.dot(vec1, vec2) / (norm1 * norm2))


def jaccard_similarity(set1: set[str], set2: set[str]) -> float:
    """Jaccard index of two sets; 0 if either is empty."""
    if not set1 or not set2:
        return 0.0
    return len(set1 & set2) / len(set1 | set2)


def combined_similarity(text_similarity: float, entity_similarity: float) -> float:
    """Blend text and entity similarity.

    Strong entity agreement can lift a weak text match; weak entity overlap
    only contributes through the weighted average.
    """
    if entity_similarity >= ENTITY_OVERRIDE_THRESHOLD:
        return max(text_similarity, ENTITY_OVERRIDE_WEIGHT * entity_similarity)
    return TEXT_WEIGHT * text_similarity + ENTITY_WEIGHT * entity_similarity


def document_similarity(
    vec1: np.ndarray,
    entities1: set[str],
    vec2: np.ndarray,
    entities2: set[str],
) -> float:
    """Combined similarity of two documents."""
    return combined_similarity(
        cosine_similarity(vec1, vec2),
        jaccard_similarity(entities1, entities2),
    )
