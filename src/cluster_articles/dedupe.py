"""Detect clusters covering a topic that is already selected."""

from __future__ import annotations

import logging

from cluster_articles.entities import extract_entities
from cluster_articles.models import ArticleCluster
from cluster_articles.similarity import cosine_similarity, jaccard_similarity
from cluster_articles.tokenize import tokenize
from cluster_articles.vectorize import build_tfidf

logger = logging.getLogger(__name__)

ENTITY_DUPLICATE_THRESHOLD = 0.5
TEXT_DUPLICATE_THRESHOLD = 0.25


def cluster_text_similarity(first: ArticleCluster, second: ArticleCluster) -> float:
    """Cosine similarity of two clusters' texts, vectorized as a 2-document corpus."""
    vectors = build_tfidf([tokenize(first.text), tokenize(second.text)])
    return cosine_similarity(vectors[0], vectors[1])


def is_duplicate(
    selected: ArticleCluster,
    candidate: ArticleCluster,
    entity_threshold: float = ENTITY_DUPLICATE_THRESHOLD,
    text_threshold: float = TEXT_DUPLICATE_THRESHOLD,
) -> bool:
    """Return True if candidate repeats the topic of selected.

    Any one of: strong entity overlap, a shared article URL, or high text
    similarity.
    """
    entity_similarity = jaccard_similarity(
        extract_entities(selected.text), extract_entities(candidate.text)
    )
    if entity_similarity >= entity_threshold:
        logger.debug(
            "%s duplicates %s (entity similarity %.2f)", candidate.id, selected.id, entity_similarity
        )
        return True

    if selected.urls & candidate.urls:
        logger.debug("%s duplicates %s (shared url)", candidate.id, selected.id)
        return True

    text_similarity = cluster_text_similarity(selected, candidate)
    if text_similarity >= text_threshold:
        logger.debug(
            "%s duplicates %s (text similarity %.2f)", candidate.id, selected.id, text_similarity
        )
        return True

    return False


def is_duplicate_of_any(
    selected: list[ArticleCluster],
    candidate: ArticleCluster,
    entity_threshold: float = ENTITY_DUPLICATE_THRESHOLD,
    text_threshold: float = TEXT_DUPLICATE_THRESHOLD,
) -> bool:
    """Check candidate against every already selected cluster."""
    return any(
        is_duplicate(existing, candidate, entity_threshold, text_threshold)
        for existing in selected
    )
