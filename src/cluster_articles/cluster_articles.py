"""Group articles into topic clusters with greedy seed-based TF-IDF matching."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone

import numpy as np

from common.datetime import hours_since
from cluster_articles.entities import extract_entities
from cluster_articles.models import ArticleCluster, Document, RawArticle
from cluster_articles.similarity import document_similarity
from cluster_articles.tokenize import tokenize
from cluster_articles.vectorize import build_tfidf

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.20
TOPIC_MAX_LENGTH = 80
MIN_IMPORTANCE = 1
MAX_IMPORTANCE = 10


def prepare_documents(articles: list[RawArticle]) -> list[Document]:
    """Tokenize and entity-tag each article."""
    return [
        Document(
            article=article,
            tokens=tokenize(article.text),
            entities=extract_entities(article.text),
        )
        for article in articles
    ]


def compute_importance(articles: list[RawArticle], now: datetime | None = None) -> int:
    """Score a cluster from 1 to 10.

    More articles and more distinct publishers raise the score; a cluster whose
    newest article is under 6 hours old gets +2, under 12 hours +1.
    """
    now = now or datetime.now(timezone.utc)
    num_articles = len(articles)
    num_sources = len({article.source for article in articles})

    score = 1.5 * num_articles + 3 * num_sources
    if articles:
        newest = max(article.published_at for article in articles)
        age_hours = hours_since(newest, now)
        if age_hours < 6:
            score += 2
        elif age_hours < 12:
            score += 1

    # Round half up
    importance = int(math.floor(score + 0.5))
    return min(MAX_IMPORTANCE, max(MIN_IMPORTANCE, importance))


def cluster_articles(
    articles: list[RawArticle],
    threshold: float = DEFAULT_THRESHOLD,
    topic_max_length: int = TOPIC_MAX_LENGTH,
    now: datetime | None = None,
) -> list[ArticleCluster]:
    """
    Partition articles into clusters.

    Articles are visited in order. Each unassigned article seeds a new cluster
    and pulls in every later unassigned article whose combined similarity to
    the seed is above threshold. Members are compared to the seed only, never
    to each other, so two members of one cluster may be unrelated. This is
    O(n^2) in the batch size.

    Args:
        articles: Articles surviving the content filter.
        threshold: Minimum combined similarity (exclusive) to join a seed.
        topic_max_length: Max characters of the seed title kept as topic.
        now: Reference time for recency scoring (defaults to UTC now).

    Returns:
        Clusters in discovery order; every article is in exactly one.
    """
    if not articles:
        logger.warning("No articles to cluster")
        return []

    now = now or datetime.now(timezone.utc)
    documents = prepare_documents(articles)
    vectors = build_tfidf([document.tokens for document in documents])

    logger.info("Clustering %d articles (threshold=%.2f)", len(documents), threshold)

    assigned = np.zeros(len(documents), dtype=bool)
    clusters: list[ArticleCluster] = []

    for i, seed in enumerate(documents):
        if assigned[i]:
            continue
        assigned[i] = True
        members = [seed.article]

        for j in range(i + 1, len(documents)):
            if assigned[j]:
                continue
            candidate = documents[j]
            similarity = document_similarity(
                vectors[i], seed.entities, vectors[j], candidate.entities
            )
            if similarity > threshold:
                members.append(candidate.article)
                assigned[j] = True

        clusters.append(
            ArticleCluster(
                id=f"cluster-{len(clusters) + 1}",
                topic=seed.article.title[:topic_max_length],
                category=seed.article.category,
                importance=compute_importance(members, now),
                articles=members,
            )
        )

    multi_source = sum(1 for cluster in clusters if cluster.is_multi_source)
    logger.info("Built %d clusters (%d multi-source)", len(clusters), multi_source)
    return clusters
