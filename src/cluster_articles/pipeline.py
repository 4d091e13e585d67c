"""Run the clustering stage over one batch of raw articles."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from cluster_articles.cluster_articles import cluster_articles
from cluster_articles.config import ClusterConfig, get_config
from cluster_articles.content_filter import filter_articles
from cluster_articles.io.read_articles import deduplicate_articles
from cluster_articles.models import ArticleCluster, ClusteredOutput, RawArticle
from cluster_articles.select_clusters import select_clusters

logger = logging.getLogger(__name__)


def run_clustering(
    articles: list[RawArticle],
    config: ClusterConfig | None = None,
    now: datetime | None = None,
) -> tuple[ClusteredOutput, list[ArticleCluster]]:
    """Deduplicate, filter, cluster and select.

    Without an explicit config, the stage config from get_config() is used.

    Returns:
        The selected output and the full list of clusters it was chosen from.
    """
    config = config or get_config()
    now = now or datetime.now(timezone.utc)

    unique = deduplicate_articles(articles)
    if len(unique) < len(articles):
        logger.info("Removed %d duplicate articles by URL", len(articles) - len(unique))

    kept, _ = filter_articles(unique, min_matches=config.min_excluded_matches)

    clusters = cluster_articles(
        kept,
        threshold=config.similarity_threshold,
        topic_max_length=config.topic_max_length,
        now=now,
    )
    selected = select_clusters(
        clusters,
        targets=config.target_clusters,
        entity_threshold=config.dedup_entity_threshold,
        text_threshold=config.dedup_text_threshold,
    )

    output = ClusteredOutput(
        generated_at=now,
        cluster_count=len(selected),
        clusters=selected,
    )
    return output, clusters
