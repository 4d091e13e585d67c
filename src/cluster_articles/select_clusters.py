"""Pick the clusters handed to synthesis under per-category quotas."""

from __future__ import annotations

import logging

from cluster_articles.dedupe import (
    ENTITY_DUPLICATE_THRESHOLD,
    TEXT_DUPLICATE_THRESHOLD,
    is_duplicate_of_any,
)
from cluster_articles.models import ArticleCluster

logger = logging.getLogger(__name__)

DEFAULT_TARGETS = {"geopolitique": 4, "economie": 1, "politique": 1}


def _by_importance(clusters: list[ArticleCluster]) -> list[ArticleCluster]:
    return sorted(clusters, key=lambda cluster: cluster.importance, reverse=True)


def prioritize_clusters(clusters: list[ArticleCluster]) -> list[ArticleCluster]:
    """Order clusters: multi-source first, then single-source, each by importance."""
    multi_source = [cluster for cluster in clusters if cluster.is_multi_source]
    single_source = [cluster for cluster in clusters if not cluster.is_multi_source]
    return _by_importance(multi_source) + _by_importance(single_source)


def select_clusters(
    clusters: list[ArticleCluster],
    targets: dict[str, int] | None = None,
    entity_threshold: float = ENTITY_DUPLICATE_THRESHOLD,
    text_threshold: float = TEXT_DUPLICATE_THRESHOLD,
) -> list[ArticleCluster]:
    """
    Select up to sum(targets) non-duplicate clusters.

    Categories are filled in the iteration order of targets, then any shortfall
    is backfilled from all categories. Duplicates are judged only against
    clusters accepted so far, so earlier picks win.

    Args:
        clusters: All clusters from the builder.
        targets: Ordered quota per category.
        entity_threshold: Entity Jaccard at which two clusters are duplicates.
        text_threshold: Text cosine at which two clusters are duplicates.

    Returns:
        Selected clusters sorted by descending importance.
    """
    targets = DEFAULT_TARGETS if targets is None else targets
    total_target = sum(targets.values())
    candidates = prioritize_clusters(clusters)
    selected: list[ArticleCluster] = []

    def _accept(cluster: ArticleCluster) -> bool:
        if is_duplicate_of_any(selected, cluster, entity_threshold, text_threshold):
            logger.debug("Skipping duplicate cluster %s: %s", cluster.id, cluster.topic)
            return False
        selected.append(cluster)
        return True

    for category, target in targets.items():
        accepted = 0
        for cluster in candidates:
            if accepted >= target:
                break
            if cluster.category == category and _accept(cluster):
                accepted += 1
        if accepted < target:
            logger.info("Category %s under-supplied: %d/%d clusters", category, accepted, target)

    if len(selected) < total_target:
        logger.info("Backfilling %d slots from all categories", total_target - len(selected))
        for cluster in candidates:
            if len(selected) >= total_target:
                break
            if any(cluster is existing for existing in selected):
                continue
            _accept(cluster)

    logger.info("Selected %d/%d clusters", len(selected), total_target)
    return _by_importance(selected)
