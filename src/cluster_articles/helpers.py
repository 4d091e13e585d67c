"""Helper functions for cluster_articles CLI."""

from __future__ import annotations

import argparse
import logging

from cluster_articles.models import ArticleCluster, CATEGORIES

logger = logging.getLogger(__name__)

MAX_REPORTED_CLUSTERS = 10


def parse_cluster_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for cluster_articles."""

    parser = argparse.ArgumentParser(description="Cluster raw articles and select stories.")

    # Input options
    parser.add_argument(
        "--config",
        default=None,
        help="Config name or path (default: $CLUSTER_CONFIG or 'prod')",
    )
    parser.add_argument("--input", default=None, help="Raw articles JSON file (default: from config)")
    parser.add_argument(
        "--input-s3-key",
        default=None,
        help="Read raw articles from this key in $S3_BUCKET_NAME instead of a local file",
    )

    # Output options
    parser.add_argument("--output", default=None, help="Clustered output JSON file (default: from config)")
    parser.add_argument("--load-s3", action="store_true", help="Upload results to S3")
    parser.add_argument(
        "--load-local",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Save results to local file (default: True)",
    )

    return parser.parse_args(argv)


def log_cluster_report(clusters: list[ArticleCluster], selected: list[ArticleCluster]) -> None:
    """Log multi-source clusters and a summary of the selection."""
    multi_source = [cluster for cluster in clusters if len(cluster.articles) > 1]
    logger.info("Multi-article clusters: %d", len(multi_source))
    for cluster in multi_source[:MAX_REPORTED_CLUSTERS]:
        logger.info(
            "  [%s] (%d/10) %s | %d articles: %s",
            cluster.category[:4].upper(),
            cluster.importance,
            cluster.topic[:50],
            len(cluster.articles),
            ", ".join(sorted(cluster.sources)),
        )

    logger.info("Selected clusters: %d", len(selected))
    for category in CATEGORIES:
        count = sum(1 for cluster in selected if cluster.category == category)
        logger.info("  %s: %d", category, count)

    total_articles = sum(len(cluster.articles) for cluster in selected)
    multi_selected = sum(1 for cluster in selected if len(cluster.articles) > 1)
    logger.info("Total articles in selected clusters: %d", total_articles)
    logger.info("Multi-article clusters selected: %d/%d", multi_selected, len(selected))
