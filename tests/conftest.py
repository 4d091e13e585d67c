"""Shared fixtures for unit tests."""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from cluster_articles.config import reset_config
from cluster_articles.models import ArticleCluster, RawArticle

NOW = datetime(2025, 3, 10, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _reset_stage_config():
    yield
    reset_config()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_article():
    counter = itertools.count(1)

    def _make(
        title: str,
        description: str = "",
        source: str = "Le Monde",
        category: str = "geopolitique",
        url: str | None = None,
        hours_ago: float = 1.0,
    ) -> RawArticle:
        n = next(counter)
        return RawArticle(
            id=f"article-{n}",
            title=title,
            description=description,
            url=url or f"https://example.com/articles/{n}",
            image_url=None,
            source=source,
            category=category,
            published_at=NOW - timedelta(hours=hours_ago),
            fetched_at=NOW,
        )

    return _make


@pytest.fixture
def make_cluster(make_article):
    counter = itertools.count(1)

    def _make(
        title: str,
        category: str = "geopolitique",
        importance: int = 5,
        sources: tuple[str, ...] = ("Le Monde",),
    ) -> ArticleCluster:
        n = next(counter)
        articles = [make_article(title, source=source, category=category) for source in sources]
        return ArticleCluster(
            id=f"cluster-{n}",
            topic=title,
            category=category,
            importance=importance,
            articles=articles,
        )

    return _make
