"""Data models for cluster_articles pipeline stage."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

CATEGORIES = ("geopolitique", "economie", "politique")


@dataclass(frozen=True)
class RawArticle:
    """Article as produced by the ingestion stage."""
    id: str
    title: str
    description: str
    url: str
    image_url: Optional[str]
    source: str
    category: str
    published_at: datetime
    fetched_at: datetime

    @property
    def text(self) -> str:
        return f"{self.title} {self.description}"


@dataclass
class Document:
    """Article prepared for similarity scoring."""
    article: RawArticle
    tokens: list[str]
    entities: set[str]


@dataclass
class ArticleCluster:
    """Group of articles about the same event."""
    id: str
    topic: str
    category: str
    importance: int
    articles: list[RawArticle] = field(default_factory=list)

    @property
    def sources(self) -> set[str]:
        return {article.source for article in self.articles}

    @property
    def is_multi_source(self) -> bool:
        return len(self.sources) >= 2

    @property
    def urls(self) -> set[str]:
        return {article.url for article in self.articles}

    @property
    def text(self) -> str:
        """Concatenated title and description of every member article."""
        return " ".join(article.text for article in self.articles)


@dataclass
class ClusteredOutput:
    """Selected clusters handed to the synthesis stage."""
    generated_at: datetime
    cluster_count: int
    clusters: list[ArticleCluster]
