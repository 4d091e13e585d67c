"""Load and validate the raw article batch produced by ingestion."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from common.datetime import parse_datetime
from common.hashing import generate_article_id
from cluster_articles.models import CATEGORIES, RawArticle

logger = logging.getLogger(__name__)


class InvalidArticleError(ValueError):
    """Raised when the input batch or one of its records is malformed."""


def _require_str(record: dict, key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidArticleError(f"Article field '{key}' must be a non-empty string, got {value!r}")
    return value


def _optional_str(record: dict, key: str) -> str | None:
    value = record.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidArticleError(f"Article field '{key}' must be a string or null, got {value!r}")
    return value


def _parse_timestamp(record: dict, key: str, default: datetime | None = None) -> datetime:
    value = record.get(key)
    if value is None and default is not None:
        return default
    if not isinstance(value, (str, datetime)):
        raise InvalidArticleError(f"Article field '{key}' must be an ISO timestamp, got {value!r}")
    try:
        return parse_datetime(value)
    except ValueError as exc:
        raise InvalidArticleError(f"Article field '{key}' is not an ISO timestamp: {value!r}") from exc


def parse_raw_article(record: Any, now: datetime | None = None) -> RawArticle:
    """Validate one JSON record and build a RawArticle.

    A missing id is derived from the URL and publish date; a missing
    fetchedAt defaults to now.
    """
    if not isinstance(record, dict):
        raise InvalidArticleError(f"Article record must be an object, got {type(record).__name__}")

    url = _require_str(record, "url")
    category = _require_str(record, "category")
    if category not in CATEGORIES:
        raise InvalidArticleError(f"Unknown category {category!r}. Must be one of {list(CATEGORIES)}")

    published_at = _parse_timestamp(record, "publishedAt")
    fetched_at = _parse_timestamp(record, "fetchedAt", default=now or datetime.now(timezone.utc))

    return RawArticle(
        id=_optional_str(record, "id") or generate_article_id(url, published_at),
        title=_require_str(record, "title"),
        description=_optional_str(record, "description") or "",
        url=url,
        image_url=_optional_str(record, "imageUrl"),
        source=_require_str(record, "source"),
        category=category,
        published_at=published_at,
        fetched_at=fetched_at,
    )


def parse_raw_articles_document(data: Any) -> list[RawArticle]:
    """Parse the {generatedAt, articleCount, articles} document."""
    if not isinstance(data, dict):
        raise InvalidArticleError("Raw articles document must be a JSON object")

    records = data.get("articles")
    if not isinstance(records, list):
        raise InvalidArticleError("Raw articles document has no 'articles' list")

    articles = [parse_raw_article(record) for record in records]

    declared = data.get("articleCount")
    if declared is not None and declared != len(articles):
        logger.warning("articleCount is %s but document holds %d articles", declared, len(articles))

    return articles


def load_raw_articles(path: str | Path) -> list[RawArticle]:
    """Load the raw article batch from a local JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidArticleError: If the file is not a valid raw articles document.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Raw articles file not found: {filepath}")

    try:
        with filepath.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise InvalidArticleError(f"Raw articles file is not valid JSON: {filepath}") from exc

    articles = parse_raw_articles_document(data)
    logger.info("Loaded %d raw articles from %s", len(articles), filepath)
    return articles


def deduplicate_articles(articles: list[RawArticle]) -> list[RawArticle]:
    """Drop articles whose URL was already seen, keeping the first."""
    seen: dict[str, RawArticle] = {}
    for article in articles:
        if article.url in seen:
            logger.warning("Skipped duplicate article: id=%s url=%s", article.id, article.url)
            continue
        seen[article.url] = article
    return list(seen.values())
