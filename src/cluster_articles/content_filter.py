"""Drop sports and entertainment articles before clustering."""

from __future__ import annotations

import logging

from cluster_articles.models import RawArticle

logger = logging.getLogger(__name__)

DEFAULT_MIN_MATCHES = 2

EXCLUDED_KEYWORDS = frozenset({
    # Sports
    "football", "match", "league", "ligue 1", "ligue des champions", "champions league",
    "championnat", "coupe du monde", "world cup", "mercato", "transfert", "buteur",
    "rugby", "tennis", "roland-garros", "wimbledon", "basket", "nba", "formule 1",
    "formula 1", "grand prix", "tour de france", "jeux olympiques", "olympics",
    "entraîneur", "sélectionneur", "stade", "supporters", "psg", "olympique de marseille",
    # Entertainment
    "cinéma", "box-office", "box office", "festival de cannes", "oscars",
    "série télé", "netflix", "en concert", "album", "rappeur", "chanteuse", "chanteur",
    "téléréalité", "célébrité", "celebrity", "eurovision",
})


def count_excluded_keywords(text: str, keywords: frozenset[str] = EXCLUDED_KEYWORDS) -> int:
    """Count distinct excluded keywords found in text (case-insensitive)."""
    lowered = text.lower()
    return sum(1 for keyword in keywords if keyword in lowered)


def is_excluded(
    text: str,
    min_matches: int = DEFAULT_MIN_MATCHES,
    keywords: frozenset[str] = EXCLUDED_KEYWORDS,
) -> bool:
    """Return True when text matches at least min_matches excluded keywords.

    A single hit is tolerated: country names and generic words overlap with
    team and event names, so one match alone is not evidence of a sports or
    entertainment story.
    """
    return count_excluded_keywords(text, keywords) >= min_matches


def filter_articles(
    articles: list[RawArticle],
    min_matches: int = DEFAULT_MIN_MATCHES,
) -> tuple[list[RawArticle], list[RawArticle]]:
    """Split articles into (kept, excluded)."""
    kept = []
    excluded = []
    for article in articles:
        if is_excluded(article.text, min_matches):
            logger.debug("Excluding off-topic article: id=%s title=%s", article.id, article.title)
            excluded.append(article)
        else:
            kept.append(article)

    logger.info("Content filter kept %d articles, excluded %d", len(kept), len(excluded))
    return kept, excluded
