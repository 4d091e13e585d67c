"""Tests for common.hashing module."""

from datetime import datetime, timezone

from common.hashing import generate_article_id

PUBLISHED = datetime(2025, 3, 10, 8, 0, 0, tzinfo=timezone.utc)


class TestGenerateArticleId:
    def test_deterministic_output(self) -> None:
        result1 = generate_article_id("https://lemonde.fr/article", PUBLISHED)
        result2 = generate_article_id("https://lemonde.fr/article", PUBLISHED)
        assert result1 == result2

    def test_prefixed_with_publish_date(self) -> None:
        result = generate_article_id("https://lemonde.fr/article", PUBLISHED)
        date_part, hash_part = result.rsplit("-", 1)
        assert date_part == "2025-03-10"
        assert len(hash_part) == 8
        assert all(c in "0123456789abcdef" for c in hash_part)

    def test_different_url_produces_different_id(self) -> None:
        result1 = generate_article_id("https://lemonde.fr/article1", PUBLISHED)
        result2 = generate_article_id("https://lemonde.fr/article2", PUBLISHED)
        assert result1 != result2
