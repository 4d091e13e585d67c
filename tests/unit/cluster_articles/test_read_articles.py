"""Tests for cluster_articles.io.read_articles module."""

import json
from datetime import datetime, timezone

import pytest

from cluster_articles.io.read_articles import (
    InvalidArticleError,
    deduplicate_articles,
    load_raw_articles,
    parse_raw_article,
    parse_raw_articles_document,
)


def _record(**overrides) -> dict:
    record = {
        "id": "2025-03-10-abcd1234",
        "title": "Frappes nocturnes sur Kyiv",
        "description": "Bilan lourd dans la capitale",
        "url": "https://example.com/kyiv",
        "imageUrl": "https://example.com/kyiv.jpg",
        "source": "Le Monde",
        "category": "geopolitique",
        "publishedAt": "2025-03-10T08:00:00.000Z",
        "fetchedAt": "2025-03-10T09:00:00.000Z",
    }
    record.update(overrides)
    return record


class TestParseRawArticle:
    def test_parses_valid_record(self) -> None:
        article = parse_raw_article(_record())

        assert article.id == "2025-03-10-abcd1234"
        assert article.image_url == "https://example.com/kyiv.jpg"
        assert article.published_at == datetime(2025, 3, 10, 8, 0, tzinfo=timezone.utc)
        assert article.fetched_at == datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
        assert article.text == "Frappes nocturnes sur Kyiv Bilan lourd dans la capitale"

    def test_missing_id_is_generated(self) -> None:
        article = parse_raw_article(_record(id=None))
        assert article.id.startswith("2025-03-10-")
        assert len(article.id) == len("2025-03-10-") + 8

    def test_null_description_becomes_empty(self) -> None:
        assert parse_raw_article(_record(description=None)).description == ""

    def test_null_image_url(self) -> None:
        assert parse_raw_article(_record(imageUrl=None)).image_url is None

    def test_missing_fetched_at_defaults_to_now(self) -> None:
        now = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)
        record = _record()
        del record["fetchedAt"]
        assert parse_raw_article(record, now=now).fetched_at == now

    def test_unknown_category_raises(self) -> None:
        with pytest.raises(InvalidArticleError, match="category"):
            parse_raw_article(_record(category="sport"))

    def test_non_string_title_raises(self) -> None:
        with pytest.raises(InvalidArticleError, match="title"):
            parse_raw_article(_record(title=42))

    def test_missing_url_raises(self) -> None:
        record = _record()
        del record["url"]
        with pytest.raises(InvalidArticleError, match="url"):
            parse_raw_article(record)

    def test_non_string_description_raises(self) -> None:
        with pytest.raises(InvalidArticleError, match="description"):
            parse_raw_article(_record(description=["a"]))

    def test_bad_timestamp_raises(self) -> None:
        with pytest.raises(InvalidArticleError, match="publishedAt"):
            parse_raw_article(_record(publishedAt="yesterday"))

    def test_missing_published_at_raises(self) -> None:
        with pytest.raises(InvalidArticleError, match="publishedAt"):
            parse_raw_article(_record(publishedAt=None))

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(InvalidArticleError):
            parse_raw_article(["not", "a", "record"])

    def test_invalid_article_error_is_value_error(self) -> None:
        assert issubclass(InvalidArticleError, ValueError)


class TestParseRawArticlesDocument:
    def test_parses_articles(self) -> None:
        data = {"generatedAt": "2025-03-10T09:00:00Z", "articleCount": 1, "articles": [_record()]}
        articles = parse_raw_articles_document(data)
        assert [article.id for article in articles] == ["2025-03-10-abcd1234"]

    def test_count_mismatch_is_tolerated(self) -> None:
        data = {"articleCount": 5, "articles": [_record()]}
        assert len(parse_raw_articles_document(data)) == 1

    def test_empty_articles_list(self) -> None:
        assert parse_raw_articles_document({"articles": []}) == []

    def test_missing_articles_raises(self) -> None:
        with pytest.raises(InvalidArticleError):
            parse_raw_articles_document({"generatedAt": "2025-03-10T09:00:00Z"})

    def test_non_object_raises(self) -> None:
        with pytest.raises(InvalidArticleError):
            parse_raw_articles_document([_record()])

    def test_one_bad_record_fails_whole_batch(self) -> None:
        with pytest.raises(InvalidArticleError):
            parse_raw_articles_document({"articles": [_record(), _record(title=None)]})


class TestLoadRawArticles:
    def test_loads_file(self, tmp_path) -> None:
        path = tmp_path / "raw-articles.json"
        path.write_text(json.dumps({"articleCount": 1, "articles": [_record()]}), encoding="utf-8")
        assert len(load_raw_articles(path)) == 1

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_raw_articles(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path) -> None:
        path = tmp_path / "raw-articles.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidArticleError):
            load_raw_articles(path)


class TestDeduplicateArticles:
    def test_keeps_first_per_url(self, make_article) -> None:
        first = make_article("Titre", url="https://example.com/a")
        duplicate = make_article("Autre titre", url="https://example.com/a")
        other = make_article("Titre", url="https://example.com/b")

        assert deduplicate_articles([first, duplicate, other]) == [first, other]

    def test_empty(self) -> None:
        assert deduplicate_articles([]) == []
