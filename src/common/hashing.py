"""Hashing utilities."""

import hashlib
from datetime import datetime


def generate_article_id(url: str, published_at: datetime) -> str:
    """Generate a stable article ID from URL and publish date."""
    url_hash = hashlib.sha256(url.encode()).hexdigest()[:8]
    return f"{published_at.date().isoformat()}-{url_hash}"
