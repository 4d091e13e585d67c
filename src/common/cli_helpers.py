"""Common CLI helper utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def save_json_local(document: dict[str, Any], path: str | Path) -> Path:
    """Save a JSON document to a local file.

    Args:
        document: JSON-serializable mapping to save.
        path: Destination file. Parent directories are created.

    Returns:
        Path to the created file.
    """
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with filepath.open("w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, default=str, ensure_ascii=False)
    return filepath
