"""Write the clustered output document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from common.cli_helpers import save_json_local
from common.serialization import serialize_dataclass
from cluster_articles.models import ClusteredOutput

logger = logging.getLogger(__name__)


def build_output_document(output: ClusteredOutput) -> dict[str, Any]:
    """Serialize to the camelCase JSON shape consumed by synthesis."""
    return serialize_dataclass(output, camel_case=True)


def write_clustered_output(output: ClusteredOutput, path: str | Path) -> Path:
    """Write the clustered output as pretty-printed JSON."""
    filepath = save_json_local(build_output_document(output), path)
    logger.info("Saved %d clusters to %s", output.cluster_count, filepath)
    return filepath
