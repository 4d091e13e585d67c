"""YAML configuration loader for the clustering stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from common.config import ConfigSingleton, find_config_path, load_yaml
from cluster_articles.cluster_articles import DEFAULT_THRESHOLD, TOPIC_MAX_LENGTH
from cluster_articles.content_filter import DEFAULT_MIN_MATCHES
from cluster_articles.dedupe import ENTITY_DUPLICATE_THRESHOLD, TEXT_DUPLICATE_THRESHOLD
from cluster_articles.models import CATEGORIES
from cluster_articles.select_clusters import DEFAULT_TARGETS

CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "CLUSTER_CONFIG"


def _default_targets() -> dict[str, int]:
    return dict(DEFAULT_TARGETS)


@dataclass
class ClusterConfig:
    similarity_threshold: float = DEFAULT_THRESHOLD
    topic_max_length: int = TOPIC_MAX_LENGTH
    min_excluded_matches: int = DEFAULT_MIN_MATCHES
    dedup_entity_threshold: float = ENTITY_DUPLICATE_THRESHOLD
    dedup_text_threshold: float = TEXT_DUPLICATE_THRESHOLD
    target_clusters: dict[str, int] = field(default_factory=_default_targets)
    input_path: str = "data/raw-articles.json"
    output_path: str = "data/clustered-articles.json"

    def __post_init__(self) -> None:
        for name in ("similarity_threshold", "dedup_entity_threshold", "dedup_text_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Invalid {name}: {value}. Must be between 0 and 1")

        if self.topic_max_length < 1:
            raise ValueError(f"Invalid topic_max_length: {self.topic_max_length}. Must be positive")

        if self.min_excluded_matches < 1:
            raise ValueError(
                f"Invalid min_excluded_matches: {self.min_excluded_matches}. Must be at least 1"
            )

        if not self.target_clusters:
            raise ValueError("target_clusters must define at least one category")

        for category, target in self.target_clusters.items():
            if category not in CATEGORIES:
                raise ValueError(
                    f"Invalid category in target_clusters: {category}. "
                    f"Must be one of {list(CATEGORIES)}"
                )
            if target < 0:
                raise ValueError(f"Invalid target for {category}: {target}. Must be >= 0")

    @property
    def total_target(self) -> int:
        return sum(self.target_clusters.values())


def load_config(name: str | None = None) -> ClusterConfig:
    """Load clustering config by name (e.g., 'test' or 'prod') or path.

    Falls back to the CLUSTER_CONFIG environment variable, then 'prod'.
    """
    path = find_config_path(name, CONFIG_DIR, default_name="prod", env_var=CONFIG_ENV_VAR)
    data = load_yaml(path)

    defaults = ClusterConfig()
    return ClusterConfig(
        similarity_threshold=float(data.get("similarity_threshold", defaults.similarity_threshold)),
        topic_max_length=int(data.get("topic_max_length", defaults.topic_max_length)),
        min_excluded_matches=int(data.get("min_excluded_matches", defaults.min_excluded_matches)),
        dedup_entity_threshold=float(data.get("dedup_entity_threshold", defaults.dedup_entity_threshold)),
        dedup_text_threshold=float(data.get("dedup_text_threshold", defaults.dedup_text_threshold)),
        target_clusters={str(k): int(v) for k, v in (data.get("target_clusters") or {}).items()}
        or defaults.target_clusters,
        input_path=data.get("input_path", defaults.input_path),
        output_path=data.get("output_path", defaults.output_path),
    )


_manager: ConfigSingleton[ClusterConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
