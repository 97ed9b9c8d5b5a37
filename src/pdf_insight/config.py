"""Thresholds and configuration loading.

Every tunable constant of the summarizer lives on ``SummaryConfig`` so the
algorithms never carry magic literals. A YAML file may override any of them
under a ``summary:`` mapping.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError


@dataclasses.dataclass(frozen=True)
class SummaryConfig:
    # segmentation
    min_sentence_chars: int = 20
    min_paragraph_chars: int = 50
    min_content_chars: int = 100

    # key-point selection
    max_key_points: int = 8
    key_point_ratio: float = 0.15

    # sentence scoring
    position_edge_ratio: float = 0.1
    length_bonus_min_words: int = 10
    length_bonus_max_words: int = 30
    proper_noun_min_matches: int = 2  # bonus when strictly more

    # topics
    min_topic_matches: int = 3
    max_topics: int = 4

    # assembly
    words_per_page: int = 250
    detailed_min_words: int = 500
    comprehensive_min_words: int = 1000
    multi_topic_min_topics: int = 2  # multi-topic when strictly more
    intro_sentences: int = 3
    conclusion_sentences: int = 2
    min_section_chars: int = 20


DEFAULT_CONFIG = SummaryConfig()

# used as divisors
_POSITIVE_SETTINGS = {"words_per_page"}


def load_config(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    return data


def summary_config_from(cfg: Optional[Dict[str, Any]]) -> SummaryConfig:
    """Build a SummaryConfig from the ``summary:`` section of a loaded config.

    Unknown keys and values of the wrong type raise ConfigError; missing keys
    keep their defaults.
    """
    section = (cfg or {}).get("summary") or {}
    if not isinstance(section, dict):
        raise ConfigError("'summary' must be a mapping")

    fields = {f.name: f for f in dataclasses.fields(SummaryConfig)}
    unknown = sorted(set(section) - set(fields))
    if unknown:
        raise ConfigError(f"Unknown summary setting(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for name, raw in section.items():
        default = getattr(DEFAULT_CONFIG, name)
        # bool is an int subclass, never a valid threshold
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ConfigError(f"summary.{name} must be a number, got {raw!r}")
        if isinstance(default, int) and not isinstance(raw, int):
            raise ConfigError(f"summary.{name} must be an integer, got {raw!r}")
        if raw < 0:
            raise ConfigError(f"summary.{name} must not be negative")
        if raw == 0 and name in _POSITIVE_SETTINGS:
            raise ConfigError(f"summary.{name} must be greater than zero")
        values[name] = type(default)(raw)
    return SummaryConfig(**values)
