from __future__ import annotations

import dataclasses
import logging
import math
import re
from typing import Dict, List, Pattern

from .config import DEFAULT_CONFIG, SummaryConfig
from .segment import Sentence

# Lightweight extractive scoring (no ML, no external API)

logger = logging.getLogger(__name__)


def _words_rx(*words: str) -> Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(words) + r")\b", re.IGNORECASE)


# class name -> pattern; every match adds one point
SCORING_PATTERNS: Dict[str, Pattern[str]] = {
    "conclusion": _words_rx(
        r"in conclusion", r"conclusions?", r"conclude[sd]?", r"in summary", r"findings?",
        r"important", r"significant(?:ly)?", r"key", r"crucial", r"essential",
    ),
    "transition": _words_rx(
        r"however", r"therefore", r"thus", r"consequently", r"furthermore", r"moreover",
        r"because", r"as a result", r"in addition", r"nevertheless", r"hence",
    ),
    "research": _words_rx(
        r"research", r"study", r"studies", r"experiments?", r"investigations?", r"surveys?",
        r"hypothes[ie]s", r"literature",
    ),
    "method": _words_rx(
        r"methods?", r"methodology", r"approach(?:es)?", r"process(?:es)?", r"procedures?",
        r"techniques?", r"framework", r"implementation",
    ),
    "data": _words_rx(
        r"data", r"datasets?", r"evidence", r"statistics?", r"statistical", r"percent(?:age)?",
        r"measurements?", r"samples?", r"metrics?", r"figures?", r"tables?",
    ),
}

# Also fires on ordinary sentence-initial words; kept as-is so scores stay reproducible.
_PROPER_NOUN_RX = re.compile(r"[A-Z][a-z]+")


def score_sentence(text: str, index: int, total: int, cfg: SummaryConfig = DEFAULT_CONFIG) -> int:
    score = 0

    # position: first or last slice of the document
    ratio = cfg.position_edge_ratio
    if index < ratio * total or index > (1 - ratio) * total:
        score += 2

    for rx in SCORING_PATTERNS.values():
        score += len(rx.findall(text))

    n_words = len(text.split())
    if cfg.length_bonus_min_words <= n_words <= cfg.length_bonus_max_words:
        score += 1

    if len(_PROPER_NOUN_RX.findall(text)) > cfg.proper_noun_min_matches:
        score += 1

    return score


def score_sentences(sentences: List[Sentence], cfg: SummaryConfig = DEFAULT_CONFIG) -> List[Sentence]:
    total = len(sentences)
    return [dataclasses.replace(s, score=score_sentence(s.text, s.index, total, cfg)) for s in sentences]


# rounding keeps float noise (0.15 * 100 -> 15.000000000000002) from adding a point
def key_point_limit(n_sentences: int, cfg: SummaryConfig = DEFAULT_CONFIG) -> int:
    return min(cfg.max_key_points, math.ceil(round(cfg.key_point_ratio * n_sentences, 9)))


def select_key_sentences(scored: List[Sentence], cfg: SummaryConfig = DEFAULT_CONFIG) -> List[Sentence]:
    """Pick the top-scoring sentences and return them in document order.

    Equal scores keep the earlier sentence first.
    """
    limit = key_point_limit(len(scored), cfg)
    top = sorted(scored, key=lambda s: (-s.score, s.index))[:limit]
    top_sorted = sorted(top, key=lambda s: s.index)
    logger.debug("selected %d of %d sentences as key points", len(top_sorted), len(scored))
    return top_sorted
