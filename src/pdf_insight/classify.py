from __future__ import annotations

import dataclasses
import logging
import re
from typing import Dict, List, Pattern, Tuple

from .config import DEFAULT_CONFIG, SummaryConfig

logger = logging.getLogger(__name__)


def _terms_rx(*terms: str) -> Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(terms) + r")\b", re.IGNORECASE)


# Declaration order is the tie-break for equal match counts.
TOPIC_TAXONOMY: Tuple[Tuple[str, Pattern[str]], ...] = (
    (
        "Research & Methodology",
        _terms_rx(
            r"research", r"study", r"studies", r"methodology", r"methods?", r"experiments?",
            r"experimental", r"hypothes[ie]s", r"surveys?", r"literature",
        ),
    ),
    (
        "Results & Findings",
        _terms_rx(
            r"results?", r"findings?", r"outcomes?", r"conclusions?", r"discover(?:ed|y|ies)",
            r"revealed", r"demonstrated", r"showed",
        ),
    ),
    (
        "Technical Details",
        _terms_rx(
            r"technical", r"technology", r"technologies", r"systems?", r"software", r"hardware",
            r"algorithms?", r"architecture", r"specifications?", r"protocols?",
        ),
    ),
    (
        "Business & Strategy",
        _terms_rx(
            r"business(?:es)?", r"strateg(?:y|ies|ic)", r"markets?", r"marketing", r"revenue",
            r"customers?", r"growth", r"investments?", r"competitive", r"stakeholders?",
        ),
    ),
    (
        "Process & Procedures",
        _terms_rx(
            r"process(?:es)?", r"procedures?", r"workflows?", r"steps?", r"guidelines?",
            r"operations?", r"phases?", r"stages?",
        ),
    ),
    (
        "Data & Analytics",
        _terms_rx(
            r"data", r"analytics", r"analysis", r"analyses", r"statistics?", r"statistical",
            r"metrics?", r"datasets?", r"measurements?", r"trends?",
        ),
    ),
    (
        "Recommendations",
        _terms_rx(
            r"recommend(?:s|ed|ations?)?", r"suggest(?:s|ed|ions?)?", r"should", r"advised?",
            r"propose[sd]?", r"best practices?",
        ),
    ),
)


@dataclasses.dataclass(frozen=True)
class Topic:
    label: str
    match_count: int


def count_topic_matches(corpus: str) -> Dict[str, int]:
    return {label: len(rx.findall(corpus)) for label, rx in TOPIC_TAXONOMY}


def classify_topics(corpus: str, cfg: SummaryConfig = DEFAULT_CONFIG) -> List[Topic]:
    counts = count_topic_matches(corpus)
    found = [Topic(label, n) for label, n in counts.items() if n >= cfg.min_topic_matches]
    # sorted() is stable: equal counts stay in taxonomy order
    ranked = sorted(found, key=lambda t: t.match_count, reverse=True)[: cfg.max_topics]
    logger.debug("topics: %s", ", ".join(f"{t.label}={t.match_count}" for t in ranked) or "none")
    return ranked
