from __future__ import annotations

import dataclasses
import logging
import re
from typing import List

from .config import DEFAULT_CONFIG, SummaryConfig

logger = logging.getLogger(__name__)

# Purely syntactic: "e.g." or "Dr." produce false boundaries.
_SENT_SPLIT_RX = re.compile(r"[.!?]+")
_PARA_SPLIT_RX = re.compile(r"\n\s*\n")


@dataclasses.dataclass(frozen=True)
class Sentence:
    """A candidate sentence.

    - index: position among candidates in document order, fixed at creation
    - score: filled in by the scorer through ``dataclasses.replace``
    """

    text: str
    index: int
    score: int = 0


@dataclasses.dataclass(frozen=True)
class Segmentation:
    sentences: List[Sentence]
    paragraphs: List[str]


def split_sentences(corpus: str, cfg: SummaryConfig = DEFAULT_CONFIG) -> List[Sentence]:
    parts = [p.strip() for p in _SENT_SPLIT_RX.split(corpus)]
    kept = [p for p in parts if len(p) > cfg.min_sentence_chars]
    return [Sentence(text=t, index=i) for i, t in enumerate(kept)]


def split_paragraphs(corpus: str, cfg: SummaryConfig = DEFAULT_CONFIG) -> List[str]:
    parts = [p.strip() for p in _PARA_SPLIT_RX.split(corpus)]
    return [p for p in parts if len(p) > cfg.min_paragraph_chars]


def segment_corpus(corpus: str, cfg: SummaryConfig = DEFAULT_CONFIG) -> Segmentation:
    seg = Segmentation(sentences=split_sentences(corpus, cfg), paragraphs=split_paragraphs(corpus, cfg))
    logger.debug("segmented corpus: %d sentences, %d paragraphs", len(seg.sentences), len(seg.paragraphs))
    return seg
