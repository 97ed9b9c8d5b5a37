"""Summarization entry points.

``summarize_documents`` is the outer call boundary: it always returns either a
complete SummaryResult or one of the two notice strings, never raises for
problems inside the pipeline.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional, Sequence, Union

from .classify import classify_topics
from .config import DEFAULT_CONFIG, SummaryConfig
from .report import ANALYSIS_FAILED_NOTICE, INSUFFICIENT_CONTENT_NOTICE, SummaryResult, assemble_summary
from .segment import segment_corpus
from .summarizer import score_sentences, select_key_sentences

logger = logging.getLogger(__name__)

CORPUS_SEPARATOR = "\n\n"


@dataclasses.dataclass(frozen=True)
class Document:
    identifier: str
    text: str
    size_bytes: int = 0


def join_corpus(documents: Sequence[Document]) -> str:
    return CORPUS_SEPARATOR.join(d.text for d in documents)


def analyze_corpus(
    corpus: str, document_count: int, cfg: SummaryConfig = DEFAULT_CONFIG
) -> Union[SummaryResult, str]:
    if len(corpus.strip()) < cfg.min_content_chars:
        logger.info("corpus too short for analysis (%d chars)", len(corpus.strip()))
        return INSUFFICIENT_CONTENT_NOTICE

    segmentation = segment_corpus(corpus, cfg)
    key_sentences = select_key_sentences(score_sentences(segmentation.sentences, cfg), cfg)
    # independent of sentence scoring
    topics = classify_topics(corpus, cfg)
    return assemble_summary(document_count, corpus, segmentation, key_sentences, topics, cfg)


def summarize_documents(
    documents: Sequence[Document], cfg: Optional[SummaryConfig] = None
) -> Union[SummaryResult, str]:
    cfg = cfg or DEFAULT_CONFIG
    try:
        corpus = join_corpus(documents)
        return analyze_corpus(corpus, len(documents), cfg)
    except Exception:
        logger.exception("document analysis failed")
        return ANALYSIS_FAILED_NOTICE


def summarize_text(text: str, cfg: Optional[SummaryConfig] = None) -> Union[SummaryResult, str]:
    return summarize_documents([Document(identifier="text", text=text)], cfg)
