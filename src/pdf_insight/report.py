from __future__ import annotations

import dataclasses
import enum
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .classify import Topic
from .config import DEFAULT_CONFIG, SummaryConfig
from .segment import Segmentation, Sentence

INSUFFICIENT_CONTENT_NOTICE = (
    "Insufficient content to generate a meaningful summary. "
    "Please provide documents with more text content."
)
ANALYSIS_FAILED_NOTICE = (
    "Unable to analyze the document content. Please try again with different documents."
)
PROVENANCE_NOTE = (
    "This summary was produced by extractive analysis of the supplied document text; "
    "key points are quoted from the source in document order."
)


class DepthLabel(str, enum.Enum):
    CONCISE = "Concise"
    DETAILED = "Detailed"
    COMPREHENSIVE = "Comprehensive"


class StructureLabel(str, enum.Enum):
    FOCUSED = "Focused"
    MULTI_TOPIC = "Multi-topic"


@dataclasses.dataclass(frozen=True)
class SummaryResult:
    document_count: int
    word_count: int
    page_estimate: int
    topics: Tuple[str, ...]
    key_points: Tuple[str, ...]
    introduction: Optional[str]
    conclusion: Optional[str]
    depth_label: DepthLabel
    structure_label: StructureLabel

    def to_dict(self) -> Dict[str, Any]:
        d = dataclasses.asdict(self)
        d["topics"] = list(self.topics)
        d["key_points"] = list(self.key_points)
        d["depth_label"] = self.depth_label.value
        d["structure_label"] = self.structure_label.value
        return d


def count_words(corpus: str) -> int:
    return len(corpus.split())


def depth_label_for(word_count: int, cfg: SummaryConfig = DEFAULT_CONFIG) -> DepthLabel:
    if word_count > cfg.comprehensive_min_words:
        return DepthLabel.COMPREHENSIVE
    if word_count > cfg.detailed_min_words:
        return DepthLabel.DETAILED
    return DepthLabel.CONCISE


def structure_label_for(topic_count: int, cfg: SummaryConfig = DEFAULT_CONFIG) -> StructureLabel:
    if topic_count > cfg.multi_topic_min_topics:
        return StructureLabel.MULTI_TOPIC
    return StructureLabel.FOCUSED


def _join_section(sentences: Sequence[Sentence], cfg: SummaryConfig) -> Optional[str]:
    text = ". ".join(s.text for s in sentences)
    return text if len(text) > cfg.min_section_chars else None


def assemble_summary(
    document_count: int,
    corpus: str,
    segmentation: Segmentation,
    key_sentences: List[Sentence],
    topics: List[Topic],
    cfg: SummaryConfig = DEFAULT_CONFIG,
) -> SummaryResult:
    word_count = count_words(corpus)
    sentences = segmentation.sentences

    introduction = _join_section(sentences[: cfg.intro_sentences], cfg)
    conclusion = None
    if cfg.conclusion_sentences > 0:
        conclusion = _join_section(sentences[-cfg.conclusion_sentences :], cfg)
    # a very short corpus yields the same text for both
    if conclusion == introduction:
        conclusion = None

    return SummaryResult(
        document_count=document_count,
        word_count=word_count,
        page_estimate=math.ceil(word_count / cfg.words_per_page),
        topics=tuple(t.label for t in topics),
        key_points=tuple(s.text for s in key_sentences),
        introduction=introduction,
        conclusion=conclusion,
        depth_label=depth_label_for(word_count, cfg),
        structure_label=structure_label_for(len(topics), cfg),
    )


def render_summary(result: SummaryResult) -> str:
    """Render a SummaryResult as markdown.

    Section order is fixed: overview, topics, key points, introduction,
    conclusion, analysis, provenance note. Empty sections are left out.
    """
    lines = []
    lines.append("## DOCUMENT OVERVIEW\n")
    lines.append(f"- documents: {result.document_count}")
    lines.append(f"- words: {result.word_count}")
    lines.append(f"- estimated pages: {result.page_estimate}\n")
    if result.topics:
        lines.append("## MAIN TOPICS\n")
        for t in result.topics:
            lines.append(f"- {t}")
        lines.append("")
    if result.key_points:
        lines.append("## KEY POINTS\n")
        for i, p in enumerate(result.key_points, start=1):
            lines.append(f"{i}. {p}.")
        lines.append("")
    if result.introduction:
        lines.append("## INTRODUCTION\n")
        lines.append(f"{result.introduction}.\n")
    if result.conclusion:
        lines.append("## CONCLUSION\n")
        lines.append(f"{result.conclusion}.\n")
    lines.append("## ANALYSIS\n")
    lines.append(f"- content depth: {result.depth_label.value}")
    lines.append(f"- structure: {result.structure_label.value}")
    lines.append(f"- key points extracted: {len(result.key_points)}\n")
    lines.append(f"_{PROVENANCE_NOTE}_")
    return "\n".join(lines).strip() + "\n"
