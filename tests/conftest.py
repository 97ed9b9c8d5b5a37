"""Pytest configuration and shared corpus builders."""

from typing import List

import pytest


def finding_sentence(i: int) -> str:
    """A 25-word sentence mentioning an important finding and a research study."""
    return (
        f"Sentence number {i} reports an important finding from the research study that "
        "the team completed over several months of careful work in the field today"
    )


def finding_corpus(n: int = 50) -> str:
    return ". ".join(finding_sentence(i) for i in range(n)) + "."


def plain_words(n: int, word: str = "word") -> str:
    return " ".join([word] * n)


@pytest.fixture
def scenario_corpus() -> str:
    """Fifty index-varied sentences; topics research and findings dominate."""
    return finding_corpus(50)


@pytest.fixture
def scenario_sentences() -> List[str]:
    return [finding_sentence(i) for i in range(50)]
