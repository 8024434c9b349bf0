from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordScore:
    """Outcome of matching one universe against one document."""

    matched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    percentage: str = ""


def format_percentage(matched: int, total: int) -> str:
    """Render ``matched / total`` as a whole percentage, halves rounded up.

    Returns an empty string when there is nothing to score against.
    """
    if total <= 0:
        return ""
    # Integer form of floor(matched / total * 100 + 0.5).
    return f"{(200 * matched + total) // (2 * total)}%"


class KeywordScorer:
    """Scores documents by case-insensitive substring containment.

    Matching is deliberately not word-bounded: ``"ai"`` counts as present in
    ``"maintain"``. Highlighting applies whole-word matching separately.
    """

    def score(self, text: str, universe: Iterable[str]) -> KeywordScore:
        haystack = text.lower()
        keywords = list(universe)
        matched: list[str] = []
        missing: list[str] = []
        for keyword in keywords:
            (matched if keyword.lower() in haystack else missing).append(keyword)
        return KeywordScore(
            matched=tuple(matched),
            missing=tuple(missing),
            percentage=format_percentage(len(matched), len(keywords)),
        )
