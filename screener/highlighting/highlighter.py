"""Whole-word keyword highlighting for reviewer display.

Processing flow:
1. Find every whole-word, case-insensitive occurrence of each keyword in the
   original text.
2. Merge overlapping spans so each region is wrapped exactly once.
3. Insert start/end markers around the merged spans, leaving every other
   character untouched.
"""

from __future__ import annotations

import re
from collections.abc import Iterable


class Highlighter:
    """Wraps whole-word keyword occurrences in start/end markers."""

    def __init__(self, start_tag: str = "<mark>", end_tag: str = "</mark>") -> None:
        self._start_tag = start_tag
        self._end_tag = end_tag

    def highlight(self, text: str, keywords: Iterable[str]) -> str:
        spans = self._merge(self._find_spans(text, keywords))
        if not spans:
            return text

        parts: list[str] = []
        cursor = 0
        for start, end in spans:
            parts.append(text[cursor:start])
            parts.append(f"{self._start_tag}{text[start:end]}{self._end_tag}")
            cursor = end
        parts.append(text[cursor:])
        return "".join(parts)

    def _find_spans(self, text: str, keywords: Iterable[str]) -> list[tuple[int, int]]:
        spans: list[tuple[int, int]] = []
        for keyword in dict.fromkeys(keywords):
            if not keyword:
                continue
            # Lookarounds instead of \b so keywords like "c++" or "c#" still anchor.
            pattern = re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)", re.IGNORECASE)
            spans.extend((m.start(), m.end()) for m in pattern.finditer(text))
        return spans

    @staticmethod
    def _merge(spans: list[tuple[int, int]]) -> list[tuple[int, int]]:
        """Sort spans and fold overlapping ones together (longer span wins)."""
        merged: list[tuple[int, int]] = []
        for start, end in sorted(spans, key=lambda span: (span[0], -span[1])):
            if merged and start < merged[-1][1]:
                prev_start, prev_end = merged[-1]
                merged[-1] = (prev_start, max(prev_end, end))
            else:
                merged.append((start, end))
        return merged
