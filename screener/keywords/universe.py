"""Construction of the two keyword universes scored for every document."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import ClassVar

CHECKLIST = "checklist"
JOB_DESCRIPTION = "job_description"


@dataclass(frozen=True)
class KeywordUniverse:
    """Ordered, duplicate-free set of lower-case keywords."""

    name: str
    keywords: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.keywords)

    def __len__(self) -> int:
        return len(self.keywords)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self.keywords

    @property
    def is_empty(self) -> bool:
        return not self.keywords


@dataclass(frozen=True)
class KeywordSelection:
    """Raw keyword input collected by the presentation layer."""

    skills: Sequence[str] = ()
    certifications: Sequence[str] = ()
    education: Sequence[str] = ()
    keywords: str = ""
    job_description: str = ""


@dataclass(frozen=True)
class ScreeningCriteria:
    """Both universes for one batch. Built once, shared read-only by workers."""

    checklist: KeywordUniverse = field(default_factory=lambda: KeywordUniverse(CHECKLIST))
    job_description: KeywordUniverse = field(
        default_factory=lambda: KeywordUniverse(JOB_DESCRIPTION)
    )


def _dedupe(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


class UniverseBuilder:
    """Normalizes recruiter selections and job-description text into universes."""

    _NON_ALNUM_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9 ]")

    def __init__(self, min_job_token_length: int = 4) -> None:
        self._min_job_token_length = min_job_token_length

    def build_checklist(
        self,
        skills: Iterable[str] = (),
        certifications: Iterable[str] = (),
        education: Iterable[str] = (),
        free_text: str = "",
    ) -> KeywordUniverse:
        """Union of selections and typed keywords, lower-cased, first-seen order.

        Every item is trimmed; blank items are dropped since an empty keyword
        would match any text.
        """
        items = (
            item.strip()
            for item in (*skills, *certifications, *education, *self.split_keywords(free_text))
        )
        return KeywordUniverse(CHECKLIST, _dedupe(item.lower() for item in items if item))

    def build_job_description(self, text: str) -> KeywordUniverse:
        """Tokenize free text, keeping alphanumeric words longer than three chars."""
        cleaned = self._NON_ALNUM_RE.sub("", text or "")
        tokens = (
            token.lower()
            for token in cleaned.split()
            if len(token) >= self._min_job_token_length
        )
        return KeywordUniverse(JOB_DESCRIPTION, _dedupe(tokens))

    def build(self, selection: KeywordSelection) -> ScreeningCriteria:
        return ScreeningCriteria(
            checklist=self.build_checklist(
                selection.skills,
                selection.certifications,
                selection.education,
                selection.keywords,
            ),
            job_description=self.build_job_description(selection.job_description),
        )

    @staticmethod
    def split_keywords(free_text: str) -> list[str]:
        """Split comma-separated input, trimming and dropping empty tokens."""
        return [token.strip() for token in (free_text or "").split(",") if token.strip()]
