"""Regex-based extraction of contact identifiers from resume text.

Every match is collected in source order; absence is reported with the
``NOT_FOUND`` sentinel instead of an exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

NOT_FOUND = "Not found"
SEPARATOR = "; "


@dataclass(frozen=True)
class ContactFields:
    """Contact identifiers found in a document."""

    email: str = NOT_FOUND
    phone: str = NOT_FOUND


class FieldExtractor:
    """Finds email addresses and phone numbers in plain text."""

    _EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}",
    )
    # Units are single digits or parenthesised groups such as "(555)" or "(0)",
    # separated by at most two of "-", "." or space.
    _PHONE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?<!\w)"
        r"\+?(?:\(\d{1,4}\)|\d)"
        r"(?:[ .\-]{0,2}(?:\(\d{1,4}\)|\d))*"
        r"(?!\w)",
    )
    _NON_DIGIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\D")
    # Phone-shaped runs that are really date ranges or IPv4 addresses.
    _NOT_PHONE_RES: ClassVar[tuple[re.Pattern[str], ...]] = (
        re.compile(r"\d{4} ?- ?\d{4}"),
        re.compile(r"\d{1,3}(?:\.\d{1,3}){3}"),
    )

    def __init__(self, min_phone_digits: int = 7) -> None:
        self._min_phone_digits = min_phone_digits

    def extract(self, text: str) -> ContactFields:
        return ContactFields(
            email=self._join(self.find_emails(text)),
            phone=self._join(self.find_phones(text)),
        )

    def find_emails(self, text: str) -> list[str]:
        return self._EMAIL_RE.findall(text)

    def find_phones(self, text: str) -> list[str]:
        """Return phone-shaped runs with enough digits to rule out noise."""
        phones: list[str] = []
        for match in self._PHONE_RE.finditer(text):
            candidate = match.group(0)
            digits = self._NON_DIGIT_RE.sub("", candidate)
            if len(digits) < self._min_phone_digits:
                continue
            if any(pattern.fullmatch(candidate) for pattern in self._NOT_PHONE_RES):
                continue
            phones.append(candidate)
        return phones

    @staticmethod
    def _join(values: list[str]) -> str:
        return SEPARATOR.join(values) if values else NOT_FOUND
