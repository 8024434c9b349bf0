from collections.abc import Sequence
from enum import Enum

from screener.processor.models import ScreeningResult

KEYWORD_SEPARATOR = ", "


class RecordLayout(str, Enum):
    """Column sets available for tabular export."""

    DUAL = "dual"
    SIMPLE = "simple"


class RecordBuilder:
    """Converts ScreeningResult objects to flat, string-valued records.

    Key order of the returned dicts is the column order of the export.
    """

    def __init__(self, layout: RecordLayout = RecordLayout.DUAL) -> None:
        self._layout = RecordLayout(layout)

    def build(self, result: ScreeningResult) -> dict[str, str]:
        if self._layout is RecordLayout.SIMPLE:
            return self._simple(result)
        return self._dual(result)

    def build_all(self, results: Sequence[ScreeningResult]) -> list[dict[str, str]]:
        return [self.build(result) for result in results]

    def _dual(self, result: ScreeningResult) -> dict[str, str]:
        return {
            "File": result.file_name,
            "Email": result.email,
            "Phone": result.phone,
            "Matched": KEYWORD_SEPARATOR.join(result.checklist_matched),
            "Missing": KEYWORD_SEPARATOR.join(result.checklist_missing),
            "Score": result.checklist_score,
            "JDMatch": KEYWORD_SEPARATOR.join(result.jd_matched),
            "JDScore": result.jd_score,
            "JDMissing": KEYWORD_SEPARATOR.join(result.jd_missing),
            "Error": _error_value(result),
        }

    def _simple(self, result: ScreeningResult) -> dict[str, str]:
        return {
            "File": result.file_name,
            "Email": result.email,
            "Phone": result.phone,
            "Matched": KEYWORD_SEPARATOR.join(result.checklist_matched),
            "Missing": KEYWORD_SEPARATOR.join(result.checklist_missing),
            "Score": result.checklist_score,
            "Text": result.full_text,
            "Error": _error_value(result),
        }


def _error_value(result: ScreeningResult) -> str:
    return result.error.value if result.error is not None else ""
