from dataclasses import dataclass

from screener.extraction.models import ErrorKind


@dataclass(frozen=True)
class ScreeningResult:
    """Outcome of screening one document.

    Error results keep ``file_name`` and ``error`` and leave every other field
    empty.
    """

    file_name: str
    email: str = ""
    phone: str = ""
    checklist_matched: tuple[str, ...] = ()
    checklist_missing: tuple[str, ...] = ()
    checklist_score: str = ""
    jd_matched: tuple[str, ...] = ()
    jd_missing: tuple[str, ...] = ()
    jd_score: str = ""
    highlighted_text: str = ""
    full_text: str = ""
    error: ErrorKind | None = None

    @classmethod
    def failed(cls, file_name: str, error: ErrorKind) -> "ScreeningResult":
        return cls(file_name=file_name, error=error)
