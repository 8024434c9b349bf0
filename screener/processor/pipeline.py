from abc import ABC, abstractmethod
from dataclasses import dataclass

from screener.extraction.models import ErrorKind, ExtractedText, UploadedDocument
from screener.fields.extractor import ContactFields
from screener.keywords.universe import ScreeningCriteria
from screener.matching.scorer import KeywordScore


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    criteria: ScreeningCriteria
    extracted: ExtractedText | None = None
    contact: ContactFields | None = None
    checklist_score: KeywordScore | None = None
    jd_score: KeywordScore | None = None
    highlighted_text: str = ""
    error: ErrorKind | None = None

    @property
    def text(self) -> str:
        return self.extracted.content if self.extracted is not None else ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
