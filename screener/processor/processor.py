from collections.abc import Sequence

from screener.config.settings import Settings
from screener.extraction.factory import ExtractorFactory
from screener.extraction.models import UploadedDocument
from screener.fields.extractor import FieldExtractor
from screener.highlighting.highlighter import Highlighter
from screener.keywords.universe import ScreeningCriteria
from screener.logging.logger import Log
from screener.matching.scorer import KeywordScorer
from screener.processor.models import ScreeningResult
from screener.processor.pipeline import PipelineContext, PipelineStep
from screener.processor.steps import (
    ExtractFieldsStep,
    ExtractTextStep,
    HighlightStep,
    ScoreChecklistStep,
    ScoreJobDescriptionStep,
)


class Processor:
    """Runs the screening steps for a single document.

    Pipeline: extract -> contact fields -> checklist score -> job-description
    score -> highlight. A step that sets ``context.error`` stops the pipeline
    and the document yields an error result.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(
        self,
        document: UploadedDocument,
        criteria: ScreeningCriteria,
    ) -> ScreeningResult:
        Log.info("Screening document", document=document.name)
        context = PipelineContext(document=document, criteria=criteria)
        for step in self._steps:
            context = step.run(context)
            if context.error is not None:
                Log.warning(
                    f"Stopped after {type(step).__name__}: {context.error.value}",
                    document=document.name,
                )
                return ScreeningResult.failed(document.name, context.error)
        return self._to_result(context)

    @staticmethod
    def _to_result(context: PipelineContext) -> ScreeningResult:
        contact = context.contact
        checklist = context.checklist_score
        jd = context.jd_score
        return ScreeningResult(
            file_name=context.document.name,
            email=contact.email if contact else "",
            phone=contact.phone if contact else "",
            checklist_matched=checklist.matched if checklist else (),
            checklist_missing=checklist.missing if checklist else (),
            checklist_score=checklist.percentage if checklist else "",
            jd_matched=jd.matched if jd else (),
            jd_missing=jd.missing if jd else (),
            jd_score=jd.percentage if jd else "",
            highlighted_text=context.highlighted_text,
            full_text=context.text,
        )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    scorer = KeywordScorer()
    return Processor(
        steps=[
            ExtractTextStep(ExtractorFactory.create(settings)),
            ExtractFieldsStep(FieldExtractor(min_phone_digits=settings.min_phone_digits)),
            ScoreChecklistStep(scorer),
            ScoreJobDescriptionStep(scorer),
            HighlightStep(
                Highlighter(
                    start_tag=settings.highlight_start_tag,
                    end_tag=settings.highlight_end_tag,
                )
            ),
        ]
    )
