from screener.extraction.extractor import DocumentTextExtractor
from screener.fields.extractor import FieldExtractor
from screener.highlighting.highlighter import Highlighter
from screener.logging.logger import Log
from screener.matching.scorer import KeywordScorer
from screener.processor.pipeline import PipelineContext, PipelineStep


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: DocumentTextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted = self._extractor.extract(context.document)
        context.error = context.extracted.error
        return context


class ExtractFieldsStep(PipelineStep):
    def __init__(self, field_extractor: FieldExtractor) -> None:
        self._field_extractor = field_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.contact = self._field_extractor.extract(context.text)
        Log.debug(
            f"Contact fields: email={context.contact.email!r}, phone={context.contact.phone!r}",
            document=context.document.name,
        )
        return context


class ScoreChecklistStep(PipelineStep):
    def __init__(self, scorer: KeywordScorer) -> None:
        self._scorer = scorer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.checklist_score = self._scorer.score(context.text, context.criteria.checklist)
        Log.info(
            f"Checklist: {len(context.checklist_score.matched)}/"
            f"{len(context.criteria.checklist)} matched",
            document=context.document.name,
        )
        return context


class ScoreJobDescriptionStep(PipelineStep):
    def __init__(self, scorer: KeywordScorer) -> None:
        self._scorer = scorer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.jd_score = self._scorer.score(context.text, context.criteria.job_description)
        Log.info(
            f"Job description: {len(context.jd_score.matched)}/"
            f"{len(context.criteria.job_description)} matched",
            document=context.document.name,
        )
        return context


class HighlightStep(PipelineStep):
    def __init__(self, highlighter: Highlighter) -> None:
        self._highlighter = highlighter

    def run(self, context: PipelineContext) -> PipelineContext:
        keywords: list[str] = []
        for score in (context.checklist_score, context.jd_score):
            if score is not None:
                keywords.extend(score.matched)
        context.highlighted_text = self._highlighter.highlight(context.text, keywords)
        return context
