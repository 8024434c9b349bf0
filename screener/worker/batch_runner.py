import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from screener.config.settings import Settings
from screener.extraction.models import ErrorKind, UploadedDocument
from screener.keywords.universe import ScreeningCriteria
from screener.logging.logger import Log
from screener.processor.models import ScreeningResult
from screener.processor.processor import Processor


class BatchRunner:
    """Screen a batch of documents, one pipeline run per file.

    Files are independent, so they run on a thread pool of
    ``settings.max_workers`` threads; ``max_workers <= 1`` runs sequentially.
    Results always come back in input order.
    """

    def __init__(self, processor: Processor, settings: Settings) -> None:
        self._processor = processor
        self._settings = settings

    def run(
        self,
        documents: Sequence[UploadedDocument],
        criteria: ScreeningCriteria,
        cancel_event: threading.Event | None = None,
    ) -> list[ScreeningResult]:
        """Screen every document.

        If *cancel_event* is set mid-batch, files not yet started are skipped
        and the results completed so far are returned.
        """
        Log.info(
            f"Screening {len(documents)} documents "
            f"({len(criteria.checklist)} checklist keywords, "
            f"{len(criteria.job_description)} job-description keywords)"
        )

        def screen(document: UploadedDocument) -> ScreeningResult | None:
            if cancel_event is not None and cancel_event.is_set():
                return None
            return self._run_one(document, criteria)

        workers = max(1, min(self._settings.max_workers, len(documents)))
        if workers == 1:
            outcomes = [screen(document) for document in documents]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                outcomes = list(executor.map(screen, documents))

        results = [result for result in outcomes if result is not None]
        if len(results) < len(documents):
            Log.warning(f"Batch cancelled: {len(results)}/{len(documents)} documents screened")
        else:
            Log.info(f"Batch complete: {len(results)} documents screened")
        return results

    def _run_one(self, document: UploadedDocument, criteria: ScreeningCriteria) -> ScreeningResult:
        """Run one document; an unexpected failure becomes that file's error result."""
        try:
            return self._processor.process(document, criteria)
        except Exception as exc:
            Log.exception(f"Screening failed: {exc}", document=document.name)
            return ScreeningResult.failed(document.name, ErrorKind.PROCESSING_FAILED)
