from screener.config.settings import Settings
from screener.extraction.base import BaseTextExtractor
from screener.extraction.docx_adapter import DocxAdapter
from screener.extraction.extractor import DocumentTextExtractor
from screener.extraction.models import DocumentFormat
from screener.extraction.pdfplumber_adapter import PdfPlumberAdapter
from screener.extraction.pymupdf_adapter import PyMuPdfAdapter


class ExtractorFactory:
    """Creates the document extractor with the configured PDF engine."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create_pdf_adapter(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create(cls, settings: Settings) -> DocumentTextExtractor:
        return DocumentTextExtractor(
            adapters={
                DocumentFormat.PDF: cls.create_pdf_adapter(settings),
                DocumentFormat.DOCX: DocxAdapter(),
            },
            flag_empty=settings.flag_empty_documents,
        )
