import io

import pdfplumber

from screener.extraction.base import BaseTextExtractor
from screener.extraction.exceptions import CorruptDocumentError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber word runs."""

    def extract(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                if not pdf.pages:
                    raise CorruptDocumentError("pdfplumber found no pages")
                pages = [
                    " ".join(word["text"] for word in page.extract_words())
                    for page in pdf.pages
                ]
        except CorruptDocumentError:
            raise
        except Exception as exc:
            raise CorruptDocumentError(f"pdfplumber extraction failed: {exc}") from exc
        return "".join(f"{page} " for page in pages)
