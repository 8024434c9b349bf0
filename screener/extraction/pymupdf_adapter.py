import pymupdf

from screener.extraction.base import BaseTextExtractor
from screener.extraction.exceptions import CorruptDocumentError

# Index of the word string inside a pymupdf "words" tuple:
# (x0, y0, x1, y1, word, block_no, line_no, word_no)
_WORD_INDEX = 4


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF word runs."""

    def extract(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                # MuPDF repairs broken files silently; nothing left means nothing usable.
                if doc.page_count == 0:
                    raise CorruptDocumentError("pymupdf found no pages")
                pages = [
                    " ".join(word[_WORD_INDEX] for word in page.get_text("words"))
                    for page in doc
                ]
        except CorruptDocumentError:
            raise
        except Exception as exc:
            raise CorruptDocumentError(f"pymupdf extraction failed: {exc}") from exc
        return "".join(f"{page} " for page in pages)
