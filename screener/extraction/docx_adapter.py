import io
from collections.abc import Iterator

import docx
from docx.document import Document as DocxDocument
from docx.table import Table
from docx.text.paragraph import Paragraph

from screener.extraction.base import BaseTextExtractor
from screener.extraction.exceptions import CorruptDocumentError


class DocxAdapter(BaseTextExtractor):
    """Extracts raw text from DOCX using python-docx.

    Paragraphs and table cells are read in document order; formatting, images
    and table structure are discarded.
    """

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            blocks = [text for text in self._iter_blocks(document) if text]
        except Exception as exc:
            raise CorruptDocumentError(f"python-docx extraction failed: {exc}") from exc
        return " ".join(blocks)

    def _iter_blocks(self, document: DocxDocument) -> Iterator[str]:
        for item in document.iter_inner_content():
            if isinstance(item, Paragraph):
                yield item.text
            elif isinstance(item, Table):
                yield from self._iter_table(item)

    def _iter_table(self, table: Table) -> Iterator[str]:
        for row in table.rows:
            for cell in row.cells:
                yield cell.text
