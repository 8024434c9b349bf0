import pytest

from screener.extraction.exceptions import CorruptDocumentError
from screener.extraction.pdfplumber_adapter import PdfPlumberAdapter


class TestPdfPlumberAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(sample_pdf_bytes)
        assert isinstance(result, str)
        assert "Hello PDF World" in result

    def test_extract_multi_page_in_page_order(self, multi_page_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(multi_page_pdf_bytes)
        assert result == "Page one content Page two content "

    def test_pages_end_with_trailing_space(self, sample_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        assert adapter.extract(sample_pdf_bytes).endswith(" ")

    def test_blank_pdf_has_no_text(self, empty_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(empty_pdf_bytes)
        assert result.strip() == ""

    def test_lines_are_collapsed_to_spaces(self, resume_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(resume_pdf_bytes)
        assert "\n" not in result
        assert "Jane Doe jane.doe@example.com" in result

    def test_extract_raises_on_invalid_bytes(self) -> None:
        adapter = PdfPlumberAdapter()
        with pytest.raises(CorruptDocumentError, match="pdfplumber"):
            adapter.extract(b"not a pdf")
