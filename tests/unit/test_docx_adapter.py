import pytest

from screener.extraction.docx_adapter import DocxAdapter
from screener.extraction.exceptions import CorruptDocumentError


class TestDocxAdapter:
    def test_paragraphs_joined_with_spaces(self, resume_docx_bytes: bytes) -> None:
        result = DocxAdapter().extract(resume_docx_bytes)
        assert result == (
            "Jane Doe jane.doe@example.com Phone: 555-123-4567 Skills: Python, SQL, Docker"
        )

    def test_table_text_kept_in_document_order(self, table_docx_bytes: bytes) -> None:
        result = DocxAdapter().extract(table_docx_bytes)
        assert result == "Profile Kubernetes Terraform After table"

    def test_empty_document_returns_empty_string(self, empty_docx_bytes: bytes) -> None:
        assert DocxAdapter().extract(empty_docx_bytes) == ""

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(CorruptDocumentError, match="python-docx"):
            DocxAdapter().extract(b"definitely not a zip archive")

    def test_raises_on_pdf_bytes(self, sample_pdf_bytes: bytes) -> None:
        with pytest.raises(CorruptDocumentError):
            DocxAdapter().extract(sample_pdf_bytes)
