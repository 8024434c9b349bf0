import io
import logging
from collections.abc import Iterator

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

RESUME_LINES = (
    "Jane Doe",
    "jane.doe@example.com",
    "Phone: 555-123-4567",
    "Skills: Python, SQL, Docker",
)


def _pdf(*pages: tuple[str, ...]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buf.getvalue()


def _docx(paragraphs: tuple[str, ...] = (), table: tuple[str, ...] = ()) -> bytes:
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    if table:
        grid = document.add_table(rows=1, cols=len(table))
        for cell, text in zip(grid.rows[0].cells, table):
            cell.text = text
        document.add_paragraph("After table")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture(autouse=True)
def _reset_screener_logger() -> Iterator[None]:
    """Drop handlers bound to a captured stdout so they don't leak across tests."""
    logger = logging.getLogger("screener")
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf(("Hello PDF World",))


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf(("Page one content",), ("Page two content",))


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf(())


@pytest.fixture()
def resume_pdf_bytes() -> bytes:
    return _pdf(RESUME_LINES)


@pytest.fixture()
def resume_docx_bytes() -> bytes:
    return _docx(paragraphs=RESUME_LINES)


@pytest.fixture()
def table_docx_bytes() -> bytes:
    return _docx(paragraphs=("Profile",), table=("Kubernetes", "Terraform"))


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    return _docx()
