import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _build_pdf(pages: list[list[str]]) -> bytes:
    """Render one PDF page per entry, one text line per string."""
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


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page PDF with known text content."""
    return _build_pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Two-page PDF with two lines on the first page."""
    return _build_pdf([["Page one content", "Revenue grew 12%"], ["Page two content"]])


@pytest.fixture()
def blank_middle_page_pdf_bytes() -> bytes:
    """Three pages, the middle one without any text."""
    return _build_pdf([["First page"], [], ["Last page"]])


@pytest.fixture()
def percent_encoded_pdf_bytes() -> bytes:
    """PDF whose text contains a percent-encoded run."""
    return _build_pdf([["Caf%C3%A9 margins"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with no text content (blank page)."""
    return _build_pdf([[]])
