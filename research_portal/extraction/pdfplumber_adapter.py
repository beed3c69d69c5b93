import io

import pdfplumber

from research_portal.extraction.base import BasePdfExtractor
from research_portal.extraction.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts word runs from PDF pages using pdfplumber."""

    def extract_pages(self, pdf_bytes: bytes) -> list[list[str]]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [
                    [word["text"] for word in page.extract_words()]
                    for page in pdf.pages
                ]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
